"""
Progress router.

This router contains endpoints for:
- POST /progress - Log a body-weight measurement
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_submit_progress_use_case
from api.schemas import ProgressSubmitRequest, SubmissionResponse
from application.exceptions import IdentityMissingError
from application.use_cases import SubmitProgressUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Progress"],
)


@router.post("/progress", response_model=SubmissionResponse)
async def log_progress_endpoint(
    request: ProgressSubmitRequest,
    user_id: str = Depends(get_current_user),
    use_case: SubmitProgressUseCase = Depends(get_submit_progress_use_case),
):
    """Log a body-weight measurement for the authenticated user."""
    try:
        outcome = await use_case.execute(request.to_entry(), user_id=user_id)
    except IdentityMissingError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return SubmissionResponse.from_outcome(outcome)
