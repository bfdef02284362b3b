"""
Workouts router.

This router contains endpoints for:
- POST /workouts - Log one workout (an ordered list of exercises plus notes)

Validation problems and store rejections come back as a 200 with
``success: false``; only authentication and configuration problems are HTTP
errors.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_submit_workout_use_case
from api.schemas import SubmissionResponse, WorkoutSubmitRequest
from application.exceptions import IdentityMissingError
from application.use_cases import SubmitWorkoutUseCase
from domain.models import EntryKind, RowCollection

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


@router.post("/workouts", response_model=SubmissionResponse)
async def log_workout_endpoint(
    request: WorkoutSubmitRequest,
    user_id: str = Depends(get_current_user),
    use_case: SubmitWorkoutUseCase = Depends(get_submit_workout_use_case),
):
    """
    Log a workout for the authenticated user.

    Args:
        request: Exercise rows (raw text fields) and notes
        user_id: Authenticated user ID

    Returns:
        Submission outcome
    """
    rows = RowCollection(
        kind=EntryKind.EXERCISE,
        rows=tuple(row.to_row() for row in request.exercises),
    )

    try:
        outcome = await use_case.execute(rows, user_id=user_id, notes=request.notes)
    except IdentityMissingError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return SubmissionResponse.from_outcome(outcome)
