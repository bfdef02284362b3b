"""
Nutrition router.

This router contains endpoints for:
- POST /nutrition - Log the food items of one meal

Each food becomes its own nutrition_logs row. Depending on the configured
batch mode a store failure either stores nothing (transactional) or may
leave some rows stored (best effort); ``written`` in the response says how
many made it.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_submit_nutrition_use_case
from api.schemas import NutritionSubmitRequest, SubmissionResponse
from application.exceptions import IdentityMissingError
from application.use_cases import SubmitNutritionUseCase
from domain.models import EntryKind, RowCollection

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Nutrition"],
)


@router.post("/nutrition", response_model=SubmissionResponse)
async def log_nutrition_endpoint(
    request: NutritionSubmitRequest,
    user_id: str = Depends(get_current_user),
    use_case: SubmitNutritionUseCase = Depends(get_submit_nutrition_use_case),
):
    """
    Log one meal for the authenticated user.

    Args:
        request: Meal type and food rows (raw text fields)
        user_id: Authenticated user ID

    Returns:
        Submission outcome
    """
    rows = RowCollection(
        kind=EntryKind.FOOD,
        rows=tuple(row.to_row() for row in request.foods),
    )

    try:
        outcome = await use_case.execute(rows, user_id=user_id, meal_type=request.meal_type)
    except IdentityMissingError as e:
        raise HTTPException(status_code=401, detail=str(e))

    if outcome.written and not outcome.success:
        logger.warning(
            f"Nutrition for user {user_id} partially stored: {outcome.written} rows"
        )
    return SubmissionResponse.from_outcome(outcome)
