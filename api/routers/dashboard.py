"""
Dashboard router.

This router contains endpoints for:
- GET /dashboard - Weight series and nutrition totals for one day

The summary is recomputed from the record store on every request. A failed
half is returned as null with ``status: failed``; the other half is still
populated.
"""

import logging
from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_current_user, get_dashboard_use_case, get_settings
from api.schemas import DashboardResponse
from application.exceptions import IdentityMissingError
from application.use_cases import GetDashboardUseCase
from backend.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Dashboard"],
)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard_endpoint(
    day: Optional[date] = Query(default=None, description="Day to total (default: today)"),
    user_id: str = Depends(get_current_user),
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Get the dashboard summary for the authenticated user.

    Args:
        day: Calendar day for the nutrition totals, in the configured timezone
        user_id: Authenticated user ID

    Returns:
        Weight series, nutrition totals and load status
    """
    if day is None:
        day = datetime.now(settings.tz).date()

    try:
        result = await use_case.execute(user_id, day)
    except IdentityMissingError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return DashboardResponse.from_result(result)
