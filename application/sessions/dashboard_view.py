"""
Dashboard view: the caller of the GetDashboard use case.

Each load is tagged with a generation number. A load that finishes after a
newer load has started, or after the view was closed, is dropped instead of
overwriting fresher state.
"""

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Callable, Optional

from application.use_cases.get_dashboard import (
    LOAD_FAILED_MESSAGE,
    DashboardResult,
    DashboardStatus,
    GetDashboardUseCase,
)
from application.use_cases.submission import require_user
from domain.models import DashboardSummary

logger = logging.getLogger(__name__)


class DashboardView:
    """Holds the status and last summary of one dashboard."""

    def __init__(
        self,
        use_case: GetDashboardUseCase,
        user_id: Optional[str],
        *,
        today: Optional[Callable[[], date]] = None,
        tz: Optional[tzinfo] = None,
    ) -> None:
        """
        Args:
            use_case: Dashboard use case to load from
            user_id: Signed-in user, None when nobody is signed in
            today: Clock for the default day; defaults to the date in ``tz``
            tz: Timezone that defines today (UTC if None)
        """
        self._use_case = use_case
        self._user_id = user_id
        self._tz = tz or timezone.utc
        self._today = today or self._today_in_tz
        self._generation = 0
        self.active = True
        self.status = DashboardStatus.LOADING
        self.summary = DashboardSummary()
        self.message: Optional[str] = None

    def _today_in_tz(self) -> date:
        return datetime.now(self._tz).date()

    def close(self) -> None:
        self.active = False

    async def load(self, day: Optional[date] = None) -> Optional[DashboardResult]:
        """
        Fetch a fresh summary and apply it if this load is still current.

        Returns:
            The applied result, or None when the result was discarded

        Raises:
            IdentityMissingError: If the view has no user id
        """
        user_id = require_user(self._user_id)
        self._generation += 1
        generation = self._generation
        self.status = DashboardStatus.LOADING

        try:
            result = await self._use_case.execute(user_id, day or self._today())
        except Exception as e:
            logger.exception(f"Dashboard load failed: {e}")
            result = DashboardResult(
                status=DashboardStatus.FAILED,
                message=LOAD_FAILED_MESSAGE,
                failed_sections=["weight_series", "nutrition_totals"],
            )

        if not self.active or generation != self._generation:
            logger.info(f"Discarding stale dashboard load (generation {generation})")
            return None

        self.status = result.status
        self.summary = result.summary
        self.message = result.message
        return result
