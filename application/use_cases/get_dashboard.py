"""
GetDashboard Use Case.

Reads a user's recent history from the record store and reduces it to the
two dashboard views: the body-weight series and today's nutrition totals.
Both fetches are read-only and run concurrently. A failed fetch never raises
out of ``execute``; the half that succeeded is still returned.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum
from typing import List, Optional

from application.ports import QueryFilter, RecordStore
from application.use_cases.submission import require_user
from domain.converters import db_rows_to_weight_series, sum_nutrition_rows
from domain.models import (
    NUTRITION_TABLE,
    PROGRESS_TABLE,
    DashboardSummary,
    NutritionTotals,
    WeightSample,
)

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_SERIES_LIMIT = 10
LOAD_FAILED_MESSAGE = "Failed to load dashboard data."


class DashboardStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class WeightSeriesPolicy(str, Enum):
    """Which samples the bounded weight series keeps."""

    # Latest N samples, returned oldest first
    MOST_RECENT = "most_recent"
    # First N samples of an ascending query (oldest N)
    EARLIEST = "earliest"


@dataclass
class DashboardResult:
    """Result of one dashboard load."""

    status: DashboardStatus
    summary: DashboardSummary = field(default_factory=DashboardSummary)
    message: Optional[str] = None
    failed_sections: List[str] = field(default_factory=list)


class GetDashboardUseCase:
    """
    Use case for computing the dashboard summary.

    Usage:
        >>> use_case = GetDashboardUseCase(store=store)
        >>> result = await use_case.execute(user_id="user-123", day=date.today())
        >>> result.summary.nutrition_totals.total_calories
        1850
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        weight_series_policy: WeightSeriesPolicy = WeightSeriesPolicy.MOST_RECENT,
        weight_series_limit: int = DEFAULT_WEIGHT_SERIES_LIMIT,
        tz: Optional[tzinfo] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            store: Record store to read from
            weight_series_policy: Which samples the bounded series keeps
            weight_series_limit: Maximum samples in the series
            tz: Timezone that defines a calendar day (naive if None)
        """
        self._store = store
        self._policy = weight_series_policy
        self._limit = weight_series_limit
        self._tz = tz

    async def fetch_weight_series(self, user_id: str) -> List[WeightSample]:
        """
        Fetch the user's bounded weight series, ascending by track date.

        The limit is applied by the store query. Under MOST_RECENT the query
        runs newest first and the rows are reversed afterwards; under
        EARLIEST the query runs oldest first, so with more than ``limit``
        samples the oldest ones are returned.

        Raises:
            RecordStoreError: If the query fails
        """
        require_user(user_id)
        descending = self._policy == WeightSeriesPolicy.MOST_RECENT

        rows = await self._store.query(
            PROGRESS_TABLE,
            columns="track_date, weight",
            filters=[QueryFilter("user_id", "eq", user_id)],
            order_by="track_date",
            descending=descending,
            limit=self._limit,
        )

        if descending:
            rows = list(reversed(rows))
        return db_rows_to_weight_series(rows)

    async def fetch_nutrition_totals(self, user_id: str, day: date) -> NutritionTotals:
        """
        Sum calories and protein logged by the user on ``day``.

        The window is [start of day, start of next day) in the configured
        timezone. Null calories or protein count as zero.

        Raises:
            RecordStoreError: If the query fails
        """
        require_user(user_id)
        start = datetime.combine(day, time.min, tzinfo=self._tz)
        end = start + timedelta(days=1)

        rows = await self._store.query(
            NUTRITION_TABLE,
            columns="calories, protein_grams",
            filters=[
                QueryFilter("user_id", "eq", user_id),
                QueryFilter("log_date", "gte", start.isoformat()),
                QueryFilter("log_date", "lt", end.isoformat()),
            ],
        )
        return sum_nutrition_rows(rows)

    async def execute(self, user_id: str, day: date) -> DashboardResult:
        """
        Load both dashboard halves concurrently.

        Returns:
            DashboardResult with status READY when both fetches succeed,
            FAILED otherwise; the succeeding half is populated either way

        Raises:
            IdentityMissingError: If ``user_id`` is missing
        """
        require_user(user_id)

        weights, totals = await asyncio.gather(
            self.fetch_weight_series(user_id),
            self.fetch_nutrition_totals(user_id, day),
            return_exceptions=True,
        )

        summary = DashboardSummary()
        failed: List[str] = []

        if isinstance(weights, BaseException):
            logger.error(f"Error fetching weight series: {weights!r}")
            failed.append("weight_series")
        else:
            summary.weight_series = weights

        if isinstance(totals, BaseException):
            logger.error(f"Error fetching nutrition totals: {totals!r}")
            failed.append("nutrition_totals")
        else:
            summary.nutrition_totals = totals

        if failed:
            return DashboardResult(
                status=DashboardStatus.FAILED,
                summary=summary,
                message=LOAD_FAILED_MESSAGE,
                failed_sections=failed,
            )
        return DashboardResult(status=DashboardStatus.READY, summary=summary)
