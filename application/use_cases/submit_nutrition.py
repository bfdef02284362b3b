"""
SubmitNutrition Use Case.

Writes one nutrition_logs row per food row of the nutrition form, all
stamped with the same meal type and submission time.

Two batch modes are supported (see BatchMode):

- TRANSACTIONAL issues a single bulk insert. Supabase runs a bulk insert as
  one INSERT statement, so either every row is stored or none is.
- BEST_EFFORT issues one insert per row concurrently and waits for all of
  them to settle. If any insert fails the caller gets one error outcome, but
  rows that were already written stay written; nothing is rolled back. The
  outcome reports how many rows made it (``written``) so the caller can tell
  the user.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List

from application.exceptions import RecordStoreError
from application.ports import RecordStore
from application.use_cases.submission import (
    BatchMode,
    ErrorKind,
    SubmissionOutcome,
    SubmissionStatus,
    ValidationPolicy,
    failure_message,
    require_user,
)
from domain.converters import rows_to_nutrition_records, validate_nutrition_record
from domain.models import NUTRITION_TABLE, EntryKind, MealType, NutritionRecord, RowCollection

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Nutrition logged successfully!"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmitNutritionUseCase:
    """
    Use case for logging the food items of one meal.

    Orchestrates the following workflow:
    1. Check the user id
    2. Parse every food row into a nutrition record
    3. Validate (reject locally or pass through, per policy)
    4. Persist as one transactional batch or as concurrent best-effort inserts
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        validation: ValidationPolicy = ValidationPolicy.REJECT_LOCALLY,
        batch_mode: BatchMode = BatchMode.TRANSACTIONAL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            store: Record store to write to
            validation: What to do with rows that fail local validation
            batch_mode: How the per-row inserts are issued
            clock: Source of the log date (injectable for tests)
        """
        self._store = store
        self._validation = validation
        self._batch_mode = batch_mode
        self._clock = clock

    async def execute(
        self,
        rows: RowCollection,
        *,
        user_id: str,
        meal_type: MealType,
    ) -> SubmissionOutcome:
        """
        Execute the submit nutrition workflow.

        Args:
            rows: Food rows of the form
            user_id: Owning user
            meal_type: Meal shared by every row

        Returns:
            SubmissionOutcome; ``written`` counts rows actually stored

        Raises:
            IdentityMissingError: If ``user_id`` is missing
        """
        require_user(user_id)
        if rows.kind != EntryKind.FOOD:
            raise ValueError(f"Expected food rows, got {rows.kind.value}")

        records = rows_to_nutrition_records(
            rows,
            user_id=user_id,
            meal_type=MealType(meal_type),
            logged_at=self._clock(),
        )

        if self._validation == ValidationPolicy.REJECT_LOCALLY:
            errors: List[str] = []
            for position, record in enumerate(records, start=1):
                errors.extend(validate_nutrition_record(record, position))
            if errors:
                logger.warning(f"Nutrition validation failed: {errors}")
                return SubmissionOutcome.validation_failure(errors)

        if self._batch_mode == BatchMode.TRANSACTIONAL:
            return await self._write_transactional(records)
        return await self._write_best_effort(records)

    async def _write_transactional(self, records: List[NutritionRecord]) -> SubmissionOutcome:
        try:
            saved = await self._store.insert_batch(
                NUTRITION_TABLE, [r.to_row() for r in records]
            )
        except RecordStoreError as e:
            logger.warning(f"Nutrition batch rejected: {e.message or e.code}")
            return SubmissionOutcome.store_failure(e)
        except Exception as e:
            logger.exception(f"SubmitNutrition use case failed: {e}")
            return SubmissionOutcome.store_failure(e)

        logger.info(f"Nutrition batch logged: {len(saved)} rows")
        return SubmissionOutcome.submitted(SUCCESS_MESSAGE, saved)

    async def _write_best_effort(self, records: List[NutritionRecord]) -> SubmissionOutcome:
        results = await asyncio.gather(
            *(self._store.insert(NUTRITION_TABLE, r.to_row()) for r in records),
            return_exceptions=True,
        )

        saved: List[Dict[str, Any]] = []
        failures: List[BaseException] = []
        for result in results:
            if isinstance(result, BaseException):
                failures.append(result)
            else:
                saved.append(result)

        if not failures:
            logger.info(f"Nutrition rows logged: {len(saved)}")
            return SubmissionOutcome.submitted(SUCCESS_MESSAGE, saved)

        for failure in failures:
            if not isinstance(failure, RecordStoreError):
                logger.error(f"Unexpected nutrition insert failure: {failure!r}")

        if saved:
            logger.warning(
                f"Nutrition batch partially written: {len(saved)} of {len(records)} rows "
                "stored, not rolled back"
            )
            kind = ErrorKind.PARTIAL_BATCH
        else:
            logger.warning(f"Nutrition batch failed: 0 of {len(records)} rows stored")
            kind = ErrorKind.STORE

        return SubmissionOutcome(
            status=SubmissionStatus.ERROR,
            message=failure_message(failures[0]),
            error_kind=kind,
            errors=[failure_message(f) for f in failures],
            written=len(saved),
            records=saved,
        )
