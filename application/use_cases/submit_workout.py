"""
SubmitWorkout Use Case.

Turns the exercise rows of the workout form into one workout record and
writes it with a single insert. There is no per-row success: the whole
exercise list is embedded in the one record.
"""

import logging

from application.exceptions import RecordStoreError
from application.ports import RecordStore
from application.use_cases.submission import (
    SubmissionOutcome,
    ValidationPolicy,
    require_user,
)
from domain.converters import rows_to_workout_record, validate_workout_record
from domain.models import WORKOUTS_TABLE, EntryKind, RowCollection

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Workout logged successfully!"


class SubmitWorkoutUseCase:
    """
    Use case for logging a workout.

    Orchestrates the following workflow:
    1. Check the user id
    2. Parse every exercise row into a typed entry
    3. Validate (reject locally or pass through, per policy)
    4. Insert one ``workouts`` row

    Usage:
        >>> use_case = SubmitWorkoutUseCase(store=store)
        >>> outcome = await use_case.execute(rows, user_id="user-123", notes="felt good")
        >>> if outcome.success:
        ...     print(outcome.records[0])
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        validation: ValidationPolicy = ValidationPolicy.REJECT_LOCALLY,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            store: Record store to write to
            validation: What to do with rows that fail local validation
        """
        self._store = store
        self._validation = validation

    async def execute(
        self,
        rows: RowCollection,
        *,
        user_id: str,
        notes: str = "",
    ) -> SubmissionOutcome:
        """
        Execute the submit workout workflow.

        Args:
            rows: Exercise rows of the form
            user_id: Owning user
            notes: Free-text workout notes

        Returns:
            SubmissionOutcome with the echoed record on success

        Raises:
            IdentityMissingError: If ``user_id`` is missing
        """
        require_user(user_id)
        if rows.kind != EntryKind.EXERCISE:
            raise ValueError(f"Expected exercise rows, got {rows.kind.value}")

        record = rows_to_workout_record(rows, user_id=user_id, notes=notes)

        if self._validation == ValidationPolicy.REJECT_LOCALLY:
            errors = validate_workout_record(record)
            if errors:
                logger.warning(f"Workout validation failed: {errors}")
                return SubmissionOutcome.validation_failure(errors)

        try:
            saved = await self._store.insert(WORKOUTS_TABLE, record.to_row())
        except RecordStoreError as e:
            logger.warning(f"Workout insert rejected: {e.message or e.code}")
            return SubmissionOutcome.store_failure(e)
        except Exception as e:
            logger.exception(f"SubmitWorkout use case failed: {e}")
            return SubmissionOutcome.store_failure(e)

        logger.info(f"Workout logged with {len(record.exercises)} exercises")
        return SubmissionOutcome.submitted(SUCCESS_MESSAGE, [saved])
