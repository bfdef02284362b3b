"""
SubmitProgress Use Case.

Writes one body-weight measurement. The track date is the submission time.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from application.exceptions import RecordStoreError
from application.ports import RecordStore
from application.use_cases.submission import (
    SubmissionOutcome,
    ValidationPolicy,
    require_user,
)
from domain.converters import progress_entry_to_record, validate_progress_record
from domain.models import PROGRESS_TABLE, ProgressEntry

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Progress logged successfully!"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmitProgressUseCase:
    """Use case for logging a body-weight entry."""

    def __init__(
        self,
        store: RecordStore,
        *,
        validation: ValidationPolicy = ValidationPolicy.REJECT_LOCALLY,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._validation = validation
        self._clock = clock

    async def execute(
        self,
        entry: ProgressEntry,
        *,
        user_id: str,
    ) -> SubmissionOutcome:
        """
        Execute the submit progress workflow.

        Raises:
            IdentityMissingError: If ``user_id`` is missing
        """
        require_user(user_id)
        record = progress_entry_to_record(entry, user_id=user_id, tracked_at=self._clock())

        if self._validation == ValidationPolicy.REJECT_LOCALLY:
            errors = validate_progress_record(record)
            if errors:
                logger.warning(f"Progress validation failed: {errors}")
                return SubmissionOutcome.validation_failure(errors)

        try:
            saved = await self._store.insert(PROGRESS_TABLE, record.to_row())
        except RecordStoreError as e:
            logger.warning(f"Progress insert rejected: {e.message or e.code}")
            return SubmissionOutcome.store_failure(e)
        except Exception as e:
            logger.exception(f"SubmitProgress use case failed: {e}")
            return SubmissionOutcome.store_failure(e)

        logger.info("Progress entry logged")
        return SubmissionOutcome.submitted(SUCCESS_MESSAGE, [saved])
