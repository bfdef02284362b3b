"""
Shared types for the submission use cases.

Every submit call ends in one SubmissionOutcome. Callers branch on
``status`` and ``error_kind``; the message is for display only.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from application.exceptions import IdentityMissingError, RecordStoreError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred."


class SubmissionStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ErrorKind(str, Enum):
    """Why a submission failed."""

    VALIDATION = "validation"
    STORE = "store"
    PARTIAL_BATCH = "partial_batch"


class ValidationPolicy(str, Enum):
    """What to do with records that fail local validation."""

    # Refuse the whole submission before any write
    REJECT_LOCALLY = "reject_locally"
    # Send records as transformed and let the store reject them
    PASS_THROUGH = "pass_through"


class BatchMode(str, Enum):
    """How a multi-row nutrition submission is written."""

    # One bulk insert: every row is stored or none is
    TRANSACTIONAL = "transactional"
    # One insert per row, issued concurrently; successful rows are not
    # rolled back when another row fails
    BEST_EFFORT = "best_effort"


@dataclass
class SubmissionOutcome:
    """Result of one submit call."""

    status: SubmissionStatus
    message: str
    error_kind: Optional[ErrorKind] = None
    errors: List[str] = field(default_factory=list)
    written: int = 0
    records: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status == SubmissionStatus.SUCCESS

    @classmethod
    def submitted(
        cls,
        message: str,
        records: List[Dict[str, Any]],
    ) -> "SubmissionOutcome":
        return cls(
            status=SubmissionStatus.SUCCESS,
            message=message,
            written=len(records),
            records=records,
        )

    @classmethod
    def validation_failure(cls, errors: List[str]) -> "SubmissionOutcome":
        return cls(
            status=SubmissionStatus.ERROR,
            message=errors[0] if len(errors) == 1 else f"{len(errors)} fields need attention",
            error_kind=ErrorKind.VALIDATION,
            errors=errors,
        )

    @classmethod
    def store_failure(cls, error: Exception) -> "SubmissionOutcome":
        return cls(
            status=SubmissionStatus.ERROR,
            message=failure_message(error),
            error_kind=ErrorKind.STORE,
        )


def failure_message(error: Exception) -> str:
    """User-visible message for a failed write, falling back to a generic one."""
    if isinstance(error, RecordStoreError):
        message = error.message
    else:
        message = str(error)
    return message.strip() or GENERIC_ERROR_MESSAGE


def require_user(user_id: Optional[str]) -> str:
    """
    Guard for the authenticated identity.

    Raises:
        IdentityMissingError: If ``user_id`` is missing or blank
    """
    if not user_id or not user_id.strip():
        raise IdentityMissingError()
    return user_id
