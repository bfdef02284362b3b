"""
Form sessions: the callers of the submission use cases.

A form session owns the state of one open entry form: its row collection
(or progress entry), the shared metadata, a busy flag and the last message.
It is the only place that holds a RowCollection, and nothing it holds
outlives the session.

Sessions honor two rules the use cases leave to their caller:

- while a submission is in flight (``busy``), further submits are ignored;
- once the session is closed, a late outcome is returned to the awaiting
  caller but never applied to the session state.
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Optional

from application.use_cases.submission import SubmissionOutcome, require_user
from application.use_cases.submit_nutrition import SubmitNutritionUseCase
from application.use_cases.submit_progress import SubmitProgressUseCase
from application.use_cases.submit_workout import SubmitWorkoutUseCase
from domain import editor
from domain.models import EntryKind, MealType, ProgressEntry, RowCollection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormMessage:
    """Dismissible inline message shown under a form."""
    success: bool
    text: str


class _FormSession:
    """Busy flag, liveness and message handling shared by every form."""

    def __init__(self, user_id: Optional[str]) -> None:
        self._user_id = user_id
        self.busy = False
        self.active = True
        self.message: Optional[FormMessage] = None

    def close(self) -> None:
        """Mark the form as gone; outcomes arriving later are not applied."""
        self.active = False

    def dismiss_message(self) -> None:
        self.message = None

    async def submit(self) -> Optional[SubmissionOutcome]:
        """
        Submit the form.

        Returns:
            The outcome, or None when the call was ignored because another
            submission is in flight or the form is closed

        Raises:
            IdentityMissingError: If the session has no user id
        """
        if not self.active:
            logger.info("Submit ignored: form is closed")
            return None
        if self.busy:
            logger.info("Submit ignored: a submission is already in flight")
            return None

        user_id = require_user(self._user_id)

        self.busy = True
        try:
            outcome = await self._submit(user_id)
        finally:
            self.busy = False

        if not self.active:
            logger.info("Discarding submission outcome for a closed form")
            return outcome

        self.message = FormMessage(success=outcome.success, text=outcome.message)
        if outcome.success:
            self._reset()
        return outcome

    def _submit(self, user_id: str) -> Awaitable[SubmissionOutcome]:
        raise NotImplementedError

    def _reset(self) -> None:
        raise NotImplementedError


class _RowFormSession(_FormSession):
    """A form backed by a row collection."""

    kind: EntryKind

    def __init__(self, user_id: Optional[str]) -> None:
        super().__init__(user_id)
        self.rows: RowCollection = editor.new_collection(self.kind)

    def add_row(self) -> None:
        self.rows = editor.append_blank_row(self.rows)

    def edit_field(self, index: int, field: str, value: str) -> None:
        self.rows = editor.update_field(self.rows, index, field, value)

    def remove_row(self, index: int) -> None:
        self.rows = editor.remove_row(self.rows, index)

    def _reset(self) -> None:
        self.rows = editor.reset(self.rows)


class WorkoutFormSession(_RowFormSession):
    """
    The workout form: exercise rows plus notes.

    Usage:
        >>> form = WorkoutFormSession(use_case, user_id="user-123")
        >>> form.edit_field(0, "name", "Squat")
        >>> outcome = await form.submit()
    """

    kind = EntryKind.EXERCISE

    def __init__(self, use_case: SubmitWorkoutUseCase, user_id: Optional[str]) -> None:
        super().__init__(user_id)
        self._use_case = use_case
        self.notes = ""

    def _submit(self, user_id: str) -> Awaitable[SubmissionOutcome]:
        return self._use_case.execute(self.rows, user_id=user_id, notes=self.notes)

    def _reset(self) -> None:
        super()._reset()
        self.notes = ""


class NutritionFormSession(_RowFormSession):
    """The nutrition form: food rows plus the meal type (kept after submit)."""

    kind = EntryKind.FOOD

    def __init__(
        self,
        use_case: SubmitNutritionUseCase,
        user_id: Optional[str],
        meal_type: MealType = MealType.BREAKFAST,
    ) -> None:
        super().__init__(user_id)
        self._use_case = use_case
        self.meal_type = meal_type

    def _submit(self, user_id: str) -> Awaitable[SubmissionOutcome]:
        return self._use_case.execute(self.rows, user_id=user_id, meal_type=self.meal_type)


class ProgressFormSession(_FormSession):
    """The progress form: a single weight entry with notes."""

    def __init__(self, use_case: SubmitProgressUseCase, user_id: Optional[str]) -> None:
        super().__init__(user_id)
        self._use_case = use_case
        self.entry = ProgressEntry()

    def edit_field(self, field: str, value: str) -> None:
        if field not in ProgressEntry.model_fields:
            raise ValueError(f"Unknown field '{field}' for ProgressEntry")
        self.entry = self.entry.model_copy(update={field: value})

    def _submit(self, user_id: str) -> Awaitable[SubmissionOutcome]:
        return self._use_case.execute(self.entry, user_id=user_id)

    def _reset(self) -> None:
        self.entry = ProgressEntry()
