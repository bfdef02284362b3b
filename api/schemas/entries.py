"""
Pydantic models for the entry submission API.

Request bodies mirror the editable form rows: numeric fields arrive as raw
text (numbers are accepted and stringified) and are only parsed by the
submission pipeline, so "abc" in a reps field is a validation error reported
in the response body, not a 422.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from application.use_cases import ErrorKind, SubmissionOutcome, SubmissionStatus
from domain.models import ExerciseRow, FoodRow, MealType, ProgressEntry


class _RawTextModel(BaseModel):
    """Accept numbers in text fields; null means an empty field."""

    @field_validator("*", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


# =============================================================================
# Requests
# =============================================================================


class ExerciseRowIn(_RawTextModel):
    """One exercise line of a workout submission"""
    name: str = ""
    sets: str = ""
    reps: str = ""
    weight: str = ""

    def to_row(self) -> ExerciseRow:
        return ExerciseRow(**self.model_dump())


class FoodRowIn(_RawTextModel):
    """One food line of a nutrition submission"""
    name: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fats: str = ""

    def to_row(self) -> FoodRow:
        return FoodRow(**self.model_dump())


class WorkoutSubmitRequest(BaseModel):
    """Request to log a workout"""
    exercises: List[ExerciseRowIn] = Field(..., min_length=1)
    notes: str = ""


class NutritionSubmitRequest(BaseModel):
    """Request to log the food items of one meal"""
    meal_type: MealType = MealType.BREAKFAST
    foods: List[FoodRowIn] = Field(..., min_length=1)


class ProgressSubmitRequest(_RawTextModel):
    """Request to log a body-weight measurement"""
    weight: str = ""
    notes: str = ""

    def to_entry(self) -> ProgressEntry:
        return ProgressEntry(weight=self.weight, notes=self.notes)


# =============================================================================
# Responses
# =============================================================================


class SubmissionResponse(BaseModel):
    """Outcome of a submission"""
    success: bool
    status: SubmissionStatus
    message: str
    error_kind: Optional[ErrorKind] = None
    errors: List[str] = []
    written: int = 0

    @classmethod
    def from_outcome(cls, outcome: SubmissionOutcome) -> "SubmissionResponse":
        return cls(
            success=outcome.success,
            status=outcome.status,
            message=outcome.message,
            error_kind=outcome.error_kind,
            errors=outcome.errors,
            written=outcome.written,
        )
