"""
Typed records written to the record store.

These are the transient DTOs produced by the submission pipeline from
editable rows. Numeric fields may hold ``nan`` when the source text did not
parse; validation in domain.converters.row_converters decides whether such a
record is allowed to reach the store.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field

# Table names in the record store
WORKOUTS_TABLE = "workouts"
NUTRITION_TABLE = "nutrition_logs"
PROGRESS_TABLE = "progress_tracking"


class MealType(str, Enum):
    """Meal a nutrition entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ExerciseEntry(BaseModel):
    """A parsed exercise embedded in a workout record."""

    name: str
    # int when the text parsed, nan otherwise
    sets: Union[int, float]
    reps: Union[int, float]
    weight: float = Field(..., description="Weight in lbs")


class WorkoutRecord(BaseModel):
    """One logged workout: the full ordered exercise list plus notes."""

    user_id: str
    exercises: List[ExerciseEntry]
    notes: str = ""

    def to_row(self) -> Dict[str, Any]:
        """Serialize to the ``workouts`` table shape."""
        return {
            "user_id": self.user_id,
            "exercises": [e.model_dump() for e in self.exercises],
            "notes": self.notes,
        }


class NutritionRecord(BaseModel):
    """One food item logged against a meal."""

    user_id: str
    meal_type: MealType
    food_name: str
    calories: Union[int, float]
    protein_grams: float
    carbs_grams: float
    fats_grams: float
    log_date: datetime

    def to_row(self) -> Dict[str, Any]:
        """Serialize to the ``nutrition_logs`` table shape."""
        return {
            "user_id": self.user_id,
            "meal_type": self.meal_type.value,
            "food_name": self.food_name,
            "calories": self.calories,
            "protein_grams": self.protein_grams,
            "carbs_grams": self.carbs_grams,
            "fats_grams": self.fats_grams,
            "log_date": self.log_date.isoformat(),
        }


class ProgressRecord(BaseModel):
    """One body-weight measurement."""

    user_id: str
    weight: float
    notes: str = ""
    track_date: datetime

    def to_row(self) -> Dict[str, Any]:
        """Serialize to the ``progress_tracking`` table shape."""
        return {
            "user_id": self.user_id,
            "weight": self.weight,
            "notes": self.notes,
            "track_date": self.track_date.isoformat(),
        }


SubmissionRecord = Union[WorkoutRecord, NutritionRecord, ProgressRecord]
