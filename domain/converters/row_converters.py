"""
Converters: editable form rows -> typed records.

Transform step of the submission pipeline. Numeric text is parsed per field
(integers for sets, reps and calories; floats for weights and macros). Text
that does not parse becomes ``nan`` instead of raising, so a whole batch can
be transformed before anyone decides what to do with bad input.

Validation is separate: the ``validate_*`` functions list every problem in a
record without raising, and the use cases choose whether to reject locally
or pass records through to the store.
"""

import math
import re
from datetime import datetime
from typing import List, Union

from domain.models import (
    ExerciseEntry,
    ExerciseRow,
    FoodRow,
    MealType,
    NutritionRecord,
    ProgressEntry,
    ProgressRecord,
    RowCollection,
    WorkoutRecord,
)

Number = Union[int, float]

# Plain ASCII decimal text only; int() and float() also accept "1_000" and
# non-ASCII digits
_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ============================================================================
# Field parsing
# ============================================================================


def parse_int(text: str) -> Number:
    """
    Parse integer text.

    Examples:
        >>> parse_int("12")
        12
        >>> parse_int("abc")
        nan
    """
    if not isinstance(text, str) or not _INT_TEXT.fullmatch(text.strip()):
        return math.nan
    return int(text.strip())


def parse_float(text: str) -> float:
    """Parse decimal text, returning nan when it does not parse."""
    if not isinstance(text, str) or not _FLOAT_TEXT.fullmatch(text.strip()):
        return math.nan
    return float(text.strip())


def is_finite(value: Number) -> bool:
    """True for ints and finite floats."""
    return isinstance(value, int) or math.isfinite(value)


# ============================================================================
# Row -> record
# ============================================================================


def exercise_row_to_entry(row: ExerciseRow) -> ExerciseEntry:
    """Convert one exercise row to a typed exercise entry."""
    return ExerciseEntry(
        name=row.name.strip(),
        sets=parse_int(row.sets),
        reps=parse_int(row.reps),
        weight=parse_float(row.weight),
    )


def rows_to_workout_record(
    collection: RowCollection,
    *,
    user_id: str,
    notes: str = "",
) -> WorkoutRecord:
    """Build the single workout record embedding every exercise row in order."""
    return WorkoutRecord(
        user_id=user_id,
        exercises=[exercise_row_to_entry(row) for row in collection.rows],
        notes=notes,
    )


def food_row_to_record(
    row: FoodRow,
    *,
    user_id: str,
    meal_type: MealType,
    logged_at: datetime,
) -> NutritionRecord:
    """Convert one food row to a nutrition record."""
    return NutritionRecord(
        user_id=user_id,
        meal_type=meal_type,
        food_name=row.name.strip(),
        calories=parse_int(row.calories),
        protein_grams=parse_float(row.protein),
        carbs_grams=parse_float(row.carbs),
        fats_grams=parse_float(row.fats),
        log_date=logged_at,
    )


def rows_to_nutrition_records(
    collection: RowCollection,
    *,
    user_id: str,
    meal_type: MealType,
    logged_at: datetime,
) -> List[NutritionRecord]:
    """One nutrition record per food row, all stamped with the same time."""
    return [
        food_row_to_record(row, user_id=user_id, meal_type=meal_type, logged_at=logged_at)
        for row in collection.rows
    ]


def progress_entry_to_record(
    entry: ProgressEntry,
    *,
    user_id: str,
    tracked_at: datetime,
) -> ProgressRecord:
    """Convert the progress form entry to a progress record."""
    return ProgressRecord(
        user_id=user_id,
        weight=parse_float(entry.weight),
        notes=entry.notes,
        track_date=tracked_at,
    )


# ============================================================================
# Validation
# ============================================================================


def validate_workout_record(record: WorkoutRecord) -> List[str]:
    """
    Validate a workout record.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: List[str] = []

    for i, ex in enumerate(record.exercises, start=1):
        label = f"Exercise {i}"
        if not ex.name:
            errors.append(f"{label}: name is required")
        if not is_finite(ex.sets) or ex.sets < 1:
            errors.append(f"{label}: sets must be a whole number of at least 1")
        if not is_finite(ex.reps) or ex.reps < 1:
            errors.append(f"{label}: reps must be a whole number of at least 1")
        if not is_finite(ex.weight) or ex.weight < 0:
            errors.append(f"{label}: weight must be a non-negative number")

    return errors


def validate_nutrition_record(record: NutritionRecord, position: int = 1) -> List[str]:
    """Validate one nutrition record; ``position`` labels the food row."""
    errors: List[str] = []
    label = f"Food {position}"

    if not record.food_name:
        errors.append(f"{label}: name is required")
    if not is_finite(record.calories) or record.calories < 0:
        errors.append(f"{label}: calories must be a non-negative whole number")

    for field, value in (
        ("protein", record.protein_grams),
        ("carbs", record.carbs_grams),
        ("fats", record.fats_grams),
    ):
        if not is_finite(value) or value < 0:
            errors.append(f"{label}: {field} must be a non-negative number")

    return errors


def validate_progress_record(record: ProgressRecord) -> List[str]:
    """Validate a progress record."""
    if not is_finite(record.weight) or record.weight <= 0:
        return ["Weight must be a positive number"]
    return []
