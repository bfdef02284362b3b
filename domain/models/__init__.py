"""
Domain models for the FitTrack API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- ExerciseRow / FoodRow / ProgressEntry: editable form input, numeric
  fields held as raw text
- RowCollection: the ordered rows of one open form
- WorkoutRecord / NutritionRecord / ProgressRecord: typed records written to
  the record store
- DashboardSummary: weight series and daily nutrition totals

Usage:
    >>> from domain.models import EntryKind, ExerciseRow, RowCollection

    >>> rows = RowCollection(
    ...     kind=EntryKind.EXERCISE,
    ...     rows=(ExerciseRow(name="Squat", sets="3", reps="5", weight="135"),),
    ... )
    >>> len(rows)
    1
"""

from domain.models.dashboard import DashboardSummary, NutritionTotals, WeightSample
from domain.models.entry_rows import (
    EntryKind,
    EntryRow,
    ExerciseRow,
    FoodRow,
    ProgressEntry,
    RowCollection,
    blank_row,
)
from domain.models.records import (
    NUTRITION_TABLE,
    PROGRESS_TABLE,
    WORKOUTS_TABLE,
    ExerciseEntry,
    MealType,
    NutritionRecord,
    ProgressRecord,
    SubmissionRecord,
    WorkoutRecord,
)

__all__ = [
    # Editable input
    "EntryKind",
    "EntryRow",
    "ExerciseRow",
    "FoodRow",
    "ProgressEntry",
    "RowCollection",
    "blank_row",
    # Records
    "ExerciseEntry",
    "WorkoutRecord",
    "NutritionRecord",
    "ProgressRecord",
    "SubmissionRecord",
    "MealType",
    "WORKOUTS_TABLE",
    "NUTRITION_TABLE",
    "PROGRESS_TABLE",
    # Dashboard
    "DashboardSummary",
    "NutritionTotals",
    "WeightSample",
]
