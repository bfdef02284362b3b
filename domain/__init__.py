"""
Domain layer for the FitTrack API.

This package contains pure domain models, the row collection editor and the
converters between them. Nothing here touches the record store.
"""

from domain.models import (
    DashboardSummary,
    EntryKind,
    ExerciseRow,
    FoodRow,
    MealType,
    NutritionRecord,
    NutritionTotals,
    ProgressEntry,
    ProgressRecord,
    RowCollection,
    WeightSample,
    WorkoutRecord,
)

__all__ = [
    "DashboardSummary",
    "EntryKind",
    "ExerciseRow",
    "FoodRow",
    "MealType",
    "NutritionRecord",
    "NutritionTotals",
    "ProgressEntry",
    "ProgressRecord",
    "RowCollection",
    "WeightSample",
    "WorkoutRecord",
]
