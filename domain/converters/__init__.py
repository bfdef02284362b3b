"""
Domain converters between form input, store records and dashboard values.

This module provides pure converter functions:

- rows_to_workout_record: exercise RowCollection -> WorkoutRecord
- rows_to_nutrition_records: food RowCollection -> [NutritionRecord]
- progress_entry_to_record: ProgressEntry -> ProgressRecord
- db_rows_to_weight_series: progress rows (from Supabase) -> [WeightSample]
- sum_nutrition_rows: nutrition rows (from Supabase) -> NutritionTotals

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import parse_int, parse_float
    >>> parse_int("12")
    12
    >>> parse_float("135.5")
    135.5
"""

from domain.converters.db_converters import db_rows_to_weight_series, sum_nutrition_rows
from domain.converters.row_converters import (
    exercise_row_to_entry,
    food_row_to_record,
    is_finite,
    parse_float,
    parse_int,
    progress_entry_to_record,
    rows_to_nutrition_records,
    rows_to_workout_record,
    validate_nutrition_record,
    validate_progress_record,
    validate_workout_record,
)

__all__ = [
    # Parsing
    "parse_int",
    "parse_float",
    "is_finite",
    # Rows -> records
    "exercise_row_to_entry",
    "rows_to_workout_record",
    "food_row_to_record",
    "rows_to_nutrition_records",
    "progress_entry_to_record",
    # Validation
    "validate_workout_record",
    "validate_nutrition_record",
    "validate_progress_record",
    # Store rows -> dashboard
    "db_rows_to_weight_series",
    "sum_nutrition_rows",
]
