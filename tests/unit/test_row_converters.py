"""
Unit tests for domain/converters/row_converters.py

Tests for:
- Numeric text parsing (nan on failure)
- Row -> record transforms for workouts, nutrition and progress
- Validation messages
"""

import math
from datetime import datetime, timezone

import pytest

from domain.converters import (
    food_row_to_record,
    parse_float,
    parse_int,
    progress_entry_to_record,
    rows_to_nutrition_records,
    rows_to_workout_record,
    validate_nutrition_record,
    validate_progress_record,
    validate_workout_record,
)
from domain.models import (
    EntryKind,
    ExerciseRow,
    FoodRow,
    MealType,
    ProgressEntry,
    RowCollection,
)

pytestmark = pytest.mark.unit

LOGGED_AT = datetime(2024, 3, 5, 12, 30, tzinfo=timezone.utc)


class TestParsing:

    @pytest.mark.parametrize("text,expected", [
        ("12", 12),
        (" 7 ", 7),
        ("-3", -3),
        ("0", 0),
    ])
    def test_parse_int(self, text, expected):
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "1e3", "1_000", "\u0661\u0662", "+", "0x1f"])
    def test_parse_int_failure_is_nan(self, text):
        assert math.isnan(parse_int(text))

    @pytest.mark.parametrize("text,expected", [
        ("135", 135.0),
        ("135.5", 135.5),
        (" 2.25 ", 2.25),
        ("-0.5", -0.5),
        (".5", 0.5),
        ("1e3", 1000.0),
    ])
    def test_parse_float(self, text, expected):
        assert parse_float(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "1_000.5", "\u0661.5", "inf", "nan", "."])
    def test_parse_float_failure_is_nan(self, text):
        assert math.isnan(parse_float(text))


class TestWorkoutTransform:

    def test_embeds_every_row_in_order(self):
        rows = RowCollection(
            kind=EntryKind.EXERCISE,
            rows=(
                ExerciseRow(name=" Squat ", sets="3", reps="5", weight="225"),
                ExerciseRow(name="Curl", sets="2", reps="12", weight="25.5"),
            ),
        )

        record = rows_to_workout_record(rows, user_id="user-1", notes="legs")

        assert record.user_id == "user-1"
        assert record.notes == "legs"
        assert [e.name for e in record.exercises] == ["Squat", "Curl"]
        assert record.exercises[1].weight == 25.5
        assert record.to_row()["exercises"][0] == {
            "name": "Squat", "sets": 3, "reps": 5, "weight": 225.0,
        }

    def test_unparsable_fields_become_nan(self):
        rows = RowCollection(
            kind=EntryKind.EXERCISE,
            rows=(ExerciseRow(name="Squat", sets="x", reps="", weight="heavy"),),
        )

        entry = rows_to_workout_record(rows, user_id="user-1").exercises[0]

        assert math.isnan(entry.sets)
        assert math.isnan(entry.reps)
        assert math.isnan(entry.weight)

    def test_validation_lists_every_problem(self):
        rows = RowCollection(
            kind=EntryKind.EXERCISE,
            rows=(
                ExerciseRow(name="Squat", sets="3", reps="5", weight="225"),
                ExerciseRow(name="", sets="0", reps="abc", weight="-5"),
            ),
        )

        errors = validate_workout_record(rows_to_workout_record(rows, user_id="u"))

        assert errors == [
            "Exercise 2: name is required",
            "Exercise 2: sets must be a whole number of at least 1",
            "Exercise 2: reps must be a whole number of at least 1",
            "Exercise 2: weight must be a non-negative number",
        ]

    def test_bodyweight_exercise_is_valid(self):
        rows = RowCollection(
            kind=EntryKind.EXERCISE,
            rows=(ExerciseRow(name="Pull-up", sets="3", reps="8", weight="0"),),
        )
        assert validate_workout_record(rows_to_workout_record(rows, user_id="u")) == []


class TestNutritionTransform:

    def test_one_record_per_row_with_shared_meal_and_time(self):
        rows = RowCollection(
            kind=EntryKind.FOOD,
            rows=(
                FoodRow(name="Oats", calories="300", protein="10", carbs="54", fats="5"),
                FoodRow(name="Milk", calories="120", protein="8", carbs="12", fats="4.5"),
            ),
        )

        records = rows_to_nutrition_records(
            rows, user_id="user-1", meal_type=MealType.BREAKFAST, logged_at=LOGGED_AT,
        )

        assert [r.food_name for r in records] == ["Oats", "Milk"]
        assert {r.meal_type for r in records} == {MealType.BREAKFAST}
        assert {r.log_date for r in records} == {LOGGED_AT}
        assert records[1].fats_grams == 4.5

    def test_to_row_shape(self):
        record = food_row_to_record(
            FoodRow(name="Egg", calories="70", protein="6", carbs="0", fats="5"),
            user_id="user-1",
            meal_type=MealType.SNACK,
            logged_at=LOGGED_AT,
        )

        assert record.to_row() == {
            "user_id": "user-1",
            "meal_type": "snack",
            "food_name": "Egg",
            "calories": 70,
            "protein_grams": 6.0,
            "carbs_grams": 0.0,
            "fats_grams": 5.0,
            "log_date": "2024-03-05T12:30:00+00:00",
        }

    def test_validation_labels_food_position(self):
        record = food_row_to_record(
            FoodRow(name="Cake", calories="abc", protein="1", carbs="-1", fats=""),
            user_id="u",
            meal_type=MealType.DINNER,
            logged_at=LOGGED_AT,
        )

        assert validate_nutrition_record(record, 2) == [
            "Food 2: calories must be a non-negative whole number",
            "Food 2: carbs must be a non-negative number",
            "Food 2: fats must be a non-negative number",
        ]


class TestProgressTransform:

    def test_record_fields(self):
        record = progress_entry_to_record(
            ProgressEntry(weight="180.4", notes="morning"),
            user_id="user-1",
            tracked_at=LOGGED_AT,
        )

        assert record.weight == 180.4
        assert record.to_row()["track_date"] == "2024-03-05T12:30:00+00:00"
        assert validate_progress_record(record) == []

    @pytest.mark.parametrize("weight", ["", "abc", "0", "-1"])
    def test_weight_must_be_positive(self, weight):
        record = progress_entry_to_record(
            ProgressEntry(weight=weight), user_id="u", tracked_at=LOGGED_AT,
        )
        assert validate_progress_record(record) == ["Weight must be a positive number"]
