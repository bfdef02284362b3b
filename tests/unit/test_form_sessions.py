"""
Unit tests for the form sessions.

Tests for:
- Editing through the session
- Busy flag: a second submit while one is in flight is ignored
- Reset on success, state kept on failure
- Outcomes arriving after close are not applied
"""

import asyncio

import pytest

from application.exceptions import IdentityMissingError
from application.sessions import (
    FormMessage,
    NutritionFormSession,
    ProgressFormSession,
    WorkoutFormSession,
)
from application.use_cases import (
    SubmitNutritionUseCase,
    SubmitProgressUseCase,
    SubmitWorkoutUseCase,
)
from domain.models import (
    NUTRITION_TABLE,
    PROGRESS_TABLE,
    WORKOUTS_TABLE,
    ExerciseRow,
    FoodRow,
    MealType,
    ProgressEntry,
)
from tests.fakes import FakeRecordStore

pytestmark = pytest.mark.unit


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def workout_form(store) -> WorkoutFormSession:
    form = WorkoutFormSession(SubmitWorkoutUseCase(store), user_id="user-1")
    form.edit_field(0, "name", "Squat")
    form.edit_field(0, "sets", "3")
    form.edit_field(0, "reps", "5")
    form.edit_field(0, "weight", "225")
    form.notes = "felt strong"
    return form


class TestWorkoutForm:

    def test_starts_with_one_blank_row(self, store):
        form = WorkoutFormSession(SubmitWorkoutUseCase(store), user_id="user-1")
        assert form.rows.rows == (ExerciseRow(),)
        assert not form.busy
        assert form.message is None

    def test_row_editing(self, workout_form):
        workout_form.add_row()
        workout_form.edit_field(1, "name", "Bench")
        workout_form.remove_row(0)

        assert [r.name for r in workout_form.rows.rows] == ["Bench"]

    @pytest.mark.asyncio
    async def test_success_resets_form(self, workout_form, store):
        outcome = await workout_form.submit()

        assert outcome.success
        assert workout_form.message == FormMessage(success=True, text="Workout logged successfully!")
        assert workout_form.rows.rows == (ExerciseRow(),)
        assert workout_form.notes == ""
        assert len(store.get_all(WORKOUTS_TABLE)) == 1

    @pytest.mark.asyncio
    async def test_failure_keeps_rows(self, workout_form, store):
        store.fail_table(WORKOUTS_TABLE, "permission denied")
        rows_before = workout_form.rows

        outcome = await workout_form.submit()

        assert not outcome.success
        assert workout_form.message == FormMessage(success=False, text="permission denied")
        assert workout_form.rows == rows_before
        assert workout_form.notes == "felt strong"
        assert not workout_form.busy

    @pytest.mark.asyncio
    async def test_submit_while_busy_is_ignored(self, workout_form, store):
        store.gate = asyncio.Event()

        first = asyncio.create_task(workout_form.submit())
        await asyncio.sleep(0)
        assert workout_form.busy

        assert await workout_form.submit() is None

        store.gate.set()
        outcome = await first

        assert outcome.success
        assert not workout_form.busy
        assert store.calls == [("insert", WORKOUTS_TABLE)]

    @pytest.mark.asyncio
    async def test_outcome_after_close_is_not_applied(self, workout_form, store):
        store.gate = asyncio.Event()
        rows_before = workout_form.rows

        task = asyncio.create_task(workout_form.submit())
        await asyncio.sleep(0)
        workout_form.close()
        store.gate.set()
        outcome = await task

        assert outcome.success
        assert workout_form.message is None
        assert workout_form.rows == rows_before

    @pytest.mark.asyncio
    async def test_closed_form_ignores_submit(self, workout_form, store):
        workout_form.close()
        assert await workout_form.submit() is None
        assert store.calls == []

    @pytest.mark.asyncio
    async def test_missing_user_raises(self, store):
        form = WorkoutFormSession(SubmitWorkoutUseCase(store), user_id=None)
        with pytest.raises(IdentityMissingError):
            await form.submit()
        assert not form.busy

    def test_dismiss_message(self, workout_form):
        workout_form.message = FormMessage(success=True, text="ok")
        workout_form.dismiss_message()
        assert workout_form.message is None


class TestNutritionForm:

    @pytest.mark.asyncio
    async def test_meal_type_survives_reset(self, store):
        form = NutritionFormSession(
            SubmitNutritionUseCase(store), user_id="user-1", meal_type=MealType.DINNER
        )
        form.edit_field(0, "name", "Salmon")
        form.edit_field(0, "calories", "400")
        form.edit_field(0, "protein", "40")
        form.edit_field(0, "carbs", "0")
        form.edit_field(0, "fats", "22")

        outcome = await form.submit()

        assert outcome.success
        assert form.rows.rows == (FoodRow(),)
        assert form.meal_type == MealType.DINNER
        assert store.get_all(NUTRITION_TABLE)[0]["meal_type"] == "dinner"

    @pytest.mark.asyncio
    async def test_validation_failure_keeps_rows(self, store):
        form = NutritionFormSession(SubmitNutritionUseCase(store), user_id="user-1")
        form.edit_field(0, "name", "Toast")

        outcome = await form.submit()

        assert not outcome.success
        assert form.rows.rows[0].name == "Toast"
        assert form.message.success is False


class TestProgressForm:

    @pytest.mark.asyncio
    async def test_submit_and_reset(self, store):
        form = ProgressFormSession(SubmitProgressUseCase(store), user_id="user-1")
        form.edit_field("weight", "181.2")
        form.edit_field("notes", "post-holiday")

        outcome = await form.submit()

        assert outcome.success
        assert form.entry == ProgressEntry()
        assert store.get_all(PROGRESS_TABLE)[0]["weight"] == 181.2

    def test_unknown_field_raises(self, store):
        form = ProgressFormSession(SubmitProgressUseCase(store), user_id="user-1")
        with pytest.raises(ValueError):
            form.edit_field("calories", "100")
