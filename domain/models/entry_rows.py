"""
Editable entry rows and the row collection backing one open form.

Numeric fields are held as raw text while the user edits so that partial
input like "" or "1." survives between keystrokes. Parsing happens only when
the form is submitted (see domain.converters.row_converters).

All models are frozen: the editor replaces rows, it never mutates them.
"""

from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class EntryKind(str, Enum):
    """Row variants a collection can hold."""

    EXERCISE = "exercise"
    FOOD = "food"


class ExerciseRow(BaseModel):
    """
    One exercise line of the workout form.

    Examples:
        >>> row = ExerciseRow(name="Squat", sets="3", reps="5", weight="135")
        >>> row.sets
        '3'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Exercise name")
    sets: str = Field(default="", description="Number of sets (integer text)")
    reps: str = Field(default="", description="Reps per set (integer text)")
    weight: str = Field(default="", description="Weight in lbs (decimal text)")


class FoodRow(BaseModel):
    """One food line of the nutrition form."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Food name")
    calories: str = Field(default="", description="Calories (integer text)")
    protein: str = Field(default="", description="Protein grams (decimal text)")
    carbs: str = Field(default="", description="Carbohydrate grams (decimal text)")
    fats: str = Field(default="", description="Fat grams (decimal text)")


class ProgressEntry(BaseModel):
    """The single body-weight entry of the progress form."""

    model_config = ConfigDict(frozen=True)

    weight: str = Field(default="", description="Body weight in lbs (decimal text)")
    notes: str = Field(default="", description="Free-text notes")


EntryRow = Union[ExerciseRow, FoodRow]

ROW_TYPES = {
    EntryKind.EXERCISE: ExerciseRow,
    EntryKind.FOOD: FoodRow,
}


def blank_row(kind: EntryKind) -> EntryRow:
    """Return an all-empty row of the given kind."""
    return ROW_TYPES[kind]()


class RowCollection(BaseModel):
    """
    Ordered rows of a single in-progress form.

    Insertion order is both the display order and the submission order.
    A collection always holds at least one row.
    """

    model_config = ConfigDict(frozen=True)

    kind: EntryKind
    rows: Tuple[EntryRow, ...] = Field(..., min_length=1)

    @field_validator("rows")
    @classmethod
    def rows_match_kind(cls, rows: Tuple[EntryRow, ...], info: ValidationInfo) -> Tuple[EntryRow, ...]:
        """Reject rows of the wrong variant for the collection kind."""
        kind = info.data.get("kind")
        if kind is None:
            return rows
        expected = ROW_TYPES[kind]
        for i, row in enumerate(rows):
            if not isinstance(row, expected):
                raise ValueError(
                    f"Row {i} is {type(row).__name__}, expected {expected.__name__}"
                )
        return rows

    def __len__(self) -> int:
        return len(self.rows)
