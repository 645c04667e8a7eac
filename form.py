"""
Add-food form for Macro Tracker.
Field buffers, on-screen layout of the field grid, and parsing of a
submitted form into a food and quantity.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from catalog import parse_amount, parse_record
from logic import FoodRecord

# Field order on screen, top to bottom
FIELD_NAMES = ('name', 'calories', 'protein', 'carbs', 'fat', 'unit', 'quantity')
LABELS = (
    "Food Name:",
    " Calories:",
    "  Protein:",
    "    Carbs:",
    "      Fat:",
    "    Units:",
    " Quantity:",
)
FIELD_COUNT = len(FIELD_NAMES)

LABEL_WIDTH = 10
INPUT_WIDTH = 50
FIELD_SPACING = 3  # rows per field: top border, input line, bottom border
FIELD_CAPACITY = INPUT_WIDTH - 2


class FormBuffer:
    """Seven independent text fields."""

    def __init__(self):
        self._fields: List[str] = [""] * FIELD_COUNT

    def __len__(self) -> int:
        return FIELD_COUNT

    def value(self, index: int) -> str:
        return self._fields[index]

    def length(self, index: int) -> int:
        return len(self._fields[index])

    def values(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    def append(self, index: int, char: str) -> bool:
        """Append char to a field. Returns False if the field is full."""
        if len(self._fields[index]) + len(char) > FIELD_CAPACITY:
            return False
        self._fields[index] += char
        return True

    def pop(self, index: int) -> bool:
        """Remove the last character of a field. Returns False if it was empty."""
        if not self._fields[index]:
            return False
        self._fields[index] = self._fields[index][:-1]
        return True

    def clear(self):
        self._fields = [""] * FIELD_COUNT

    def as_dict(self) -> dict:
        return dict(zip(FIELD_NAMES, self._fields))


@dataclass(frozen=True)
class FormLayout:
    """Screen geometry of the field grid.

    Labels are right-aligned in a LABEL_WIDTH column, followed by a boxed
    input of INPUT_WIDTH columns. Field i's input line sits at row
    top + FIELD_SPACING * i.
    """
    left: int
    top: int

    @classmethod
    def centered(cls, columns: int, rows: int) -> 'FormLayout':
        left = columns // 2 - (LABEL_WIDTH + INPUT_WIDTH + 1) // 2
        top = rows // 2 - (FIELD_SPACING * FIELD_COUNT + 1) // 2
        # keep the top box border on screen
        return cls(left=max(left, 0), top=max(top, 1))

    def row(self, index: int) -> int:
        return self.top + FIELD_SPACING * index

    def label_position(self, index: int) -> Tuple[int, int]:
        return self.left, self.row(index)

    def box_rect(self, index: int) -> Tuple[int, int, int, int]:
        x1 = self.left + LABEL_WIDTH + 1
        y = self.row(index)
        return x1, y - 1, x1 + INPUT_WIDTH, y + 1

    def input_origin(self, index: int) -> Tuple[int, int]:
        return self.left + LABEL_WIDTH + 2, self.row(index)

    def cursor_position(self, index: int, length: int) -> Tuple[int, int]:
        """Where the cursor belongs after length characters in field index."""
        x, y = self.input_origin(index)
        return x + length, y


# ============== Submission ==============

@dataclass(frozen=True)
class Submission:
    record: FoodRecord
    quantity: float


@dataclass(frozen=True)
class SubmissionResult:
    submission: Optional[Submission] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.submission is not None


def parse_submission(form: FormBuffer) -> SubmissionResult:
    """Turn the form fields into a food record and a quantity."""
    fields = form.as_dict()
    parsed = parse_record(
        name=fields['name'],
        calories=fields['calories'],
        carbs=fields['carbs'],
        fat=fields['fat'],
        protein=fields['protein'],
        unit=fields['unit'],
    )
    if not parsed.ok:
        return SubmissionResult(error=parsed.error)

    try:
        quantity = parse_amount(fields['quantity'], 'quantity')
    except ValueError as e:
        return SubmissionResult(error=str(e))

    return SubmissionResult(submission=Submission(record=parsed.record, quantity=quantity))
