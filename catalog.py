"""
Food catalog module for Macro Tracker.
Reads and writes the tab-separated food list.

Each non-comment line holds six tab-separated fields:

    name    calories    carbs    fat    protein    unit

Lines starting with '#' are comments. A line with the wrong number of
fields or a bad number is dropped and loading carries on.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from logic import FoodRecord

logger = logging.getLogger("macro_tracker.catalog")

CATALOG_PATH = Path("foods")
COMMENT_PREFIX = "#"
FIELD_SEPARATOR = "\t"
FIELD_COUNT = 6

# ASCII only: no underscores, padding or non-ASCII digits
NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed record or the reason parsing failed."""
    record: Optional[FoodRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass
class CatalogLoad:
    records: List[FoodRecord] = field(default_factory=list)
    rejected: List[Tuple[int, str]] = field(default_factory=list)


# ============== Parsing ==============

def parse_amount(text: str, label: str) -> float:
    """Parse a non-negative real number. Raises ValueError naming the field."""
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"{label} is not a number: {text!r}")
    value = float(text)

    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} must be a non-negative number: {text!r}")
    return value


def parse_record(name: str, calories: str, carbs: str, fat: str,
                 protein: str, unit: str) -> ParseResult:
    """Build a FoodRecord from raw text fields."""
    try:
        record = FoodRecord(
            name=name,
            calories=parse_amount(calories, 'calories'),
            carbs=parse_amount(carbs, 'carbs'),
            fat=parse_amount(fat, 'fat'),
            protein=parse_amount(protein, 'protein'),
            unit=unit,
        )
    except ValueError as e:
        return ParseResult(error=str(e))
    return ParseResult(record=record)


def parse_food_line(line: str) -> ParseResult:
    """Parse one catalog line."""
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        return ParseResult(error=f"expected {FIELD_COUNT} fields, got {len(fields)}")
    return parse_record(*fields)


def format_food_line(record: FoodRecord) -> str:
    """Inverse of parse_food_line."""
    return FIELD_SEPARATOR.join([
        record.name,
        repr(record.calories),
        repr(record.carbs),
        repr(record.fat),
        repr(record.protein),
        record.unit,
    ])


# ============== Loading / Saving ==============

def load_catalog(path=CATALOG_PATH) -> CatalogLoad:
    """Load the catalog, keeping track of dropped lines.

    Raises OSError (or UnicodeDecodeError) if the file cannot be read.
    """
    text = Path(path).read_bytes().decode('utf-8')
    result = CatalogLoad()

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for line_number, line in enumerate(lines, 1):
        if line.endswith("\r"):
            line = line[:-1]
        if line.startswith(COMMENT_PREFIX):
            continue

        parsed = parse_food_line(line)
        if parsed.ok:
            result.records.append(parsed.record)
        else:
            logger.debug("Dropping %s line %d: %s", path, line_number, parsed.error)
            result.rejected.append((line_number, parsed.error))

    logger.info("Loaded %d foods from %s (%d lines dropped)",
                len(result.records), path, len(result.rejected))
    return result


def load_foods(path=CATALOG_PATH) -> List[FoodRecord]:
    """Load the catalog and return only the usable records, in file order."""
    return load_catalog(path).records


def write_catalog(records: Iterable[FoodRecord], path=CATALOG_PATH,
                  header: Optional[str] = None) -> int:
    """Write records to a catalog file. Returns the number of records written."""
    lines = []
    if header:
        lines.extend(f"{COMMENT_PREFIX} {text}" for text in header.splitlines())

    count = 0
    for record in records:
        lines.append(format_food_line(record))
        count += 1

    Path(path).write_text("\n".join(lines) + "\n", encoding='utf-8')
    return count
