"""
Business logic module for Macro Tracker.
Holds the food record type and the running macro totals.
"""

import math
from dataclasses import dataclass, replace


# ============== Food Records ==============

@dataclass(frozen=True)
class FoodRecord:
    """A catalog entry. Nutrient values are per one unit."""
    name: str
    calories: float
    carbs: float
    fat: float
    protein: float
    unit: str

    def scaled(self, quantity: float) -> 'FoodRecord':
        """Return a copy with every nutrient multiplied by quantity."""
        return replace(
            self,
            calories=self.calories * quantity,
            carbs=self.carbs * quantity,
            fat=self.fat * quantity,
            protein=self.protein * quantity,
        )


# ============== Daily Totals ==============

@dataclass
class MacroTotals:
    """Running totals for the session. Only ever grows."""
    calories: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    protein: float = 0.0

    def add_scaled(self, record: FoodRecord, quantity: float):
        """Add quantity units of record to the totals."""
        if not math.isfinite(quantity) or quantity < 0:
            raise ValueError(f"quantity must be a non-negative number, got {quantity!r}")

        portion = record.scaled(quantity)
        self.calories += portion.calories
        self.carbs += portion.carbs
        self.fat += portion.fat
        self.protein += portion.protein

    def as_dict(self) -> dict:
        return {
            'calories': self.calories,
            'carbs': self.carbs,
            'fat': self.fat,
            'protein': self.protein,
        }


# ============== Formatting ==============

def format_totals(totals: MacroTotals) -> str:
    """Format totals as the one-line overview summary."""
    return (
        f"Calories: {totals.calories:.0f} Protein: {totals.protein:.0f} "
        f"Carbs: {totals.carbs:.0f} Fat: {totals.fat:.0f}"
    )


def format_macro_ratio(totals: MacroTotals) -> str:
    """Share of protein, carbs and fat by weight, e.g. 'P/C/F 40/30/30'."""
    grams = (totals.protein, totals.carbs, totals.fat)
    total = sum(grams)
    if total == 0:
        shares = (0, 0, 0)
    else:
        shares = tuple(int(round(g / total * 100)) for g in grams)
    return "P/C/F " + "/".join(str(share) for share in shares)
