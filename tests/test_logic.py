"""Tests for food records and macro totals."""

import math

import pytest

from logic import FoodRecord, MacroTotals, format_macro_ratio, format_totals


def make_record(**overrides):
    values = dict(name="Oats", calories=100.0, carbs=17.0, fat=2.0, protein=4.0, unit="40g")
    values.update(overrides)
    return FoodRecord(**values)


class TestFoodRecord:
    def test_scaled_multiplies_nutrients(self):
        scaled = make_record().scaled(2.5)
        assert scaled.calories == 250.0
        assert scaled.carbs == 42.5
        assert scaled.fat == 5.0
        assert scaled.protein == 10.0

    def test_scaled_keeps_name_and_unit(self):
        scaled = make_record().scaled(3)
        assert scaled.name == "Oats"
        assert scaled.unit == "40g"

    def test_record_is_immutable(self):
        record = make_record()
        with pytest.raises(AttributeError):
            record.calories = 1.0


class TestMacroTotals:
    def test_starts_at_zero(self):
        totals = MacroTotals()
        assert totals.as_dict() == {'calories': 0.0, 'carbs': 0.0, 'fat': 0.0, 'protein': 0.0}

    def test_add_scaled_quantity_two(self):
        totals = MacroTotals()
        totals.add_scaled(make_record(calories=100.0), 2)
        assert totals.calories == 200.0

    def test_add_scaled_quantity_zero_is_noop(self):
        totals = MacroTotals()
        totals.add_scaled(make_record(), 1)
        before = totals.as_dict()
        totals.add_scaled(make_record(), 0)
        assert totals.as_dict() == before

    def test_add_scaled_accumulates(self):
        totals = MacroTotals()
        egg = FoodRecord("Egg", 70.0, 1.0, 5.0, 6.0, "each")
        totals.add_scaled(egg, 2)
        totals.add_scaled(egg, 1)
        assert totals.as_dict() == {'calories': 210.0, 'carbs': 3.0, 'fat': 15.0, 'protein': 18.0}

    @pytest.mark.parametrize("quantity", [-1.0, math.inf, math.nan])
    def test_add_scaled_rejects_bad_quantity(self, quantity):
        totals = MacroTotals()
        with pytest.raises(ValueError):
            totals.add_scaled(make_record(), quantity)
        assert totals.calories == 0.0


def test_format_totals():
    totals = MacroTotals(calories=140.4, carbs=2.0, fat=10.0, protein=12.0)
    assert format_totals(totals) == "Calories: 140 Protein: 12 Carbs: 2 Fat: 10"


def test_format_macro_ratio():
    totals = MacroTotals(calories=500.0, carbs=30.0, fat=30.0, protein=40.0)
    assert format_macro_ratio(totals) == "P/C/F 40/30/30"


def test_format_macro_ratio_empty():
    assert format_macro_ratio(MacroTotals()) == "P/C/F 0/0/0"
