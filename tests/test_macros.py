"""Tests for macro conversion helpers."""

from diet_planner.domain.macros import (
    MacroKind,
    MacroShares,
    calories_from_grams,
    grams_from_calories,
)


def test_kcal_per_gram() -> None:
    assert MacroKind.PROTEIN.kcal_per_gram == 4
    assert MacroKind.CARBS.kcal_per_gram == 4
    assert MacroKind.FAT.kcal_per_gram == 9
    assert MacroKind.FAT.field_name == "fat_g"


def test_grams_from_calories_uses_energy_density() -> None:
    assert grams_from_calories(900) == (68, 90, 30)
    assert grams_from_calories(900, MacroShares(0, 0, 100)) == (0, 0, 100)


def test_calories_from_grams() -> None:
    assert calories_from_grams(10, 20, 5) == 10 * 4 + 20 * 4 + 5 * 9
