"""Tests for the deviation reporter."""

from diet_planner.domain.macros import MacroTarget
from diet_planner.domain.meals import MealTotals
from diet_planner.services.reporter import report, sum_totals
from diet_planner.services.splitter import split
from tests.conftest import make_meal


def test_report_on_exact_budget(budget) -> None:
    targets = (make_meal("large-0", 1400), make_meal("large-1", 600))

    result = report(targets, budget)

    assert result.diff == 0
    assert result.percentage == 0.0
    assert result.is_off_target is False


def test_report_sums_all_fields(budget) -> None:
    targets = split(budget, 3, 2, 70, 30)

    assert sum_totals(targets) == MealTotals(
        calories=2001, protein_g=151, carbs_g=201, fat_g=68
    )
    result = report(targets, budget)
    assert result.diff == 1
    assert result.is_off_target is False


def test_report_flags_deviation_above_tolerance(budget) -> None:
    over = report((make_meal("large-0", 2150),), budget)
    boundary = report((make_meal("large-0", 1900),), budget)

    assert over.diff == 150
    assert over.percentage == 7.5
    assert over.is_off_target is True
    assert boundary.percentage == -5.0
    assert boundary.is_off_target is False


def test_zero_tolerance_flags_any_difference(budget) -> None:
    result = report((make_meal("large-0", 2001),), budget, tolerance=0)

    assert result.is_off_target is True


def test_report_with_empty_budget() -> None:
    budget = MacroTarget(total_calories=0, protein_g=0, carbs_g=0, fat_g=0)

    empty = report((), budget)
    nonempty = report((make_meal("large-0", 10),), budget)

    assert empty.percentage == 0.0
    assert empty.is_off_target is False
    assert nonempty.is_off_target is True


def test_percentage_rounds_halves_up(budget) -> None:
    above = report((make_meal("large-0", 2005),), budget)
    below = report((make_meal("large-0", 1995),), budget)

    assert above.percentage == 0.3
    assert below.percentage == -0.2
