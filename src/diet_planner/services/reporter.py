"""Totals and deviation reporting for meal targets."""

from collections.abc import Iterable

from diet_planner.domain.macros import MacroTarget, round_half_up
from diet_planner.domain.meals import DeviationReport, MealTarget, MealTotals

DEFAULT_TOLERANCE = 0.05


def sum_totals(targets: Iterable[MealTarget]) -> MealTotals:
    """Sum calories and macros across meals."""
    total = MealTotals(calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for meal in targets:
        total = MealTotals(
            calories=total.calories + meal.calories,
            protein_g=total.protein_g + meal.protein_g,
            carbs_g=total.carbs_g + meal.carbs_g,
            fat_g=total.fat_g + meal.fat_g,
        )
    return total


def report(
    targets: Iterable[MealTarget],
    budget: MacroTarget,
    tolerance: float = DEFAULT_TOLERANCE,
) -> DeviationReport:
    """Compare current meal totals with the daily calorie budget.

    A plan is off target when the absolute calorie difference exceeds
    ``tolerance`` of the budget. A tolerance of 0 flags any difference.
    """
    totals = sum_totals(targets)
    diff = totals.calories - budget.total_calories
    if budget.total_calories:
        percentage = round_half_up(diff * 1000 / budget.total_calories) / 10
    else:
        percentage = 0.0
    return DeviationReport(
        current_totals=totals,
        diff=diff,
        percentage=percentage,
        is_off_target=abs(diff) > budget.total_calories * tolerance,
    )
