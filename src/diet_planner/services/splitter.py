"""Meal splitter allocating a daily budget across meals."""

import logging
import math

from diet_planner.domain.errors import (
    DivisionByZeroError,
    InvalidMealCountError,
    InvalidShareSumError,
)
from diet_planner.domain.macros import (
    STANDARD_SHARES,
    MacroShares,
    MacroTarget,
    grams_from_calories,
    round_half_up,
)
from diet_planner.domain.meals import MealClass, MealTarget, MealTargetSequence

LARGE_MEAL_NAMES = ("Breakfast", "Lunch", "Dinner", "Meal 4", "Meal 5")

_logger = logging.getLogger(__name__)


def split(  # noqa: PLR0913
    budget: MacroTarget,
    large_count: int,
    small_count: int,
    large_share_pct: float = 70.0,
    small_share_pct: float = 30.0,
    macro_shares: MacroShares = STANDARD_SHARES,
) -> MealTargetSequence:
    """Allocate the budget across large and small meals."""
    if large_count < 0 or small_count < 0:
        raise InvalidMealCountError(
            f"Meal counts must be non-negative: large={large_count} small={small_count}"
        )
    if not _is_hundred(large_share_pct + small_share_pct):
        raise InvalidShareSumError(
            f"Meal class shares must total 100, got {large_share_pct + small_share_pct}"
        )
    if not _is_hundred(macro_shares.total_pct):
        raise InvalidShareSumError(
            f"Macro shares must total 100, got {macro_shares.total_pct}"
        )

    targets = [
        *_class_targets(
            MealClass.LARGE, budget, large_count, large_share_pct, macro_shares
        ),
        *_class_targets(
            MealClass.SMALL, budget, small_count, small_share_pct, macro_shares
        ),
    ]
    _logger.debug(
        "Split %s kcal into %s large and %s small meals",
        budget.total_calories,
        large_count,
        small_count,
    )
    return tuple(targets)


def meal_name(meal_class: MealClass, index: int) -> str:
    """Return the display name for the meal at a 0-based index."""
    if meal_class is MealClass.SMALL:
        return f"Snack {index + 1}"
    if index < len(LARGE_MEAL_NAMES):
        return LARGE_MEAL_NAMES[index]
    return f"Large Meal {index + 1}"


def _class_targets(
    meal_class: MealClass,
    budget: MacroTarget,
    count: int,
    share_pct: float,
    macro_shares: MacroShares,
) -> list[MealTarget]:
    if count == 0:
        if share_pct != 0:
            raise DivisionByZeroError(
                f"{meal_class.value} meals have {share_pct}% share but no meals"
            )
        return []
    allotment = budget.total_calories * share_pct / 100 / count
    calories = round_half_up(allotment)
    protein, carbs, fat = grams_from_calories(allotment, macro_shares)
    return [
        MealTarget(
            id=f"{meal_class.value}-{index}",
            meal_class=meal_class,
            name=meal_name(meal_class, index),
            calories=calories,
            protein_g=protein,
            carbs_g=carbs,
            fat_g=fat,
        )
        for index in range(count)
    ]


def _is_hundred(value: float) -> bool:
    return math.isclose(value, 100.0, abs_tol=1e-9)
