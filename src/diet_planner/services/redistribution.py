"""Redistribution of single-meal edits across sibling meals.

Calorie and macro edits follow different policies:

* calorie edits use an even, lossy split: each sibling absorbs the rounded
  per-meal share and is clamped at a calorie floor. Whatever the floor
  swallows is dropped, so the class total may drift.
* macro edits use an exact split: the last sibling takes the remainder so the
  sibling gram total on the edited macro moves by exactly ``-delta``. No
  floor is applied and siblings may go negative.
"""

import logging
from dataclasses import replace

from diet_planner.domain.errors import MealNotFoundError
from diet_planner.domain.macros import (
    MacroKind,
    calories_from_grams,
    grams_from_calories,
    round_half_up,
)
from diet_planner.domain.meals import MealTarget, MealTargetSequence

DEFAULT_CALORIE_FLOOR = 100

_logger = logging.getLogger(__name__)


def adjust_calories(
    targets: MealTargetSequence,
    meal_id: str,
    new_calories: int,
    *,
    auto_redistribute: bool = True,
    floor_kcal: int = DEFAULT_CALORIE_FLOOR,
) -> MealTargetSequence:
    """Set a meal's calories and spread the change over same-class meals."""
    index = _find_index(targets, meal_id)
    meal = targets[index]
    delta = new_calories - meal.calories

    updated = list(targets)
    updated[index] = _with_calories(meal, new_calories)

    if auto_redistribute and delta != 0:
        sibling_indexes = _sibling_indexes(targets, meal)
        if sibling_indexes:
            per_sibling = round_half_up(delta / len(sibling_indexes))
            for sibling_index in sibling_indexes:
                sibling = targets[sibling_index]
                calories = max(floor_kcal, sibling.calories - per_sibling)
                updated[sibling_index] = _with_calories(sibling, calories)
            _logger.debug(
                "Spread %s kcal from %s over %s meals (%s each)",
                delta,
                meal_id,
                len(sibling_indexes),
                per_sibling,
            )
    return tuple(updated)


def adjust_macro(
    targets: MealTargetSequence,
    meal_id: str,
    macro: MacroKind,
    new_value: int,
    *,
    auto_redistribute: bool = True,
) -> MealTargetSequence:
    """Set one macro of a meal and offset the change on same-class meals."""
    macro = MacroKind(macro)
    index = _find_index(targets, meal_id)
    meal = targets[index]
    delta = new_value - getattr(meal, macro.field_name)

    updated = list(targets)
    updated[index] = _with_macro(meal, macro, new_value)

    if auto_redistribute and delta != 0:
        sibling_indexes = _sibling_indexes(targets, meal)
        shares = exact_shares(delta, len(sibling_indexes))
        for sibling_index, share in zip(sibling_indexes, shares, strict=True):
            sibling = targets[sibling_index]
            current = getattr(sibling, macro.field_name)
            updated[sibling_index] = _with_macro(sibling, macro, current - share)
        if sibling_indexes:
            _logger.debug(
                "Offset %s %s grams from %s over %s meals",
                delta,
                macro.value,
                meal_id,
                len(sibling_indexes),
            )
    return tuple(updated)


def exact_shares(delta: int, count: int) -> list[int]:
    """Split an integer delta into ``count`` parts that sum to ``delta``.

    Every part but the last is ``delta / count`` truncated towards zero; the
    last part carries the remainder.
    """
    if count <= 0:
        return []
    base = abs(delta) // count
    if delta < 0:
        base = -base
    return [base] * (count - 1) + [delta - base * (count - 1)]


def _find_index(targets: MealTargetSequence, meal_id: str) -> int:
    for index, meal in enumerate(targets):
        if meal.id == meal_id:
            return index
    raise MealNotFoundError(meal_id)


def _sibling_indexes(targets: MealTargetSequence, meal: MealTarget) -> list[int]:
    return [
        index
        for index, other in enumerate(targets)
        if other.meal_class == meal.meal_class and other.id != meal.id
    ]


def _with_calories(meal: MealTarget, calories: int) -> MealTarget:
    protein, carbs, fat = grams_from_calories(calories)
    return replace(
        meal, calories=calories, protein_g=protein, carbs_g=carbs, fat_g=fat
    )


def _with_macro(meal: MealTarget, macro: MacroKind, grams: int) -> MealTarget:
    edited = replace(meal, **{macro.field_name: grams})
    return replace(
        edited,
        calories=calories_from_grams(edited.protein_g, edited.carbs_g, edited.fat_g),
    )
