"""Domain models for meal targets."""

from dataclasses import dataclass
from enum import Enum


class MealClass(str, Enum):
    """Partition tag grouping meals for redistribution."""

    LARGE = "large"
    SMALL = "small"


@dataclass(frozen=True)
class MealTarget:
    """Calorie and macro target for a single meal."""

    id: str
    meal_class: MealClass
    name: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


MealTargetSequence = tuple[MealTarget, ...]


@dataclass(frozen=True)
class MealTotals:
    """Summed calories and macros across meals."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class DeviationReport:
    """Comparison of current meal totals against the daily budget."""

    current_totals: MealTotals
    diff: int
    percentage: float
    is_off_target: bool
