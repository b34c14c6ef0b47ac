"""Macronutrient domain models and conversion helpers."""

import math
from dataclasses import dataclass
from enum import Enum

PROTEIN_KCAL_PER_GRAM = 4
CARBS_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9


class MacroKind(str, Enum):
    """Macronutrient dimension that can be edited."""

    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"

    @property
    def kcal_per_gram(self) -> int:
        """Return the energy density of the macronutrient."""
        return _KCAL_PER_GRAM[self]

    @property
    def field_name(self) -> str:
        """Return the gram attribute name on macro-bearing records."""
        return f"{self.value}_g"


_KCAL_PER_GRAM = {
    MacroKind.PROTEIN: PROTEIN_KCAL_PER_GRAM,
    MacroKind.CARBS: CARBS_KCAL_PER_GRAM,
    MacroKind.FAT: FAT_KCAL_PER_GRAM,
}


@dataclass(frozen=True)
class MacroShares:
    """Percentage of calories assigned to each macronutrient."""

    protein_pct: float = 30.0
    carbs_pct: float = 40.0
    fat_pct: float = 30.0

    @property
    def total_pct(self) -> float:
        """Return the sum of the three shares."""
        return self.protein_pct + self.carbs_pct + self.fat_pct


STANDARD_SHARES = MacroShares()


@dataclass(frozen=True)
class MacroTarget:
    """Daily calorie and macronutrient budget."""

    total_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class EnergyBreakdown:
    """Intermediate energy values behind a macro target."""

    bmr: float
    tdee: float
    total_calories: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards +inf."""
    return math.floor(value + 0.5)


def grams_from_calories(
    calories: float, shares: MacroShares = STANDARD_SHARES
) -> tuple[int, int, int]:
    """Split calories into protein, carbs and fat grams."""
    protein = round_half_up(
        calories * shares.protein_pct / 100 / MacroKind.PROTEIN.kcal_per_gram
    )
    carbs = round_half_up(
        calories * shares.carbs_pct / 100 / MacroKind.CARBS.kcal_per_gram
    )
    fat = round_half_up(calories * shares.fat_pct / 100 / MacroKind.FAT.kcal_per_gram)
    return protein, carbs, fat


def calories_from_grams(protein_g: int, carbs_g: int, fat_g: int) -> int:
    """Return the energy of the given macro grams."""
    return (
        protein_g * MacroKind.PROTEIN.kcal_per_gram
        + carbs_g * MacroKind.CARBS.kcal_per_gram
        + fat_g * MacroKind.FAT.kcal_per_gram
    )
