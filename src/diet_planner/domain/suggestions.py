"""Domain models for food suggestions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogFood:
    """Reference food with macros per 100 units."""

    name: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    unit: str = "g"


@dataclass(frozen=True)
class FoodItem:
    """Suggested food portion for a meal."""

    id: str
    name: str
    quantity: int
    unit: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    reference: CatalogFood | None = None


@dataclass(frozen=True)
class PrescriptionTotals:
    """Summed macros of the foods in a prescription."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class MealPrescription:
    """Foods suggested for a meal target."""

    meal_id: str
    meal_name: str
    foods: tuple[FoodItem, ...]
    totals: PrescriptionTotals
