"""Food suggestions for meal targets."""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Protocol

from diet_planner.domain.macros import round_half_up
from diet_planner.domain.meals import MealTarget
from diet_planner.domain.suggestions import (
    CatalogFood,
    FoodItem,
    MealPrescription,
    PrescriptionTotals,
)

FOOD_CATALOG: tuple[CatalogFood, ...] = (
    CatalogFood("Brown Rice", 110, 2.5, 23, 0.9),
    CatalogFood("Grilled Chicken", 165, 31, 0, 3.6),
    CatalogFood("Broccoli", 34, 2.8, 7, 0.4),
    CatalogFood("Olive Oil", 119, 0, 0, 13.5, unit="ml"),
    CatalogFood("Sweet Potato", 86, 1.6, 20, 0.1),
    CatalogFood("Egg", 72, 6.3, 0.4, 4.8, unit="un"),
    CatalogFood("Oats", 68, 2.4, 12, 1.4),
    CatalogFood("Banana", 89, 1.1, 23, 0.3, unit="un"),
)

MAX_FOODS_PER_MEAL = 3
MIN_REMAINING_CALORIES = 50
DEFAULT_PRESCRIPTION_TOLERANCE = 0.1

_logger = logging.getLogger(__name__)


class SuggestionProvider(Protocol):
    """Interface for anything that proposes foods for meal targets."""

    async def suggest(
        self, targets: Iterable[MealTarget]
    ) -> list[MealPrescription]:
        """Return one prescription per meal target."""


@dataclass
class RandomSuggestionProvider(SuggestionProvider):
    """Picks random catalog foods sized to each meal's calories."""

    catalog: tuple[CatalogFood, ...] = FOOD_CATALOG
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(cls, seed: int | None = None) -> "RandomSuggestionProvider":
        """Create a provider, optionally seeded for reproducible picks."""
        return cls(rng=random.Random(seed))

    async def suggest(
        self, targets: Iterable[MealTarget]
    ) -> list[MealPrescription]:
        """Build a prescription for every meal target."""
        return [self._prescribe(meal) for meal in targets]

    def _prescribe(self, meal: MealTarget) -> MealPrescription:
        foods: list[FoodItem] = []
        remaining = meal.calories
        for index in range(MAX_FOODS_PER_MEAL):
            if remaining <= MIN_REMAINING_CALORIES:
                break
            reference = self.rng.choice(self.catalog)
            quantity = round_half_up((remaining / 3) / (reference.calories / 100))
            food = portion(f"{meal.id}-food-{index}", reference, quantity)
            foods.append(food)
            remaining -= food.calories
        return MealPrescription(
            meal_id=meal.id,
            meal_name=meal.name,
            foods=tuple(foods),
            totals=sum_foods(foods),
        )


@dataclass
class SuggestionService:
    """Generates and edits meal prescriptions."""

    provider: SuggestionProvider
    tolerance: float = DEFAULT_PRESCRIPTION_TOLERANCE

    async def generate(
        self, targets: Iterable[MealTarget]
    ) -> tuple[MealPrescription, ...]:
        """Ask the provider for prescriptions covering every meal."""
        prescriptions = tuple(await self.provider.suggest(targets))
        _logger.info("Generated %s meal prescriptions", len(prescriptions))
        return prescriptions

    def change_quantity(
        self,
        prescriptions: Iterable[MealPrescription],
        meal_id: str,
        food_id: str,
        quantity: int,
    ) -> tuple[MealPrescription, ...]:
        """Resize one food and refresh the totals of its prescription.

        Unknown meal or food ids leave the prescriptions unchanged.
        """
        updated: list[MealPrescription] = []
        for prescription in prescriptions:
            if prescription.meal_id != meal_id:
                updated.append(prescription)
                continue
            foods = [
                rescale(food, quantity) if food.id == food_id else food
                for food in prescription.foods
            ]
            updated.append(
                replace(prescription, foods=tuple(foods), totals=sum_foods(foods))
            )
        return tuple(updated)

    def is_on_target(self, prescription: MealPrescription, meal: MealTarget) -> bool:
        """Return True when the prescription is within tolerance of the meal."""
        diff = prescription.totals.calories - meal.calories
        return abs(diff) <= meal.calories * self.tolerance


def portion(food_id: str, reference: CatalogFood, quantity: int) -> FoodItem:
    """Return a food item scaled from its per-100 reference values."""
    factor = quantity / 100
    return FoodItem(
        id=food_id,
        name=reference.name,
        quantity=quantity,
        unit=reference.unit,
        calories=round_half_up(reference.calories * factor),
        protein_g=round_half_up(reference.protein_g * factor),
        carbs_g=round_half_up(reference.carbs_g * factor),
        fat_g=round_half_up(reference.fat_g * factor),
        reference=reference,
    )


def rescale(food: FoodItem, quantity: int) -> FoodItem:
    """Return the food resized to a new quantity."""
    if food.reference is not None:
        return portion(food.id, food.reference, quantity)
    if food.quantity <= 0:
        return replace(food, quantity=quantity)
    factor = quantity / food.quantity
    return replace(
        food,
        quantity=quantity,
        calories=round_half_up(food.calories * factor),
        protein_g=round_half_up(food.protein_g * factor),
        carbs_g=round_half_up(food.carbs_g * factor),
        fat_g=round_half_up(food.fat_g * factor),
    )


def sum_foods(foods: Iterable[FoodItem]) -> PrescriptionTotals:
    """Sum the macros of a list of foods."""
    total = PrescriptionTotals(calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for food in foods:
        total = PrescriptionTotals(
            calories=total.calories + food.calories,
            protein_g=total.protein_g + food.protein_g,
            carbs_g=total.carbs_g + food.carbs_g,
            fat_g=total.fat_g + food.fat_g,
        )
    return total
