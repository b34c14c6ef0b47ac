"""Shared test fixtures."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import pytest

from diet_planner.config import Settings
from diet_planner.containers import AppContainer
from diet_planner.domain.macros import MacroTarget
from diet_planner.domain.meals import MealClass, MealTarget
from diet_planner.domain.profile import ActivityLevel, Goal, PatientProfile, Sex
from diet_planner.domain.suggestions import (
    FoodItem,
    MealPrescription,
    PrescriptionTotals,
)
from diet_planner.services.plans import InMemoryPlanRepository, PlanService
from diet_planner.services.suggestions import SuggestionProvider, SuggestionService
from diet_planner.services.wizard import (
    InMemoryWizardSessionRepository,
    WizardService,
)


@dataclass
class FakeSuggestionProvider(SuggestionProvider):
    """Suggestion provider returning one fixed food per meal."""

    calls: list[list[str]] = field(default_factory=list)

    async def suggest(
        self, targets: Iterable[MealTarget]
    ) -> list[MealPrescription]:
        meals = list(targets)
        self.calls.append([meal.id for meal in meals])
        prescriptions = []
        for meal in meals:
            food = FoodItem(
                id=f"{meal.id}-food-0",
                name="Oats",
                quantity=100,
                unit="g",
                calories=meal.calories,
                protein_g=meal.protein_g,
                carbs_g=meal.carbs_g,
                fat_g=meal.fat_g,
            )
            prescriptions.append(
                MealPrescription(
                    meal_id=meal.id,
                    meal_name=meal.name,
                    foods=(food,),
                    totals=PrescriptionTotals(
                        calories=food.calories,
                        protein_g=food.protein_g,
                        carbs_g=food.carbs_g,
                        fat_g=food.fat_g,
                    ),
                )
            )
        return prescriptions


def make_meal(
    meal_id: str,
    calories: int,
    meal_class: MealClass = MealClass.LARGE,
    protein_g: int = 0,
    carbs_g: int = 0,
    fat_g: int = 0,
) -> MealTarget:
    return MealTarget(
        id=meal_id,
        meal_class=meal_class,
        name=meal_id,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def profile() -> PatientProfile:
    return PatientProfile(
        height_cm=179,
        weight_kg=70,
        age_years=30,
        sex=Sex.MALE,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        goal=Goal.MAINTAIN_WEIGHT,
    )


@pytest.fixture
def budget() -> MacroTarget:
    return MacroTarget(total_calories=2000, protein_g=150, carbs_g=200, fat_g=67)


@pytest.fixture
def suggestion_provider() -> FakeSuggestionProvider:
    return FakeSuggestionProvider()


@pytest.fixture
def plan_repository() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


@pytest.fixture
def wizard_service(
    suggestion_provider: FakeSuggestionProvider,
    plan_repository: InMemoryPlanRepository,
) -> WizardService:
    return WizardService(
        repository=InMemoryWizardSessionRepository(),
        suggestion_service=SuggestionService(suggestion_provider),
        plan_service=PlanService(plan_repository),
    )


@pytest.fixture
def container(settings: Settings, wizard_service: WizardService) -> AppContainer:
    return AppContainer(
        settings=settings,
        wizard_service=wizard_service,
        suggestion_service=wizard_service.suggestion_service,
        plan_service=wizard_service.plan_service,
    )
