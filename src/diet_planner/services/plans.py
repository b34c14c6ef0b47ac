"""Plan export and saving."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from diet_planner.domain.macros import MacroTarget
from diet_planner.domain.meals import MealTarget
from diet_planner.domain.profile import PatientProfile
from diet_planner.domain.suggestions import MealPrescription
from diet_planner.domain.wizard import SavedPlan

_logger = logging.getLogger(__name__)


class PlanRepository(Protocol):
    """Persistence interface for finished diet plans."""

    def save_plan(self, plan: SavedPlan) -> None:
        """Store a plan snapshot."""

    def get_plan(self, session_id: UUID) -> SavedPlan | None:
        """Return the plan saved for a session, if present."""


@dataclass
class InMemoryPlanRepository(PlanRepository):
    """Keeps saved plans in process memory."""

    plans: dict[UUID, SavedPlan] = field(default_factory=dict)

    def save_plan(self, plan: SavedPlan) -> None:
        self.plans[plan.session_id] = plan

    def get_plan(self, session_id: UUID) -> SavedPlan | None:
        return self.plans.get(session_id)


@dataclass
class PlanService:
    """Service for exporting and saving plans."""

    repository: PlanRepository

    def save(self, plan: SavedPlan) -> None:
        """Persist a plan snapshot."""
        _logger.info(
            "Saving diet plan: session=%s meals=%s prescriptions=%s",
            plan.session_id,
            len(plan.targets),
            len(plan.prescriptions),
        )
        self.repository.save_plan(plan)


def export_plan_text(
    profile: PatientProfile,
    budget: MacroTarget,
    targets: Iterable[MealTarget],
    prescriptions: Iterable[MealPrescription] = (),
) -> str:
    """Render a plan as plain text."""
    lines = [
        "Diet Plan",
        "",
        (
            f"Patient: {profile.sex.value}, {profile.age_years} years, "
            f"{_format_number(profile.height_cm)} cm, "
            f"{_format_number(profile.weight_kg)} kg"
        ),
        f"Activity: {profile.activity_level.value}",
        f"Goal: {profile.goal.value}",
        "",
        (
            f"Daily target: {budget.total_calories} kcal "
            f"(P {budget.protein_g}g, C {budget.carbs_g}g, F {budget.fat_g}g)"
        ),
        "",
        "Meals:",
    ]
    by_meal = {prescription.meal_id: prescription for prescription in prescriptions}
    for meal in targets:
        lines.append(
            f"- {meal.name}: {meal.calories} kcal "
            f"(P {meal.protein_g}g, C {meal.carbs_g}g, F {meal.fat_g}g)"
        )
        prescription = by_meal.get(meal.id)
        if prescription is None:
            continue
        for food in prescription.foods:
            lines.append(
                f"    * {food.name}: {food.quantity}{food.unit} "
                f"({food.calories} kcal)"
            )
    return "\n".join(lines) + "\n"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
