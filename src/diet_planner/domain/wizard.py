"""Domain models for wizard sessions."""

from dataclasses import dataclass, field
from enum import IntEnum
from uuid import UUID

from diet_planner.domain.macros import EnergyBreakdown, MacroTarget
from diet_planner.domain.meals import MealTargetSequence
from diet_planner.domain.profile import PatientProfile
from diet_planner.domain.suggestions import MealPrescription


class WizardStep(IntEnum):
    """Ordered wizard steps."""

    MACRO_CALCULATOR = 1
    MEAL_DISTRIBUTION = 2
    FINE_ADJUSTMENT = 3
    PRESCRIPTION = 4

    @property
    def title(self) -> str:
        """Return the display title for the step."""
        return _STEP_TITLES[self]


_STEP_TITLES = {
    WizardStep.MACRO_CALCULATOR: "Macro Calculator",
    WizardStep.MEAL_DISTRIBUTION: "Meal Distribution",
    WizardStep.FINE_ADJUSTMENT: "Fine Adjustment",
    WizardStep.PRESCRIPTION: "Smart Prescription",
}


@dataclass(frozen=True)
class WizardSession:
    """Snapshot of a single wizard session."""

    id: UUID
    current_step: WizardStep = WizardStep.MACRO_CALCULATOR
    profile: PatientProfile | None = None
    energy: EnergyBreakdown | None = None
    budget: MacroTarget | None = None
    targets: MealTargetSequence = ()
    prescriptions: tuple[MealPrescription, ...] = ()
    auto_redistribute: bool = True
    large_meals: int = 3
    small_meals: int = 2
    available_steps: tuple[WizardStep, ...] = field(
        default_factory=lambda: tuple(WizardStep)
    )


@dataclass(frozen=True)
class SavedPlan:
    """Plan snapshot handed to the plan repository."""

    session_id: UUID
    profile: PatientProfile
    budget: MacroTarget
    targets: MealTargetSequence
    prescriptions: tuple[MealPrescription, ...]
