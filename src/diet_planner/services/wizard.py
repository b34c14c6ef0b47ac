"""Wizard session flow tying the planning engine together."""

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID, uuid4

from diet_planner.domain.errors import (
    InvalidProfileError,
    SessionNotFoundError,
    WizardStepError,
)
from diet_planner.domain.macros import STANDARD_SHARES, MacroKind, MacroShares
from diet_planner.domain.meals import DeviationReport
from diet_planner.domain.profile import PatientProfile
from diet_planner.domain.wizard import SavedPlan, WizardSession, WizardStep
from diet_planner.services import redistribution, reporter
from diet_planner.services.estimator import energy_breakdown, estimate
from diet_planner.services.plans import PlanService, export_plan_text
from diet_planner.services.splitter import split
from diet_planner.services.suggestions import SuggestionService

_logger = logging.getLogger(__name__)


class WizardSessionRepository(Protocol):
    """Persistence interface for wizard sessions."""

    def save_session(self, session: WizardSession) -> None:
        """Create or replace a session."""

    def get_session(self, session_id: UUID) -> WizardSession | None:
        """Return a session by id, if present."""


@dataclass
class InMemoryWizardSessionRepository(WizardSessionRepository):
    """Keeps wizard sessions in process memory."""

    sessions: dict[UUID, WizardSession] = field(default_factory=dict)

    def save_session(self, session: WizardSession) -> None:
        self.sessions[session.id] = session

    def get_session(self, session_id: UUID) -> WizardSession | None:
        return self.sessions.get(session_id)


@dataclass
class WizardService:
    """Drives a session through the four planning steps."""

    repository: WizardSessionRepository
    suggestion_service: SuggestionService
    plan_service: PlanService
    large_share_pct: float = 70.0
    small_share_pct: float = 30.0
    macro_shares: MacroShares = STANDARD_SHARES
    calorie_floor_kcal: int = redistribution.DEFAULT_CALORIE_FLOOR
    off_target_tolerance: float = reporter.DEFAULT_TOLERANCE
    auto_redistribute: bool = True
    default_large_meals: int = 3
    default_small_meals: int = 2
    native_app: bool = False

    def start(self) -> WizardSession:
        """Create a new session on the first step."""
        steps = tuple(WizardStep)
        if self.native_app:
            steps = tuple(step for step in steps if step is not WizardStep.PRESCRIPTION)
        session = WizardSession(
            id=uuid4(),
            auto_redistribute=self.auto_redistribute,
            large_meals=self.default_large_meals,
            small_meals=self.default_small_meals,
            available_steps=steps,
        )
        self.repository.save_session(session)
        _logger.info("Started wizard session %s", session.id)
        return session

    def get(self, session_id: UUID) -> WizardSession:
        """Return a session or raise when it does not exist."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return session

    def set_profile(self, session_id: UUID, profile: PatientProfile) -> WizardSession:
        """Store the patient profile and compute the daily budget.

        Any previous distribution is discarded.
        """
        session = self.get(session_id)
        if not profile.is_complete():
            raise InvalidProfileError("Height, weight and age must be positive")
        updated = replace(
            session,
            profile=profile,
            energy=energy_breakdown(profile),
            budget=estimate(profile),
            targets=(),
            prescriptions=(),
        )
        return self._save(updated)

    def distribute(
        self,
        session_id: UUID,
        large_meals: int | None = None,
        small_meals: int | None = None,
    ) -> WizardSession:
        """Split the daily budget into meal targets."""
        session = self.get(session_id)
        if session.budget is None:
            raise WizardStepError("Calculate macros before distributing meals")
        large = session.large_meals if large_meals is None else large_meals
        small = session.small_meals if small_meals is None else small_meals
        large_share, small_share = self._class_shares(large, small)
        targets = split(
            session.budget,
            large,
            small,
            large_share_pct=large_share,
            small_share_pct=small_share,
            macro_shares=self.macro_shares,
        )
        updated = replace(
            session,
            targets=targets,
            prescriptions=(),
            large_meals=large,
            small_meals=small,
        )
        return self._save(updated)

    def adjust_calories(
        self, session_id: UUID, meal_id: str, calories: int
    ) -> WizardSession:
        """Edit a meal's calories, redistributing when enabled."""
        session = self.get(session_id)
        targets = redistribution.adjust_calories(
            session.targets,
            meal_id,
            calories,
            auto_redistribute=session.auto_redistribute,
            floor_kcal=self.calorie_floor_kcal,
        )
        return self._save(replace(session, targets=targets, prescriptions=()))

    def adjust_macro(
        self, session_id: UUID, meal_id: str, macro: MacroKind, grams: int
    ) -> WizardSession:
        """Edit one macro of a meal, offsetting siblings when enabled."""
        session = self.get(session_id)
        targets = redistribution.adjust_macro(
            session.targets,
            meal_id,
            macro,
            grams,
            auto_redistribute=session.auto_redistribute,
        )
        return self._save(replace(session, targets=targets, prescriptions=()))

    def set_auto_redistribute(self, session_id: UUID, enabled: bool) -> WizardSession:
        """Toggle automatic redistribution for the session."""
        session = self.get(session_id)
        return self._save(replace(session, auto_redistribute=enabled))

    def report(self, session_id: UUID) -> DeviationReport:
        """Report how far the meal targets are from the daily budget."""
        session = self.get(session_id)
        if session.budget is None:
            raise WizardStepError("Calculate macros before reporting totals")
        return reporter.report(
            session.targets, session.budget, self.off_target_tolerance
        )

    def next_step(self, session_id: UUID) -> WizardSession:
        """Advance to the next available step."""
        session = self.get(session_id)
        if not can_progress(session):
            raise WizardStepError(
                f"Step {session.current_step.title} is not complete"
            )
        steps = session.available_steps
        position = steps.index(session.current_step)
        if position + 1 >= len(steps):
            raise WizardStepError("Already on the last step")
        return self._save(replace(session, current_step=steps[position + 1]))

    def previous_step(self, session_id: UUID) -> WizardSession:
        """Go back one step."""
        session = self.get(session_id)
        steps = session.available_steps
        position = steps.index(session.current_step)
        if position == 0:
            raise WizardStepError("Already on the first step")
        return self._save(replace(session, current_step=steps[position - 1]))

    async def generate_suggestions(self, session_id: UUID) -> WizardSession:
        """Ask the suggestion provider for foods for every meal."""
        session = self.get(session_id)
        if WizardStep.PRESCRIPTION not in session.available_steps:
            raise WizardStepError("Prescriptions are not available in the app")
        if not session.targets:
            raise WizardStepError("Distribute meals before generating suggestions")
        prescriptions = await self.suggestion_service.generate(session.targets)
        return self._save(replace(session, prescriptions=prescriptions))

    def change_food_quantity(
        self, session_id: UUID, meal_id: str, food_id: str, quantity: int
    ) -> WizardSession:
        """Resize a suggested food."""
        session = self.get(session_id)
        prescriptions = self.suggestion_service.change_quantity(
            session.prescriptions, meal_id, food_id, quantity
        )
        return self._save(replace(session, prescriptions=prescriptions))

    def export_text(self, session_id: UUID) -> str:
        """Render the session's plan as text."""
        session = self.get(session_id)
        if session.profile is None or session.budget is None:
            raise WizardStepError("Calculate macros before exporting")
        return export_plan_text(
            session.profile, session.budget, session.targets, session.prescriptions
        )

    def save(self, session_id: UUID) -> SavedPlan:
        """Save the session's plan through the plan service."""
        session = self.get(session_id)
        if session.profile is None or session.budget is None or not session.targets:
            raise WizardStepError("Complete the plan before saving")
        plan = SavedPlan(
            session_id=session.id,
            profile=session.profile,
            budget=session.budget,
            targets=session.targets,
            prescriptions=session.prescriptions,
        )
        self.plan_service.save(plan)
        return plan

    def on_target_meals(self, session: WizardSession) -> dict[str, bool]:
        """Return, per prescribed meal id, whether its foods meet the meal target."""
        meals = {meal.id: meal for meal in session.targets}
        return {
            prescription.meal_id: self.suggestion_service.is_on_target(
                prescription, meals[prescription.meal_id]
            )
            for prescription in session.prescriptions
            if prescription.meal_id in meals
        }

    def _class_shares(self, large_meals: int, small_meals: int) -> tuple[float, float]:
        # A class with no meals hands its share to the other class.
        if small_meals == 0 and large_meals > 0:
            return 100.0, 0.0
        if large_meals == 0 and small_meals > 0:
            return 0.0, 100.0
        return self.large_share_pct, self.small_share_pct

    def _save(self, session: WizardSession) -> WizardSession:
        self.repository.save_session(session)
        return session


def can_progress(session: WizardSession) -> bool:
    """Return True when the current step has produced its output."""
    if session.current_step is WizardStep.MACRO_CALCULATOR:
        return session.budget is not None
    if session.current_step in {
        WizardStep.MEAL_DISTRIBUTION,
        WizardStep.FINE_ADJUSTMENT,
    }:
        return bool(session.targets)
    return True
