"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_planner.config import Settings, parse_macro_shares
from diet_planner.services.plans import InMemoryPlanRepository, PlanService
from diet_planner.services.suggestions import (
    RandomSuggestionProvider,
    SuggestionService,
)
from diet_planner.services.wizard import (
    InMemoryWizardSessionRepository,
    WizardService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    wizard_service: WizardService
    suggestion_service: SuggestionService
    plan_service: PlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    suggestion_service = SuggestionService(
        provider=RandomSuggestionProvider.create(resolved_settings.suggestion_seed),
        tolerance=resolved_settings.prescription_tolerance,
    )
    plan_service = PlanService(InMemoryPlanRepository())
    wizard_service = WizardService(
        repository=InMemoryWizardSessionRepository(),
        suggestion_service=suggestion_service,
        plan_service=plan_service,
        large_share_pct=resolved_settings.large_share_pct,
        small_share_pct=resolved_settings.small_share_pct,
        macro_shares=parse_macro_shares(resolved_settings.macro_shares),
        calorie_floor_kcal=resolved_settings.calorie_floor_kcal,
        off_target_tolerance=resolved_settings.off_target_tolerance,
        auto_redistribute=resolved_settings.auto_redistribute,
        default_large_meals=resolved_settings.default_large_meals,
        default_small_meals=resolved_settings.default_small_meals,
        native_app=resolved_settings.native_app,
    )
    return AppContainer(
        settings=resolved_settings,
        wizard_service=wizard_service,
        suggestion_service=suggestion_service,
        plan_service=plan_service,
    )
