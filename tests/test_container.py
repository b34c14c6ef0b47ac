"""Tests for container wiring."""

from diet_planner.config import Settings
from diet_planner.containers import build_container
from diet_planner.domain.macros import MacroShares


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.wizard_service is not None
    assert container.wizard_service.suggestion_service is container.suggestion_service
    assert container.wizard_service.plan_service is container.plan_service


def test_build_container_applies_settings() -> None:
    settings = Settings(
        _env_file=None,
        macro_shares="40/30/30",
        calorie_floor_kcal=120,
        native_app=True,
    )

    container = build_container(settings)
    session = container.wizard_service.start()

    assert container.wizard_service.macro_shares == MacroShares(40, 30, 30)
    assert container.wizard_service.calorie_floor_kcal == 120
    assert len(session.available_steps) == 3
