"""Wizard API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from diet_planner.api.models import (
    AutoRedistributeRequest,
    CaloriesAdjustment,
    DistributionRequest,
    MacroAdjustment,
    ProfileRequest,
    QuantityChange,
)
from diet_planner.services.wizard import can_progress

if TYPE_CHECKING:
    from diet_planner.containers import AppContainer
    from diet_planner.domain.wizard import WizardSession
    from diet_planner.services.wizard import WizardService

router = APIRouter(prefix="/wizard", tags=["wizard"])


def _wizard(request: Request) -> WizardService:
    container: AppContainer = request.app.state.container
    return container.wizard_service


@router.post("/sessions", status_code=201)
async def create_session(request: Request) -> dict[str, object]:
    """Start a new wizard session."""
    return _session_payload(_wizard(request).start(), request)


@router.get("/sessions/{session_id}")
async def get_session(session_id: UUID, request: Request) -> dict[str, object]:
    """Return the current state of a session."""
    return _session_payload(_wizard(request).get(session_id), request)


@router.put("/sessions/{session_id}/profile")
async def set_profile(
    session_id: UUID, payload: ProfileRequest, request: Request
) -> dict[str, object]:
    """Store the patient profile and compute macros."""
    session = _wizard(request).set_profile(session_id, payload.to_profile())
    return _session_payload(session, request)


@router.post("/sessions/{session_id}/distribution")
async def distribute(
    session_id: UUID, payload: DistributionRequest, request: Request
) -> dict[str, object]:
    """Split the daily budget into meals."""
    session = _wizard(request).distribute(
        session_id, payload.large_meals, payload.small_meals
    )
    return _session_payload(session, request)


@router.put("/sessions/{session_id}/meals/{meal_id}/calories")
async def adjust_calories(
    session_id: UUID, meal_id: str, payload: CaloriesAdjustment, request: Request
) -> dict[str, object]:
    """Change the calories of one meal."""
    session = _wizard(request).adjust_calories(session_id, meal_id, payload.calories)
    return _session_payload(session, request)


@router.put("/sessions/{session_id}/meals/{meal_id}/macro")
async def adjust_macro(
    session_id: UUID, meal_id: str, payload: MacroAdjustment, request: Request
) -> dict[str, object]:
    """Change one macro of one meal."""
    session = _wizard(request).adjust_macro(
        session_id, meal_id, payload.macro, payload.grams
    )
    return _session_payload(session, request)


@router.put("/sessions/{session_id}/auto-redistribute")
async def set_auto_redistribute(
    session_id: UUID, payload: AutoRedistributeRequest, request: Request
) -> dict[str, object]:
    """Toggle automatic redistribution."""
    session = _wizard(request).set_auto_redistribute(session_id, payload.enabled)
    return _session_payload(session, request)


@router.get("/sessions/{session_id}/report")
async def deviation_report(session_id: UUID, request: Request) -> dict[str, object]:
    """Return meal totals against the daily budget."""
    return asdict(_wizard(request).report(session_id))


@router.post("/sessions/{session_id}/next")
async def next_step(session_id: UUID, request: Request) -> dict[str, object]:
    """Advance to the next step."""
    return _session_payload(_wizard(request).next_step(session_id), request)


@router.post("/sessions/{session_id}/back")
async def previous_step(session_id: UUID, request: Request) -> dict[str, object]:
    """Return to the previous step."""
    return _session_payload(_wizard(request).previous_step(session_id), request)


@router.post("/sessions/{session_id}/suggestions")
async def generate_suggestions(
    session_id: UUID, request: Request
) -> dict[str, object]:
    """Generate food suggestions for every meal."""
    session = await _wizard(request).generate_suggestions(session_id)
    return _session_payload(session, request)


@router.put("/sessions/{session_id}/meals/{meal_id}/foods/{food_id}/quantity")
async def change_food_quantity(  # noqa: PLR0913
    session_id: UUID,
    meal_id: str,
    food_id: str,
    payload: QuantityChange,
    request: Request,
) -> dict[str, object]:
    """Resize a suggested food."""
    session = _wizard(request).change_food_quantity(
        session_id, meal_id, food_id, payload.quantity
    )
    return _session_payload(session, request)


@router.get("/sessions/{session_id}/export", response_class=PlainTextResponse)
async def export_plan(session_id: UUID, request: Request) -> PlainTextResponse:
    """Return the plan as plain text."""
    return PlainTextResponse(_wizard(request).export_text(session_id))


@router.post("/sessions/{session_id}/save")
async def save_plan(session_id: UUID, request: Request) -> dict[str, str]:
    """Save the finished plan."""
    _wizard(request).save(session_id)
    return {"status": "saved"}


def _session_payload(
    session: WizardSession, request: Request
) -> dict[str, object]:
    payload = asdict(session)
    on_target = _wizard(request).on_target_meals(session)
    for prescription in payload["prescriptions"]:
        prescription["on_target"] = on_target.get(prescription["meal_id"], False)
        for food in prescription["foods"]:
            food.pop("reference", None)
    payload["available_steps"] = [
        {"id": int(step), "title": step.title} for step in session.available_steps
    ]
    payload["current_step"] = int(session.current_step)
    payload["can_progress"] = can_progress(session)
    return payload
