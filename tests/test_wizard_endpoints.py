"""Tests for wizard endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from diet_planner.api.app import create_app

PROFILE = {
    "height_cm": 179,
    "weight_kg": 70,
    "age_years": 30,
    "sex": "Male",
    "activity_level": "Moderately Active",
    "goal": "Maintain Weight",
}


def _client_with_session(container) -> tuple[TestClient, str]:
    client = TestClient(create_app(container))
    response = client.post("/wizard/sessions")
    assert response.status_code == 201
    return client, response.json()["id"]


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_session_payload(container) -> None:
    client, session_id = _client_with_session(container)

    data = client.get(f"/wizard/sessions/{session_id}").json()

    assert data["current_step"] == 1
    assert data["can_progress"] is False
    assert [step["title"] for step in data["available_steps"]] == [
        "Macro Calculator",
        "Meal Distribution",
        "Fine Adjustment",
        "Smart Prescription",
    ]


def test_profile_distribution_and_adjustments(container) -> None:
    client, session_id = _client_with_session(container)

    response = client.put(f"/wizard/sessions/{session_id}/profile", json=PROFILE)
    assert response.status_code == 200
    assert response.json()["budget"] == {
        "total_calories": 2594,
        "protein_g": 195,
        "carbs_g": 259,
        "fat_g": 86,
    }

    response = client.post(
        f"/wizard/sessions/{session_id}/distribution",
        json={"large_meals": 3, "small_meals": 2},
    )
    targets = response.json()["targets"]
    assert [meal["id"] for meal in targets] == [
        "large-0",
        "large-1",
        "large-2",
        "small-0",
        "small-1",
    ]
    assert targets[0]["meal_class"] == "large"

    response = client.put(
        f"/wizard/sessions/{session_id}/meals/large-0/calories",
        json={"calories": 705},
    )
    assert [meal["calories"] for meal in response.json()["targets"][:3]] == [
        705,
        555,
        555,
    ]

    response = client.put(
        f"/wizard/sessions/{session_id}/meals/small-0/macro",
        json={"macro": "protein", "grams": 40},
    )
    small = response.json()["targets"][3:]
    assert small[0]["protein_g"] == 40
    assert small[0]["protein_g"] + small[1]["protein_g"] == 58

    report = client.get(f"/wizard/sessions/{session_id}/report").json()
    assert set(report) == {"current_totals", "diff", "percentage", "is_off_target"}
    assert report["is_off_target"] is False


def test_unknown_meal_returns_404(container) -> None:
    client, session_id = _client_with_session(container)
    client.put(f"/wizard/sessions/{session_id}/profile", json=PROFILE)
    client.post(f"/wizard/sessions/{session_id}/distribution", json={})

    response = client.put(
        f"/wizard/sessions/{session_id}/meals/large-9/calories",
        json={"calories": 500},
    )

    assert response.status_code == 404
    assert response.json()["error"] == "MealNotFoundError"


def test_unknown_session_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/wizard/sessions/{uuid4()}")

    assert response.status_code == 404


def test_next_step_requires_completed_step(container) -> None:
    client, session_id = _client_with_session(container)

    response = client.post(f"/wizard/sessions/{session_id}/next")

    assert response.status_code == 409
    assert response.json()["error"] == "WizardStepError"


def test_invalid_profile_is_rejected(container) -> None:
    client, session_id = _client_with_session(container)

    response = client.put(
        f"/wizard/sessions/{session_id}/profile",
        json={**PROFILE, "height_cm": 0},
    )

    assert response.status_code == 422


def test_empty_distribution_is_rejected(container) -> None:
    client, session_id = _client_with_session(container)
    client.put(f"/wizard/sessions/{session_id}/profile", json=PROFILE)

    response = client.post(
        f"/wizard/sessions/{session_id}/distribution",
        json={"large_meals": 0, "small_meals": 0},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "DivisionByZeroError"


def test_suggestions_export_and_save(container) -> None:
    client, session_id = _client_with_session(container)
    client.put(f"/wizard/sessions/{session_id}/profile", json=PROFILE)
    client.post(f"/wizard/sessions/{session_id}/distribution", json={})

    response = client.post(f"/wizard/sessions/{session_id}/suggestions")
    prescriptions = response.json()["prescriptions"]
    assert len(prescriptions) == 5
    assert "reference" not in prescriptions[0]["foods"][0]

    response = client.put(
        f"/wizard/sessions/{session_id}/meals/large-0/foods/large-0-food-0/quantity",
        json={"quantity": 50},
    )
    assert response.json()["prescriptions"][0]["foods"][0]["quantity"] == 50

    response = client.get(f"/wizard/sessions/{session_id}/export")
    assert response.status_code == 200
    assert response.text.startswith("Diet Plan")

    response = client.post(f"/wizard/sessions/{session_id}/save")
    assert response.json() == {"status": "saved"}


def test_prescriptions_report_on_target(container) -> None:
    client, session_id = _client_with_session(container)
    client.put(f"/wizard/sessions/{session_id}/profile", json=PROFILE)
    client.post(f"/wizard/sessions/{session_id}/distribution", json={})

    response = client.post(f"/wizard/sessions/{session_id}/suggestions")
    assert all(item["on_target"] for item in response.json()["prescriptions"])

    response = client.put(
        f"/wizard/sessions/{session_id}/meals/large-0/foods/large-0-food-0/quantity",
        json={"quantity": 50},
    )
    prescriptions = response.json()["prescriptions"]
    assert prescriptions[0]["on_target"] is False
    assert all(item["on_target"] for item in prescriptions[1:])
