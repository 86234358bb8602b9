"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from hobby_forecast.api import create_app

HIKING = {
    "id": 1,
    "name": "Hiking",
    "preferred_weather": [{"condition": "clear", "weight": 10}],
    "is_outdoor": True,
    "min_temperature": 15,
    "max_temperature": 28,
}
CHESS = {"id": 2, "name": "Chess"}

FORECAST = {
    "days": [
        {
            "date": "2025-06-09",
            "weather_type": "clear",
            "temperature": {"min_c": 18, "max_c": 24},
            "pop": 0.1,
        },
        {
            "date": "2025-06-10",
            "weather_type": "rain",
            "temperature": {"min_c": 5, "max_c": 10},
            "pop": 0.8,
        },
    ]
}


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def payload() -> dict:
    return {"hobbies": [CHESS, HIKING], "forecast": FORECAST}


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_recommendations(client: TestClient, payload: dict):
    """Test hobbies come back ranked with their best day first."""
    response = client.post("/api/recommendations", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert [r["hobby"]["name"] for r in data] == ["Hiking", "Chess"]

    hiking = data[0]
    assert hiking["overall_score"] == 93
    assert hiking["best_day_index"] == 0
    assert hiking["recommended_days"][0]["date"] == "2025-06-09"
    assert hiking["recommended_days"][1]["score"] == 20


def test_recommendations_with_filters(client: TestClient, payload: dict):
    payload["filters"] = {"min_score": 60, "weather_types": ["clear"]}
    response = client.post("/api/recommendations", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert [r["hobby"]["name"] for r in data] == ["Hiking"]
    assert len(data[0]["recommended_days"]) == 1


def test_top(client: TestClient, payload: dict):
    response = client.post("/api/recommendations/top", params={"limit": 1}, json=payload)
    assert response.status_code == 200
    assert [r["hobby"]["name"] for r in response.json()] == ["Hiking"]


def test_for_date(client: TestClient, payload: dict):
    response = client.post("/api/recommendations/date/2025-06-10", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert [r["hobby"]["name"] for r in data] == ["Chess", "Hiking"]
    assert all(len(r["recommended_days"]) == 1 for r in data)


def test_high_scores(client: TestClient, payload: dict):
    response = client.post("/api/recommendations/high-scores", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["should_notify"] is True
    assert [e["hobby_name"] for e in data["entries"]] == ["Hiking"]
    assert data["title"] == "Great day for Hiking!"


def test_invalid_payload(client: TestClient):
    """Test malformed input is rejected before the engine runs."""
    response = client.post(
        "/api/recommendations",
        json={"hobbies": [{"id": 1, "name": "X", "preferred_weather": [{"condition": "clear", "weight": 0}]}],
              "forecast": FORECAST},
    )
    assert response.status_code == 422
