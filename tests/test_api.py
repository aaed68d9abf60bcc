import pytest
from fastapi.testclient import TestClient

from forest_sentinel import config
from forest_sentinel.api import app

from .conftest import FakeResponse


@pytest.fixture
def client():
    return TestClient(app)


def test_search_fire_zone_in_demo_mode(client, fake_http):
    resp = client.post("/api/search", json={"query": "Palisades"})
    assert resp.status_code == 200
    body = resp.json()

    assert body["success"] is True
    assert body["dataMode"] == "DEMO"
    assert body["location"]["name"] == "Palisades Fire, Los Angeles"
    assert set(body["satelliteData"]) == {"sar", "modis", "firms", "weather", "timestamp"}
    assert body["satelliteData"]["sar"]["vhVvRatio"] == -2.3
    for key in ("sar", "modis", "firms", "weather"):
        assert body["satelliteData"][key]["dataSource"] == "demo"

    risk = body["riskAnalysis"]
    assert risk["factors"] == {
        "fireActivity": 30,
        "vegetationStress": 20,
        "weatherConditions": 30,
        "structuralChange": 5,
        "accessibility": 5,
    }
    assert risk["score"] == 90
    assert risk["level"] == "EXTREME"
    assert risk["confidence"] == 86

    assert [a["type"] for a in body["alerts"]] == ["CRITICAL", "FIRE", "WEATHER"]
    assert len(body["fires"]) == 8
    assert len(body["forecast"]) == 7
    assert len(body["riskZones"]) == 5
    assert all(z["synthetic"] for z in body["riskZones"])
    assert fake_http.calls == []


def test_search_quiet_place_scores_moderate(client):
    body = client.post("/api/search", json={"query": "paradise"}).json()
    assert body["riskAnalysis"]["score"] == 30
    assert body["riskAnalysis"]["level"] == "MODERATE"
    assert body["alerts"] == []


def test_search_by_coordinates(client):
    body = client.post("/api/search", json={"query": "34.0459, -118.5275"}).json()
    assert body["location"]["lat"] == pytest.approx(34.0459)
    assert body["location"]["bbox"] == pytest.approx([-118.6275, 33.9459, -118.4275, 34.1459])


def test_wrong_method_is_405(client):
    resp = client.get("/api/search")
    assert resp.status_code == 405
    assert resp.json() == {"success": False, "error": "Method not allowed"}


def test_production_without_keys_is_503(client, monkeypatch):
    monkeypatch.setattr(config, "PRODUCTION", True)
    resp = client.post("/api/search", json={"query": "Palisades"})
    assert resp.status_code == 503
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Service Unavailable"
    assert body["missing"] == ["EE_PRIVATE_KEY", "NASA_FIRMS_MAP_KEY", "OPENWEATHER_API_KEY"]


def test_unknown_location_is_500(client, fake_http):
    fake_http.route("nominatim", FakeResponse([]))
    resp = client.post("/api/search", json={"query": "Atlantis"})
    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Failed to process search request"
    assert "Location not found" in body["details"]


@pytest.mark.parametrize("body", [{"query": "   "}, {}])
def test_invalid_request_body_is_a_processing_failure(client, body):
    resp = client.post("/api/search", json=body)
    assert resp.status_code == 500
    payload = resp.json()
    assert payload["success"] is False
    assert payload["error"] == "Failed to process search request"
    assert payload["details"]


def test_health_reports_missing_credentials(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["dataMode"] == "DEMO"
    assert "NASA_FIRMS_MAP_KEY" in body["missingCredentials"]
