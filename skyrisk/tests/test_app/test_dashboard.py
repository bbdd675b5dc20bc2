"""Tests for the dashboard API with a controller on mocked clients."""

import pytest
from fastapi.testclient import TestClient

from skyrisk.config.schema import SkyRiskConfig
from skyrisk.controller.view_controller import GEO_DENIED, ViewController
from skyrisk.dashboard import create_app


@pytest.fixture
def client(controller: ViewController) -> TestClient:
    return TestClient(create_app(SkyRiskConfig(), controller))


class TestState:
    def test_initial_state(self, client: TestClient):
        data = client.get("/api/state").json()
        assert data["date"] == "2025-10-10"
        assert data["phase"] == "idle"
        assert data["risk"] is None
        assert data["panels"] == []

    def test_set_date(self, client: TestClient):
        data = client.post("/api/date", json={"date": "2026-07-03"}).json()
        assert data["date"] == "2026-07-03"
        assert data["phase"] == "idle"

    def test_bad_date_rejected(self, client: TestClient):
        assert client.post("/api/date", json={"date": "tomorrow"}).status_code == 422


class TestActions:
    def test_location_with_forecast(self, client: TestClient):
        client.post("/api/date", json={"date": "2026-07-03"})
        data = client.post(
            "/api/location", json={"latitude": 52.520006, "longitude": 13.404954}
        ).json()
        assert data["phase"] == "ready"
        assert data["location"]["label"] == "My Location"
        assert data["location"]["latitude"] == 52.52
        assert {v["fc"] for v in data["risk"].values()} == {100}
        assert all(len(p["bars"]) == 2 for p in data["panels"])

    def test_location_denied(self, client: TestClient):
        data = client.post("/api/location", json={"error_code": 1}).json()
        assert data["phase"] == "idle"
        assert data["risk"] is None
        assert data["notification"] == GEO_DENIED
        assert data["error_kind"] == "PERMISSION_DENIED"

    def test_location_unsupported(self, client: TestClient):
        data = client.post("/api/location", json={"supported": False}).json()
        assert data["error_kind"] == "UNSUPPORTED_CAPABILITY"

    def test_location_missing_coords(self, client: TestClient):
        assert client.post("/api/location", json={"latitude": 1.0}).status_code == 422

    def test_city_search(self, client: TestClient):
        client.post("/api/city", json={"query": "Berlin"})
        data = client.post("/api/search").json()
        assert data["phase"] == "ready"
        assert data["location"]["name"] == "Berlin, Germany"
        # 2025-10-10 is outside the forecast window: climatology bars only
        assert all(len(p["bars"]) == 1 for p in data["panels"])

    def test_climatology(self, client: TestClient):
        rows = client.get("/api/climatology").json()
        assert len(rows) == 12
        assert rows[9] == {"month": 9, "tmax": 32, "tmin": 19, "precip": 10, "wind": 8}


def test_root_serves_page(client: TestClient):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "SkyRisk" in resp.text
