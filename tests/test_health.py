"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"


def test_health_reports_app_engine(client: TestClient) -> None:
    """The lifespan wires an engine and driver onto app.state."""
    app = client.app
    assert app.state.engine is not None
    assert app.state.driver.is_running is False
