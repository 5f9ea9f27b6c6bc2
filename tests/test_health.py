"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from roleidm.interfaces.api.resources.health import HealthResource

from tests.conftest import unavailable_uow_factory


def _client(uow_factory) -> TestClient:
    app = App()
    health = HealthResource(uow_factory)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client(uow_factory) -> TestClient:
    """Create test client with health endpoints."""
    return _client(uow_factory)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_store_down() -> None:
    """GET /v1/health/ready returns 503 when the store is unreachable."""
    result = _client(unavailable_uow_factory).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
