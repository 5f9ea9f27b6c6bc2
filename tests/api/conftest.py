"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from roleidm.interfaces.api.app import create_app


@pytest.fixture
def app(identity_manager, uow_factory):
    """Falcon ASGI app over the seeded in-memory store."""
    return create_app(identity_manager, uow_factory)


@pytest.fixture
def client(app) -> TestClient:
    """Test client for API."""
    return TestClient(app)
