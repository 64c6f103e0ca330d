"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from flyer_events.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app (lifespan not run)."""
    return TestClient(app)
