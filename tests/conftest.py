"""
Pytest configuration for Deploy Test Application tests.

Sets up the test environment and shared fixtures.
"""
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before the app module is imported
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("PORT", "3000")

from deploy_app.config import Settings  # noqa: E402
from deploy_app.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Explicit settings so tests never depend on the host environment."""
    return Settings(port=3000, environment="development", log_level="INFO")


@pytest.fixture
def app(settings):
    """Fresh application built from the test settings."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with lifespan events enabled."""
    with TestClient(app) as test_client:
        yield test_client
