# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Clears the API's environment variables so every test starts from defaults
# - Builds Settings without reading a local .env file
# - Provides an app/client factory with uploads in a temporary directory
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from alfa_techx.config import Settings
from alfa_techx.main import create_app
from tests import sample_routes


SETTINGS_ENV_VARS = [
    "FRONTEND_URL",
    "NODE_ENV",
    "PORT",
    "HOST",
    "DEBUG",
    "RATE_LIMIT_WINDOW_MINUTES",
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_MESSAGE",
    "BODY_LIMIT_MB",
    "UPLOADS_DIR",
    "AUTH_ROUTES",
    "ADMIN_ROUTES",
    "PUBLIC_ROUTES",
]

SAMPLE_ROUTES = "tests.sample_routes:router"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove API settings from the environment for every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    sample_routes.calls.clear()


@pytest.fixture
def uploads_dir(tmp_path):
    """Temporary directory served under /uploads."""
    return tmp_path / "uploads"


@pytest.fixture
def make_settings(uploads_dir):
    """Factory for Settings with test-friendly defaults."""

    def _make(**overrides) -> Settings:
        values = {"UPLOADS_DIR": str(uploads_dir), "PUBLIC_ROUTES": SAMPLE_ROUTES}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def make_client(make_settings):
    """
    Factory for a TestClient over a freshly built app.

    Each call builds a new app, so rate limit counters never leak
    between clients.
    """

    def _make(**overrides) -> TestClient:
        app = create_app(make_settings(**overrides))
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client):
    """Client for an app in production mode (NODE_ENV unset)."""
    return make_client()


@pytest.fixture
def dev_client(make_client):
    """Client for an app in development mode."""
    return make_client(NODE_ENV="development")
