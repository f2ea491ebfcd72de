"""
Fixtures for API tests.

The app runs against a throwaway SQLite file so the full request path,
including sessions and commits, is exercised without PostgreSQL.
"""

import pytest
from fastapi.testclient import TestClient

from userbase.presentation.api.app import create_app
from userbase_config.settings import Settings


@pytest.fixture
def make_settings(tmp_path):
    """Build settings bound to a fresh SQLite file; keyword overrides apply."""

    def _make(**overrides) -> Settings:
        overrides.setdefault(
            "database_url_override",
            f"sqlite+aiosqlite:///{tmp_path}/test.db",
        )
        overrides.setdefault("api_debug", False)
        return Settings(**overrides)

    return _make


@pytest.fixture
def app(make_settings):
    """Application wired to a fresh SQLite database."""
    return create_app(make_settings())


@pytest.fixture
def client(app):
    """TestClient with the lifespan running, so tables exist."""
    with TestClient(app) as test_client:
        yield test_client
