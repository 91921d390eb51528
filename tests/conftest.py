"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • make_settings(**overrides) — ServerSettings backed by in-memory SQLite
  • app / api                  — application and a TestClient (lifespan run)
  • seeded_api                 — TestClient over a database holding the demo catalog
"""

from __future__ import annotations

import os
import sys

import pytest

# Ensure the project root is on the path so root modules and packages resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from backend.app.main import create_app  # noqa: E402
from backend.config import ServerSettings  # noqa: E402
from backend.seed import seed_database  # noqa: E402

FRONTEND_ORIGIN = "http://localhost:5173"
WORKSPACE_DOMAIN = "example-workspace.dev"


@pytest.fixture
def make_settings():
    def _factory(**overrides) -> ServerSettings:
        values = {
            "environment": "test",
            "database_url": "sqlite://",
            "allowed_origins": (FRONTEND_ORIGIN, "http://127.0.0.1:5173"),
            "workspace_domain": WORKSPACE_DOMAIN,
            "log_level": "WARNING",
        }
        values.update(overrides)
        return ServerSettings(**values)
    return _factory


@pytest.fixture
def app(make_settings):
    return create_app(make_settings())


@pytest.fixture
def api(app):
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def seeded_api(api):
    session = api.app.state.session_factory()
    try:
        seed_database(session)
    finally:
        session.close()
    return api
