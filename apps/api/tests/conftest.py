"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

# Ensure 'apps/api/src' is on sys.path for absolute 'users_api.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from users_api.main import app  # noqa: E402
from users_api.services import get_user_service  # noqa: E402
from users_api.services.user_service import InMemoryUserService, default_users  # noqa: E402


@pytest.fixture
def service() -> InMemoryUserService:
    """A fresh store seeded with Alice (id 1) and Bob (id 2)."""
    return InMemoryUserService(default_users())


@pytest.fixture
def client(service: InMemoryUserService) -> Iterator[TestClient]:
    """Create a FastAPI test client backed by the ``service`` fixture."""
    app.dependency_overrides[get_user_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
