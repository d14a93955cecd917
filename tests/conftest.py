"""
Global pytest fixtures for the Secret Gate test suite.

Responsibilities:
    - Provide explicit Settings so tests never depend on the host environment
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide a helper for building `Authorization: Basic ...` headers

Why an app factory?
    Using `create_app(settings)` lets each test choose its own credentials
    and secret without touching environment variables.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from main import create_app
from secret_gate.config import Settings


def _basic_header(user: str, password: str) -> dict:
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def settings() -> Settings:
    """Default credentials: admin / password."""
    return Settings()


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Override the `settings` fixture in a module to serve different
          credentials or a different secret.
    """
    return TestClient(create_app(settings))


@pytest.fixture
def basic_header():
    """Build an Authorization header: basic_header("admin", "password")."""
    return _basic_header
