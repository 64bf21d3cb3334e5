"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from value_replacer.api.main import create_app
from value_replacer.api.settings import Settings


@pytest.fixture()
def settings_factory():
    """
    Build Settings without reading any .env file.
    Keyword arguments override the defaults (target "dog" -> "cat", limit 100, depth 50).
    """

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture()
def client_factory(settings_factory):
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        raise_server_exceptions=False lets tests assert on the generic 500
        envelope instead of the original exception.
    """

    def _make(*, raise_server_exceptions: bool = True, **overrides) -> TestClient:
        app = create_app(settings_factory(**overrides))
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Default-configured client for simple tests."""
    return client_factory()
