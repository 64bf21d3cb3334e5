"""
tests.conftest

Shared pytest fixtures for the whole suite.
"""

from __future__ import annotations

import pytest

# Every variable Settings reads; cleared so the host environment can't leak into tests.
SETTINGS_ENV_VARS = (
    "SERVICE_NAME",
    "SERVICE_VERSION",
    "HOST",
    "PORT",
    "TARGET_VALUE",
    "REPLACEMENT_VALUE",
    "DEFAULT_REPLACEMENT_LIMIT",
    "MAX_NESTING_DEPTH",
    "MAX_BODY_BYTES",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_settings_env(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
