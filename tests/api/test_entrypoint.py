"""
tests.api.test_entrypoint

Purpose:
    `python -m value_replacer.api` validates configuration before serving and
    hands the configured app to uvicorn.
"""

from __future__ import annotations

import value_replacer.api.__main__ as entrypoint


def test_invalid_configuration_exits_before_serving(monkeypatch, capsys) -> None:
    def _never(*args, **kwargs):
        raise AssertionError("uvicorn must not start with invalid configuration")

    monkeypatch.setattr(entrypoint.uvicorn, "run", _never)

    assert entrypoint.main(["--port", "0"]) == 2
    assert "PORT must be between 1 and 65535" in capsys.readouterr().err


def test_invalid_environment_exits_before_serving(monkeypatch, capsys) -> None:
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda *a, **k: None)
    monkeypatch.setenv("MAX_NESTING_DEPTH", "0")

    assert entrypoint.main([]) == 2
    assert "MAX_NESTING_DEPTH must be >= 1" in capsys.readouterr().err


def test_serves_configured_app(monkeypatch) -> None:
    calls = {}

    def _fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(entrypoint.uvicorn, "run", _fake_run)
    monkeypatch.setenv("TARGET_VALUE", "foo")

    assert entrypoint.main(["--host", "127.0.0.1", "--port", "8123", "--log-level", "warning"]) == 0

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 8123
    assert calls["log_config"] is None

    settings = calls["app"].state.settings
    assert settings.target_value == "foo"
    assert settings.log_level == "WARNING"
