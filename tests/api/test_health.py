"""
tests.api.test_health

Purpose:
    Smoke tests for the health endpoint.
"""

from __future__ import annotations


def test_health_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers.get("x-request-id")


def test_health_rejects_post(client) -> None:
    r = client.post("/health")
    assert r.status_code == 405
    assert r.json()["error_code"] == "METHOD_NOT_ALLOWED"
