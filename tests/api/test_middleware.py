"""
tests.api.test_middleware

Purpose:
    Security headers and request-id propagation on every response shape
    (success, classified error, 404).
"""

from __future__ import annotations

import uuid

import pytest

from value_replacer.api.contracts.security_headers_policy import SecurityHeadersPolicy


@pytest.mark.parametrize(
    "method, path, body",
    [
        ("post", "/transform", {"pet": "dog"}),
        ("post", "/transform?limit=abc", {"pet": "dog"}),
        ("get", "/health", None),
        ("get", "/missing", None),
    ],
)
def test_security_headers_present(client, method, path, body) -> None:
    kwargs = {"json": body} if body is not None else {}
    r = getattr(client, method)(path, **kwargs)

    assert r.headers["x-content-type-options"] == "nosniff"
    assert r.headers["x-frame-options"] == "SAMEORIGIN"
    for name in SecurityHeadersPolicy().as_headers():
        assert name.lower() in r.headers


def test_request_id_is_generated(client) -> None:
    r = client.get("/health")
    rid = r.headers["x-request-id"]
    assert uuid.UUID(rid).version == 4


def test_request_id_is_echoed(client) -> None:
    r = client.post("/transform?limit=-5", json={}, headers={"X-Request-Id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"
    assert r.json()["request_id"] == "abc-123"


def test_correlation_id_is_used_as_fallback(client) -> None:
    r = client.get("/health", headers={"X-Correlation-Id": "corr.42"})
    assert r.headers["x-request-id"] == "corr.42"


@pytest.mark.parametrize("bad", ["has space", "x" * 129, "semi;colon", "quote\""])
def test_unsafe_request_id_is_replaced(client, bad) -> None:
    r = client.get("/health", headers={"X-Request-Id": bad})
    rid = r.headers["x-request-id"]
    assert rid != bad
    uuid.UUID(rid)
