"""
tests.api.test_errors

Purpose:
    Error envelope contract: unknown routes, unhandled exceptions and
    non-leakage of internal details.
"""

from __future__ import annotations

from value_replacer.api.routes import transform as transform_route


def test_unknown_route_returns_404_envelope(client) -> None:
    r = client.get("/unknown")
    assert r.status_code == 404

    data = r.json()
    assert data == {
        "request_id": r.headers["x-request-id"],
        "error_code": "NOT_FOUND",
        "message": "Not found",
        "details": None,
    }


def test_transform_requires_post(client) -> None:
    r = client.get("/transform")
    assert r.status_code == 405
    assert r.json()["error_code"] == "METHOD_NOT_ALLOWED"
    assert "POST" in r.headers.get("allow", "")


def test_unhandled_exception_returns_generic_500(client_factory, monkeypatch) -> None:
    def _explode(*args, **kwargs):
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(transform_route, "transform_document", _explode)
    client = client_factory(raise_server_exceptions=False)

    r = client.post("/transform", json={"pet": "dog"})
    assert r.status_code == 500

    data = r.json()
    assert data["error_code"] == "INTERNAL_ERROR"
    assert data["message"] == "Internal server error"
    assert data["details"] is None
    assert "hunter2" not in r.text


def test_error_responses_do_not_leak_stack(client) -> None:
    r = client.post("/transform?limit=-1", json={"pet": "dog"})
    data = r.json()

    assert set(data) == {"request_id", "error_code", "message", "details"}
    assert "stack" not in data["message"].lower()
    assert "traceback" not in r.text.lower()
