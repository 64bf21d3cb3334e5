"""
value_replacer.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Enables request_id propagation into logs.
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)


def current_request_id() -> str:
    return request_id_ctx_var.get() or "-"
