"""
value_replacer.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to
    responses and logs.

Notes:
    - Incoming X-Request-Id / X-Correlation-Id is reused only when it matches
      RequestIdPolicy (length + charset); otherwise a uuid4 is generated so
      client-supplied junk never reaches log lines.
"""

from __future__ import annotations

import re
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from value_replacer.api.contracts.request_id_policy import RequestIdPolicy
from value_replacer.api.logging.request_context import request_id_ctx_var


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()
        self._allowed = re.compile(self._policy.allowed_pattern)

    def _accept(self, incoming: str | None) -> str | None:
        if not incoming:
            return None
        candidate = incoming.strip()
        if not candidate or len(candidate) > self._policy.max_length:
            return None
        if not self._allowed.fullmatch(candidate):
            return None
        return candidate

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        incoming = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
        )
        request_id = self._accept(incoming) or str(uuid.uuid4())

        # Attach for handlers/logging
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        # Echo back for client correlation
        response.headers[policy.response_header] = request_id
        return response
