"""
value_replacer.api.middleware.security_headers

Purpose:
    Adds the SecurityHeadersPolicy headers to every response
    (successes, classified errors and 404s alike).
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from value_replacer.api.contracts.security_headers_policy import SecurityHeadersPolicy


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: SecurityHeadersPolicy | None = None) -> None:
        super().__init__(app)
        self._headers = (policy or SecurityHeadersPolicy()).as_headers()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response: Response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
