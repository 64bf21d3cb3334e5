"""
value_replacer.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names, accepted format,
    response behavior).

Created:
    2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"

    # Incoming ids outside this shape are replaced with a generated uuid4
    max_length: int = 128
    allowed_pattern: str = r"[A-Za-z0-9._:\-]+"
