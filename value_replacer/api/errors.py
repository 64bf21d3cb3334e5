"""
value_replacer.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes raise ApiError; global handler converts to ErrorResponse.

Created:
    2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from value_replacer.api.contracts.error_contract import ApiErrorCode


# Not frozen: contextlib assigns __context__ when re-raising through exit stacks.
@dataclass(eq=False)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"
