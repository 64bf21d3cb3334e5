"""
value_replacer.shared.transform_adapter

Purpose:
    Translate request-level inputs (decoded document + optional ?limit= value)
    into an engine ReplacementConfig, run the engine and classify its outcome.

Why:
    Keeps the engine free of boundary parsing:
      - the engine never sees malformed limits (InvalidLimit is raised first)
      - routes never see engine exceptions (DepthExceeded -> InvalidDepth)

Usage:
    - value_replacer.api.routes.transform calls transform_document()
    - resolve_limit() is usable on its own by other callers

Created:
    2026-10-18
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from value_replacer.engine import DepthExceeded, JsonValue, ReplacementConfig, replace_values

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


class TransformError(Exception):
    """Base class for classified, caller-correctable transform failures."""

    error_code = "BAD_REQUEST"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidLimit(TransformError):
    error_code = "INVALID_LIMIT"


class InvalidDepth(TransformError):
    error_code = "INVALID_DEPTH"


@dataclass(frozen=True)
class ReplacementDefaults:
    """Process-wide replacement settings, fixed at startup."""

    target_value: str
    replacement_value: str
    default_limit: int
    max_depth: int


@dataclass(frozen=True)
class TransformOutcome:
    document: JsonValue
    replacements_made: int
    replacement_limit: int

    def to_envelope(self) -> dict:
        return {
            "data": self.document,
            "meta": {
                "replacementsMade": self.replacements_made,
                "replacementLimit": self.replacement_limit,
            },
        }


def resolve_limit(raw: Optional[str], default: int) -> int:
    """
    Resolve the effective replacement limit for one request.

    - None -> default
    - "  5 " -> 5 (surrounding whitespace ignored)
    - "0" -> 0
    Raises:
      InvalidLimit for non-integer strings ("abc", "1.5", "") and negatives.
    """
    if raw is None:
        return default

    s = str(raw).strip()
    if not _INT_RE.fullmatch(s):
        raise InvalidLimit("Limit must be a valid number")

    try:
        limit = int(s)
    except ValueError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise InvalidLimit("Limit must be a valid number") from e
    if limit < 0:
        raise InvalidLimit("Limit must be >= 0")
    return limit


def transform_document(
    document: JsonValue,
    defaults: ReplacementDefaults,
    *,
    limit_override: Optional[str] = None,
) -> TransformOutcome:
    """
    Run one replacement request end to end.

    Raises:
      InvalidLimit before the engine runs if limit_override is malformed.
      InvalidDepth if the document is nested deeper than defaults.max_depth.
    """
    limit = resolve_limit(limit_override, defaults.default_limit)

    config = ReplacementConfig(
        target_value=defaults.target_value,
        replacement_value=defaults.replacement_value,
        limit=limit,
        max_depth=defaults.max_depth,
    )

    try:
        result = replace_values(document, config)
    except DepthExceeded as e:
        logger.warning("transform rejected: %s", e)
        raise InvalidDepth(str(e)) from e
    except RecursionError as e:
        # max_depth set above what the interpreter stack can hold
        logger.warning("transform rejected: recursion limit hit below max_depth=%s", defaults.max_depth)
        raise InvalidDepth(f"Maximum nesting depth of {defaults.max_depth} exceeded") from e

    logger.info(
        "transform: replacements_made=%s replacement_limit=%s",
        result.replacements_made,
        limit,
    )

    return TransformOutcome(
        document=result.document,
        replacements_made=result.replacements_made,
        replacement_limit=limit,
    )
