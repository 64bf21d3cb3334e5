"""
value_replacer.engine.replacer

Purpose:
    Exact-match string replacement over an arbitrary JSON document.

Design Notes:
    - Never mutates the input; every container visited is rebuilt.
    - The replacement budget is global to one call: once it is spent, the
      remaining subtrees are returned as-is without being traversed.
    - Only string values are candidates. Object keys are never replaced.
    - Keys in DENYLISTED_KEYS are dropped from every object the traversal
      enters and are not counted as replacements.
    - Depth is counted per container level entered (root = 0). The first
      violation aborts the whole call with DepthExceeded.

Created:
    2026-10-18
"""

from __future__ import annotations

from typing import Any

from value_replacer.engine.errors import DepthExceeded
from value_replacer.engine.types import JsonValue, ReplacementConfig, ReplacementResult

# Object-prototype sentinels; a downstream JavaScript consumer could be polluted by them.
DENYLISTED_KEYS: frozenset[str] = frozenset({"__proto__", "constructor", "prototype"})


class _ReplacementPass:
    """
    One traversal of one document. Owns the replacement counter, so a fresh
    instance is created per call and never shared.
    """

    def __init__(self, config: ReplacementConfig) -> None:
        self._config = config
        self.made = 0

    @property
    def exhausted(self) -> bool:
        return self.made >= self._config.limit

    def visit(self, value: Any, depth: int) -> Any:
        if depth > self._config.max_depth:
            raise DepthExceeded(self._config.max_depth)

        if self.exhausted:
            return value

        if isinstance(value, str):
            if value == self._config.target_value:
                self.made += 1
                return self._config.replacement_value
            return value

        if isinstance(value, list):
            return self._visit_list(value, depth)

        if isinstance(value, dict):
            return self._visit_dict(value, depth)

        # None, bool, int, float
        return value

    def _visit_list(self, items: list[Any], depth: int) -> list[Any]:
        out: list[Any] = []
        for item in items:
            if self.exhausted:
                out.append(item)
            else:
                out.append(self.visit(item, depth + 1))
        return out

    def _visit_dict(self, obj: dict[str, Any], depth: int) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key, value in obj.items():
            if key in DENYLISTED_KEYS:
                continue
            if self.exhausted:
                out[key] = value
            else:
                out[key] = self.visit(value, depth + 1)
        return out


def replace_values(document: JsonValue, config: ReplacementConfig) -> ReplacementResult:
    """
    Replace exact occurrences of config.target_value with config.replacement_value.

    Returns the rebuilt document and the number of replacements made
    (never more than config.limit). Raises DepthExceeded if the document is
    nested deeper than config.max_depth along any path that gets traversed.
    """
    traversal = _ReplacementPass(config)
    transformed = traversal.visit(document, 0)
    return ReplacementResult(document=transformed, replacements_made=traversal.made)
