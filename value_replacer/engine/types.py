# value_replacer/engine/types.py
# Purpose: Value types shared by the replacement engine and its callers.
# Notes: Engine inputs/outputs are plain JSON values as produced by json.loads.

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list["JsonValue"], dict[str, "JsonValue"]]


@dataclass(frozen=True)
class ReplacementConfig:
    """
    Per-call replacement settings.

    target_value:      string searched for (exact, case-sensitive)
    replacement_value: string substituted for each match
    limit:             maximum number of replacements for the whole document
    max_depth:         maximum container nesting accepted (root = 0)
    """

    target_value: str
    replacement_value: str
    limit: int
    max_depth: int


@dataclass(frozen=True)
class ReplacementResult:
    document: JsonValue
    replacements_made: int
