from value_replacer.engine.errors import DepthExceeded
from value_replacer.engine.replacer import DENYLISTED_KEYS, replace_values
from value_replacer.engine.types import JsonValue, ReplacementConfig, ReplacementResult

__all__ = [
    "DENYLISTED_KEYS",
    "DepthExceeded",
    "JsonValue",
    "ReplacementConfig",
    "ReplacementResult",
    "replace_values",
]
