from __future__ import annotations


class DepthExceeded(Exception):
    """Raised when traversal would enter more nesting levels than allowed."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded")
