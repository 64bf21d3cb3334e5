# value_replacer/api/contracts/api_paths.py
"""
value_replacer.api.contracts.api_paths

Purpose:
    Central definition of API route paths.
    Keeps routing stable and prevents string duplication.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    health: str = "/health"
    transform: str = "/transform"
