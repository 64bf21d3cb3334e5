"""
value_replacer.api.routes.health

Purpose:
    Health endpoint for container/orchestrator liveness checks.
"""

from __future__ import annotations

from fastapi import APIRouter

from value_replacer.api.contracts.api_paths import ApiPaths
from value_replacer.api.contracts.api_tags import ApiTags

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health)
def health() -> dict:
    return {"status": "ok"}
