"""
value_replacer.api.dependencies

Purpose:
    FastAPI dependencies shared by routes.
"""

from __future__ import annotations

from fastapi import Request

from value_replacer.api.settings import Settings


def get_app_settings(request: Request) -> Settings:
    """Settings validated at startup by create_app()."""
    return request.app.state.settings
