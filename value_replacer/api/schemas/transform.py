"""
value_replacer.api.schemas.transform

Purpose:
    Response schema for POST /transform (OpenAPI docs + test contract).

Notes:
    - `data` is the transformed document and may be any JSON value.
    - Meta fields are camelCase on the wire; populate_by_name allows
      snake_case construction in Python.

Created:
    2026-10-18
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransformMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    replacements_made: int = Field(
        ...,
        alias="replacementsMade",
        ge=0,
        description="Number of replacements actually performed.",
        examples=[2],
    )
    replacement_limit: int = Field(
        ...,
        alias="replacementLimit",
        ge=0,
        description="Limit applied to this request (?limit= override or service default).",
        examples=[100],
    )


class TransformResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data: Any = Field(..., description="Transformed document.", examples=[{"pet": "cat"}])
    meta: TransformMeta
