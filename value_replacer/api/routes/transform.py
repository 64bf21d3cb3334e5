"""
value_replacer.api.routes.transform

Purpose:
    POST /transform: replace the configured target value throughout an
    arbitrary JSON body and return it wrapped in {"data": ..., "meta": ...}.

Notes:
    - The body is read as a stream and rejected with 413 as soon as it
      exceeds settings.max_body_bytes (Content-Length is checked first).
    - Decoding is strict: NaN/Infinity literals and numbers that overflow to
      infinity are rejected as invalid JSON.
    - The optional ?limit= value is passed through as a raw string; the
      transform adapter owns its parsing (InvalidLimit).
    - The engine is CPU-bound and runs in the threadpool, not on the event loop.

Created:
    2026-10-18
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from value_replacer.api.contracts.api_paths import ApiPaths
from value_replacer.api.contracts.api_tags import ApiTags
from value_replacer.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from value_replacer.api.dependencies import get_app_settings
from value_replacer.api.errors import ApiError
from value_replacer.api.schemas.transform import TransformResponse
from value_replacer.api.settings import Settings
from value_replacer.shared.transform_adapter import InvalidDepth, InvalidLimit, transform_document

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.transform])

DEPTH_EXCEEDED_MESSAGE = "Maximum nesting depth exceeded"

_CONTENT_LENGTH_RE = re.compile(r"[0-9]+")


class AsciiJSONResponse(JSONResponse):
    """
    JSONResponse that escapes non-ASCII characters.

    Decoded documents may hold lone surrogates (a bare "\\ud800" escape is
    valid JSON), which cannot be encoded as UTF-8 but survive as \\uXXXX escapes.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("ascii")


# ---------------------------------------------------------------------------
# Body reading / decoding
# ---------------------------------------------------------------------------

def _payload_too_large(max_bytes: int) -> ApiError:
    return ApiError(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        error_code=ApiErrorCode.PAYLOAD_TOO_LARGE,
        message="Payload too large",
        details={"max_bytes": max_bytes},
    )


async def _read_body(request: Request, max_bytes: int) -> bytes:
    declared = request.headers.get("content-length")
    if declared is not None and _CONTENT_LENGTH_RE.fullmatch(declared.strip()) and int(declared) > max_bytes:
        raise _payload_too_large(max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise _payload_too_large(max_bytes)
    return bytes(body)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _parse_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {raw[:32]}")
    return value


def _decode_document(body: bytes) -> Any:
    try:
        return json.loads(body, parse_constant=_reject_constant, parse_float=_parse_float)
    except RecursionError as e:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ApiErrorCode.INVALID_DEPTH,
            message=DEPTH_EXCEEDED_MESSAGE,
        ) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.info("transform: rejected undecodable body (%s bytes): %s", len(body), type(e).__name__)
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ApiErrorCode.INVALID_JSON,
            message="Invalid JSON payload",
        ) from e


# ---------------------------------------------------------------------------
# Route
# ---------------------------------------------------------------------------

def _error_example(error_code: str, message: str) -> dict:
    return {
        "request_id": "REQ_ID",
        "error_code": error_code,
        "message": message,
        "details": None,
    }


@router.post(
    _paths.transform,
    openapi_extra={
        "requestBody": {
            "required": True,
            "description": "Any JSON document.",
            "content": {"application/json": {"schema": {}, "example": {"pet": "dog", "tags": ["dog", "Dog"]}}},
        }
    },
    responses={
        200: {"model": TransformResponse, "description": "Transformed document with replacement metadata"},
        400: {
            "model": ErrorResponse,
            "description": "Invalid JSON, invalid limit or nesting too deep",
            "content": {
                "application/json": {
                    "examples": {
                        "invalid_json": {
                            "summary": "Body is not valid JSON",
                            "value": _error_example("INVALID_JSON", "Invalid JSON payload"),
                        },
                        "invalid_limit": {
                            "summary": "Negative or non-numeric ?limit=",
                            "value": _error_example("INVALID_LIMIT", "Limit must be >= 0"),
                        },
                        "invalid_depth": {
                            "summary": "Document nested deeper than MAX_NESTING_DEPTH",
                            "value": _error_example("INVALID_DEPTH", DEPTH_EXCEEDED_MESSAGE),
                        },
                    }
                }
            },
        },
        413: {"model": ErrorResponse, "description": "Body larger than MAX_BODY_BYTES"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def transform(
    request: Request,
    limit: Optional[str] = Query(
        default=None,
        description="Maximum replacements for this request (non-negative integer). Defaults to DEFAULT_REPLACEMENT_LIMIT.",
        examples=["2"],
    ),
    settings: Settings = Depends(get_app_settings),
) -> AsciiJSONResponse:
    body = await _read_body(request, settings.max_body_bytes)
    document = _decode_document(body)

    try:
        outcome = await run_in_threadpool(
            transform_document,
            document,
            settings.replacement_defaults(),
            limit_override=limit,
        )
    except InvalidLimit as e:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ApiErrorCode.INVALID_LIMIT,
            message=e.message,
        ) from e
    except InvalidDepth as e:
        raise ApiError(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=ApiErrorCode.INVALID_DEPTH,
            message=DEPTH_EXCEEDED_MESSAGE,
            details={"max_depth": settings.max_nesting_depth},
        ) from e

    return AsciiJSONResponse(status_code=status.HTTP_200_OK, content=outcome.to_envelope())
