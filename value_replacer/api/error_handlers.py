"""
value_replacer.api.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures request_id is always included and internal details never leak.

Created:
    2026-10-18
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from value_replacer.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from value_replacer.api.errors import ApiError
from value_replacer.api.logging.request_context import request_id_ctx_var

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[int, ApiErrorCode] = {
    404: ApiErrorCode.NOT_FOUND,
    405: ApiErrorCode.METHOD_NOT_ALLOWED,
    413: ApiErrorCode.PAYLOAD_TOO_LARGE,
}

_STATUS_MESSAGES: dict[int, str] = {
    404: "Not found",
    405: "Method not allowed",
    413: "Payload too large",
}


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    rid2 = request_id_ctx_var.get()
    if isinstance(rid2, str) and rid2:
        return rid2

    return "-"


def _error_response(request: Request, status_code: int, payload_fields: dict[str, Any]) -> JSONResponse:
    payload = ErrorResponse(request_id=_get_request_id(request), **payload_fields)
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("API error: %s", exc)
        else:
            logger.info("API error: %s", exc)

        return _error_response(
            request,
            exc.status_code,
            {"error_code": exc.error_code, "message": exc.message, "details": exc.details},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        code = _STATUS_CODES.get(exc.status_code)
        if code is None:
            code = ApiErrorCode.INTERNAL_ERROR if exc.status_code >= 500 else ApiErrorCode.BAD_REQUEST

        message = _STATUS_MESSAGES.get(exc.status_code)
        if message is None:
            message = "Internal server error" if exc.status_code >= 500 else str(exc.detail)

        response = _error_response(
            request,
            exc.status_code,
            {"error_code": code, "message": message, "details": None},
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        return _error_response(
            request,
            500,
            {
                "error_code": ApiErrorCode.INTERNAL_ERROR,
                "message": "Internal server error",
                "details": None,
            },
        )
