"""
value_replacer.api.main

Purpose:
    FastAPI application entrypoint for the value replacement service.

Usage:
    uvicorn value_replacer.api.main:app
    python -m value_replacer.api --port 3000
"""

from __future__ import annotations

from fastapi import FastAPI

from value_replacer.api.contracts.request_id_policy import RequestIdPolicy
from value_replacer.api.contracts.security_headers_policy import SecurityHeadersPolicy
from value_replacer.api.error_handlers import register_error_handlers
from value_replacer.api.logging.logging_config import configure_logging
from value_replacer.api.middleware.request_id import RequestIdMiddleware
from value_replacer.api.middleware.security_headers import SecurityHeadersMiddleware
from value_replacer.api.routes.health import router as health_router
from value_replacer.api.routes.transform import router as transform_router
from value_replacer.api.settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.state.settings = settings

    # Last added runs first: request id wraps everything, headers applied inside it.
    app.add_middleware(SecurityHeadersMiddleware, policy=SecurityHeadersPolicy())
    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(transform_router)

    return app


app = create_app()
