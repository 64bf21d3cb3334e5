"""
value_replacer.api.logging.logging_config

Purpose:
    Central logging configuration for the API process.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error).

Created:
    2026-10-18
"""

from __future__ import annotations

import logging

from value_replacer.api.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"

# Marks our handler so repeated configure_logging() calls (tests, reload) don't stack handlers.
_HANDLER_NAME = "value_replacer"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str = "INFO") -> None:
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = _make_handler(numeric_level)

    # Root/app logs (don't clear foreign root handlers; pytest's caplog lives there)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        _configure_logger(name, handler, numeric_level)
