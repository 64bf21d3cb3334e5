"""
value_replacer.api.logging.request_id_filter

Purpose:
    Logging filter that injects request_id from contextvars into log records.
"""

from __future__ import annotations

import logging

from value_replacer.api.logging.request_context import current_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id()
        return True
