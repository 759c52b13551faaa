"""Logging API for op-status.

Wraps Python's ``logging`` module with stdout defaults and status-aware
structured fields.
"""

from .config import (
    JsonFormatter,
    PlainFormatter,
    StatusFieldsFilter,
    configure_logging,
    get_logger,
    record_fields,
)
from .context import bind_context, current_fields, log_context, reset_context, status_fields
from .emit import log_status

__all__ = [
    "JsonFormatter",
    "PlainFormatter",
    "StatusFieldsFilter",
    "bind_context",
    "configure_logging",
    "current_fields",
    "get_logger",
    "log_context",
    "log_status",
    "record_fields",
    "reset_context",
    "status_fields",
]
