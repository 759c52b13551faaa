"""Stdout logging setup that understands operation statuses.

Every record gets the context-bound fields. When a record carries an
exception whose chain holds an ``OpError``, that error's status fields are
added too, so ``logger.exception(...)`` inside an error handler reports the
code, wire status and retry advice without extra work at the call site.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

from ..config.models import LoggingSettings
from . import fields
from .context import bind_context, current_fields, status_fields


def record_fields(record: logging.LogRecord) -> dict[str, str]:
    """Return bound fields merged with the status found in ``exc_info``."""
    from ..errors import status_from_chain

    merged = current_fields()
    if record.exc_info and record.exc_info[1] is not None:
        status = status_from_chain(record.exc_info[1])
        if status is not None:
            merged.update(status_fields(status))
    return merged


class StatusFieldsFilter(logging.Filter):
    """Attach ``record_fields`` to each record as ``record.fields``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.fields = record_fields(record)
        return True


def _fields_of(record: logging.LogRecord) -> dict[str, str]:
    attached = getattr(record, "fields", None)
    return attached if isinstance(attached, dict) else record_fields(record)


class JsonFormatter(logging.Formatter):
    """One JSON object per record: core fields, then status/context fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_fields_of(record),
        }
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Readable line with status/context fields appended as sorted pairs."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = _fields_of(record)
        if not extra:
            return line
        head, newline, trace = line.partition("\n")
        pairs = " ".join(f"{key}={value}" for key, value in sorted(extra.items()))
        return f"{head} {pairs}{newline}{trace}"


def configure_logging(
    settings: LoggingSettings | None = None, *, stream: TextIO | None = None
) -> None:
    """Install one handler on the root logger from ``settings``.

    Existing root handlers are replaced, so repeated calls never duplicate
    output. Service and environment are bound into the logging context.
    """
    settings = settings if settings is not None else LoggingSettings()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.level)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stdout)
    handler.addFilter(StatusFieldsFilter())
    handler.setFormatter(JsonFormatter() if settings.json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(
        **{fields.SERVICE: settings.service, fields.ENVIRONMENT: settings.environment}
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)
