"""Structured log lines describing a ``Status``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .context import log_context, status_fields

if TYPE_CHECKING:
    from ..status import Status


def log_status(
    logger: logging.Logger,
    status: Status,
    message: str | None = None,
    *,
    level: int | None = None,
) -> None:
    """Log ``status`` as one line with its fields bound into the context.

    Level defaults to INFO for OK statuses and WARNING for everything else.
    """
    if level is None:
        level = logging.INFO if status.is_ok else logging.WARNING
    with log_context(status_fields(status)):
        logger.log(level, message or status.to_error_condition())
