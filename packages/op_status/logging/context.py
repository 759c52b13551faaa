"""Status-aware log fields and their per-context binding.

Fields bound here ride along on every record emitted in the same thread or
asyncio task (``contextvars``). ``status_fields`` is the single place that
decides how a ``Status`` looks in a log line.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Mapping

from . import fields

if TYPE_CHECKING:
    from ..status import Status

_BOUND: ContextVar[Mapping[str, str]] = ContextVar("op_status_bound_fields", default={})


def _stringify(values: Mapping[str, object]) -> dict[str, str]:
    return {str(key): str(value) for key, value in values.items() if value is not None}


def current_fields() -> dict[str, str]:
    """Return the fields bound in the current context."""
    return dict(_BOUND.get())


def bind_context(**values: object) -> None:
    """Bind values for the rest of the current context; ``None`` is skipped."""
    _BOUND.set({**_BOUND.get(), **_stringify(values)})


def reset_context() -> None:
    """Drop every bound field."""
    _BOUND.set({})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, then restore."""
    token = _BOUND.set({**_BOUND.get(), **_stringify(values)})
    try:
        yield
    finally:
        _BOUND.reset(token)


def status_fields(status: Status) -> dict[str, str]:
    """Return the log fields describing ``status``; empty parts are omitted."""
    return _stringify(
        {
            fields.CODE: status.code.label,
            fields.CODE_VALUE: status.code.value,
            fields.CASE: status.case.identifier() if status.case is not None else None,
            fields.DESCRIPTION: status.description or None,
            fields.HTTP_STATUS: status.http_status.value,
            fields.RETRY_ADVICE: status.retry_advice.value,
            fields.DETAIL_KEYS: ",".join(sorted(status.details)) or None,
        }
    )
