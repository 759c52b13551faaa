"""Exception normalization into canonical statuses."""

from __future__ import annotations

import asyncio

from .codes import Code
from .errors import status_from_chain
from .status import Status, new_with_code

# Ordered most specific first; the first matching type wins.
_EXCEPTION_CODES: tuple[tuple[type[BaseException], Code], ...] = (
    (asyncio.CancelledError, Code.CANCELLED),
    (TimeoutError, Code.DEADLINE_EXCEEDED),
    (FileExistsError, Code.ALREADY_EXISTS),
    (PermissionError, Code.PERMISSION_DENIED),
    (FileNotFoundError, Code.NOT_FOUND),
    (ConnectionError, Code.UNAVAILABLE),
    (IndexError, Code.OUT_OF_RANGE),
    (LookupError, Code.NOT_FOUND),
    (NotImplementedError, Code.UNIMPLEMENTED),
    (MemoryError, Code.RESOURCE_EXHAUSTED),
    (ValueError, Code.INVALID_ARGUMENT),
    (TypeError, Code.INVALID_ARGUMENT),
)


def exception_to_status(exc: BaseException) -> Status:
    """Normalize a Python exception into a ``Status``.

    A status carried by an ``OpError`` anywhere in the chain takes precedence.
    Otherwise the mapping is conservative and generic; callers can layer
    domain-specific normalization before falling back to this function.
    """
    carried = status_from_chain(exc)
    if carried is not None:
        return carried.copy()

    code = code_for_exception(exc)
    status = new_with_code(code).with_description(_describe(exc, code))
    status.add_detail("exception_type", type(exc).__name__)
    return status


def code_for_exception(exc: BaseException) -> Code:
    """Return the canonical code for an exception type."""
    for exc_type, code in _EXCEPTION_CODES:
        if isinstance(exc, exc_type):
            return code
    return Code.UNKNOWN


def _describe(exc: BaseException, code: Code) -> str:
    """Return the exception message, or a generic one when it is empty.

    ``KeyError`` renders its key with quotes, so the raw key is used instead.
    """
    if isinstance(exc, KeyError) and len(exc.args) == 1:
        message = str(exc.args[0])
    else:
        message = str(exc)
    if message.strip():
        return message
    return _FALLBACK_DESCRIPTIONS.get(code, "unexpected exception")


_FALLBACK_DESCRIPTIONS: dict[Code, str] = {
    Code.CANCELLED: "operation cancelled",
    Code.DEADLINE_EXCEEDED: "deadline exceeded",
    Code.UNAVAILABLE: "dependency unavailable",
    Code.UNIMPLEMENTED: "operation not implemented",
    Code.RESOURCE_EXHAUSTED: "resource exhausted",
}
