"""Causal error type carrying a ``Status`` through exception chains."""

from __future__ import annotations

from typing import Iterator

from .status import Status


class OpError(Exception):
    """Error pairing an operation status with an optional underlying cause.

    The cause is also linked as ``__cause__`` so standard tracebacks render
    it and ``status_from_chain`` can walk through it.
    """

    def __init__(self, status: Status, cause: BaseException | None = None) -> None:
        super().__init__(status.to_error_condition())
        self._status = status.copy()
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def status(self) -> Status:
        """Return the status carried by this error."""
        return self._status

    @property
    def cause(self) -> BaseException | None:
        """Return the wrapped lower-level error, if any."""
        return self._cause

    def __reduce__(self) -> tuple[type[OpError], tuple[Status, BaseException | None]]:
        """Rebuild from status and cause when pickled or copied."""
        return (type(self), (self._status, self._cause))

    def __str__(self) -> str:
        """Return the error condition, followed by the cause message if any."""
        condition = self._status.to_error_condition()
        if self._cause is None:
            return condition
        cause_message = str(self._cause)
        if not cause_message:
            return f"{condition}: {type(self._cause).__name__}"
        return f"{condition}: {cause_message}"


def new_with_status(status: Status) -> OpError:
    """Create an ``OpError`` for ``status`` without a cause."""
    return OpError(status)


def new_with_status_and_cause(status: Status, cause: BaseException | None) -> OpError:
    """Create an ``OpError`` for ``status`` wrapping ``cause``."""
    return OpError(status, cause)


def unwrap(err: BaseException) -> BaseException | None:
    """Return the next error in the chain, as tracebacks would render it."""
    if err.__cause__ is not None:
        return err.__cause__
    if err.__suppress_context__:
        return None
    return err.__context__


def iter_error_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and every error it wraps, outermost first.

    The walk stops when the chain is exhausted or loops back on itself.
    """
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def as_op_error(err: BaseException | None) -> tuple[bool, OpError | None]:
    """Find the first ``OpError`` anywhere in the chain of ``err``.

    Returns ``(True, error)`` when one is found and ``(False, None)`` otherwise.
    """
    for item in iter_error_chain(err):
        if isinstance(item, OpError):
            return True, item
    return False, None


def status_from_chain(err: BaseException | None) -> Status | None:
    """Return the status of the first ``OpError`` in the chain of ``err``."""
    found, op_error = as_op_error(err)
    if not found or op_error is None:
        return None
    return op_error.status
