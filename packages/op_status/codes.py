"""Canonical operation status codes.

Sometimes multiple codes may apply. Services should return the most specific
code that applies. For example, prefer ``OUT_OF_RANGE`` over
``FAILED_PRECONDITION`` if both apply. Similarly prefer ``NOT_FOUND`` or
``ALREADY_EXISTS`` over ``FAILED_PRECONDITION``.

Numeric values follow the gRPC canonical numbering and form the contiguous
range ``0..16``; ``CODES`` is indexed directly by value.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .http_status import HttpStatus


class Code(Enum):
    """Closed set of canonical operation status codes."""

    # Not an error; returned on success.
    OK = 0
    # Cancelled, typically by the caller.
    CANCELLED = 1
    # Errors from an unknown error space, or APIs that report too little.
    UNKNOWN = 2
    # Arguments are problematic regardless of system state.
    INVALID_ARGUMENT = 3
    # Deadline expired before completion; the operation may still have run.
    DEADLINE_EXCEEDED = 4
    # A requested entity was not found.
    NOT_FOUND = 5
    # The entity a client attempted to create already exists.
    ALREADY_EXISTS = 6
    # Caller is identified but not allowed to execute the operation.
    PERMISSION_DENIED = 7
    # A quota or capacity has been exhausted.
    RESOURCE_EXHAUSTED = 8
    # Rejected: system is not in the state required. Do not retry until fixed.
    FAILED_PRECONDITION = 9
    # Concurrency conflict; retry at a higher level (read-modify-write).
    ABORTED = 10
    # Attempted past the valid range; may succeed once state changes.
    OUT_OF_RANGE = 11
    # Not implemented or not enabled in this service.
    UNIMPLEMENTED = 12
    # Broken invariants in the underlying system. Reserved for serious errors.
    INTERNAL = 13
    # Transient; retry the failing call with backoff.
    UNAVAILABLE = 14
    # Unrecoverable data loss or corruption.
    DATA_LOSS = 15
    # Caller lacks valid authentication credentials.
    UNAUTHENTICATED = 16

    @property
    def label(self) -> str:
        """Return the stable display name of this code."""
        return _LABELS[self]

    @property
    def http_status(self) -> HttpStatus:
        """Return the wire status this code maps to."""
        from .mapping import code_to_http_status

        return code_to_http_status(self)

    def __str__(self) -> str:
        """Render as ``Label(value)``, e.g. ``NotFound(5)``."""
        return f"{self.label}({self.value})"


_LABELS: dict[Code, str] = {
    Code.OK: "OK",
    Code.CANCELLED: "OperationCancelled",
    Code.UNKNOWN: "UnknownError",
    Code.INVALID_ARGUMENT: "InvalidArgument",
    Code.DEADLINE_EXCEEDED: "DeadlineExceeded",
    Code.NOT_FOUND: "NotFound",
    Code.ALREADY_EXISTS: "AlreadyExists",
    Code.PERMISSION_DENIED: "PermissionDenied",
    Code.RESOURCE_EXHAUSTED: "ResourceExhausted",
    Code.FAILED_PRECONDITION: "FailedPrecondition",
    Code.ABORTED: "OperationAborted",
    Code.OUT_OF_RANGE: "OutOfRange",
    Code.UNIMPLEMENTED: "OperationUnimplemented",
    Code.INTERNAL: "InternalError",
    Code.UNAVAILABLE: "ServiceUnavailable",
    Code.DATA_LOSS: "DataLoss",
    Code.UNAUTHENTICATED: "Unauthenticated",
}


def _build_code_list() -> tuple[Code, ...]:
    """Order codes by value and verify the index has no gaps or duplicates."""
    ordered = tuple(sorted(Code, key=lambda code: code.value))
    for index, code in enumerate(ordered):
        if code.value != index:
            raise RuntimeError(
                f"code registry is not contiguous: position {index} holds {code!s}"
            )
    missing = [code for code in ordered if code not in _LABELS]
    if missing:
        raise RuntimeError(f"codes without a display label: {missing}")
    return ordered


CODES: tuple[Code, ...] = _build_code_list()
CODE_COUNT = len(CODES)


def by_value(value: int) -> Code:
    """Return the code whose numeric value is ``value``.

    Raises ``ValueError`` for values outside ``[0, CODE_COUNT)``.
    """
    if not 0 <= value < CODE_COUNT:
        raise ValueError(f"unknown op status code value: {value}")
    return CODES[value]
