"""Closed set of HTTP-style wire statuses recognized by the status model.

Only statuses that some canonical code maps to are defined. Any other integer
is not a wire status as far as this package is concerned; ``is_defined`` is the
sole admission test.
"""

from __future__ import annotations

from enum import Enum


class HttpStatus(Enum):
    """Externally-visible HTTP-style status."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    CLIENT_CLOSED_REQUEST = 499
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    SERVICE_UNAVAILABLE = 503
    TIMEOUT = 504

    @property
    def label(self) -> str:
        """Return the stable display name of this status."""
        return _LABELS[self]

    @classmethod
    def from_value(cls, value: int) -> HttpStatus:
        """Return the defined status for ``value`` or raise ``ValueError``."""
        if not is_defined(value):
            raise ValueError(f"HTTP status for code {value} is not defined")
        return cls(value)

    def __str__(self) -> str:
        """Render as ``Label(value)``, e.g. ``NotFound(404)``."""
        return f"{self.label}({self.value})"


_LABELS: dict[HttpStatus, str] = {
    HttpStatus.OK: "OK",
    HttpStatus.BAD_REQUEST: "BadRequest",
    HttpStatus.UNAUTHORIZED: "Unauthorized",
    HttpStatus.FORBIDDEN: "Forbidden",
    HttpStatus.NOT_FOUND: "NotFound",
    HttpStatus.CONFLICT: "Conflict",
    HttpStatus.TOO_MANY_REQUESTS: "TooManyRequests",
    HttpStatus.CLIENT_CLOSED_REQUEST: "ClientClosedRequest",
    HttpStatus.INTERNAL_SERVER_ERROR: "InternalServerError",
    HttpStatus.NOT_IMPLEMENTED: "NotImplemented",
    HttpStatus.SERVICE_UNAVAILABLE: "ServiceUnavailable",
    HttpStatus.TIMEOUT: "Timeout",
}

_DEFINED_VALUES: frozenset[int] = frozenset(status.value for status in HttpStatus)


def is_defined(value: int) -> bool:
    """Return True when ``value`` is a recognized wire status."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value in _DEFINED_VALUES
