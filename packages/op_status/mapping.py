"""Mapping tables between canonical codes and wire statuses.

The forward table is total: every code has exactly one wire status. Several
codes share a wire status, so the inverse table picks one representative code
per wire status:

- ``400 BadRequest`` -> ``INVALID_ARGUMENT`` (also FAILED_PRECONDITION, OUT_OF_RANGE)
- ``409 Conflict`` -> ``ALREADY_EXISTS`` (also ABORTED)
- ``500 InternalServerError`` -> ``INTERNAL`` (also UNKNOWN, DATA_LOSS)

A code -> wire -> code round trip is therefore not the identity for the
non-representative codes. Both tables are validated once at import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .codes import CODES, Code
from .http_status import HttpStatus, is_defined


def _validate_tables(
    forward: Mapping[Code, HttpStatus], inverse: Mapping[HttpStatus, Code]
) -> None:
    """Raise ``RuntimeError`` when the tables break the closed-world contract."""
    unmapped = [code for code in CODES if code not in forward]
    if unmapped:
        raise RuntimeError(f"codes without a wire status: {unmapped}")

    for status in set(forward.values()):
        representative = inverse.get(status)
        if representative is None:
            raise RuntimeError(f"wire status {status} has no representative code")
        if forward[representative] is not status:
            raise RuntimeError(
                f"representative {representative} for {status} maps to "
                f"{forward[representative]}"
            )


_CODE_TO_HTTP_STATUS: dict[Code, HttpStatus] = {
    Code.OK: HttpStatus.OK,
    Code.INVALID_ARGUMENT: HttpStatus.BAD_REQUEST,
    Code.FAILED_PRECONDITION: HttpStatus.BAD_REQUEST,
    Code.OUT_OF_RANGE: HttpStatus.BAD_REQUEST,
    Code.UNAUTHENTICATED: HttpStatus.UNAUTHORIZED,
    Code.PERMISSION_DENIED: HttpStatus.FORBIDDEN,
    Code.NOT_FOUND: HttpStatus.NOT_FOUND,
    Code.ABORTED: HttpStatus.CONFLICT,
    Code.ALREADY_EXISTS: HttpStatus.CONFLICT,
    Code.RESOURCE_EXHAUSTED: HttpStatus.TOO_MANY_REQUESTS,
    Code.CANCELLED: HttpStatus.CLIENT_CLOSED_REQUEST,
    Code.DATA_LOSS: HttpStatus.INTERNAL_SERVER_ERROR,
    Code.UNKNOWN: HttpStatus.INTERNAL_SERVER_ERROR,
    Code.INTERNAL: HttpStatus.INTERNAL_SERVER_ERROR,
    Code.UNIMPLEMENTED: HttpStatus.NOT_IMPLEMENTED,
    Code.UNAVAILABLE: HttpStatus.SERVICE_UNAVAILABLE,
    Code.DEADLINE_EXCEEDED: HttpStatus.TIMEOUT,
}

_HTTP_STATUS_TO_CODE: dict[HttpStatus, Code] = {
    HttpStatus.OK: Code.OK,
    HttpStatus.BAD_REQUEST: Code.INVALID_ARGUMENT,
    HttpStatus.UNAUTHORIZED: Code.UNAUTHENTICATED,
    HttpStatus.FORBIDDEN: Code.PERMISSION_DENIED,
    HttpStatus.NOT_FOUND: Code.NOT_FOUND,
    HttpStatus.CONFLICT: Code.ALREADY_EXISTS,
    HttpStatus.TOO_MANY_REQUESTS: Code.RESOURCE_EXHAUSTED,
    HttpStatus.CLIENT_CLOSED_REQUEST: Code.CANCELLED,
    HttpStatus.INTERNAL_SERVER_ERROR: Code.INTERNAL,
    HttpStatus.NOT_IMPLEMENTED: Code.UNIMPLEMENTED,
    HttpStatus.SERVICE_UNAVAILABLE: Code.UNAVAILABLE,
    HttpStatus.TIMEOUT: Code.DEADLINE_EXCEEDED,
}

_validate_tables(_CODE_TO_HTTP_STATUS, _HTTP_STATUS_TO_CODE)

CODE_TO_HTTP_STATUS: Mapping[Code, HttpStatus] = MappingProxyType(_CODE_TO_HTTP_STATUS)
HTTP_STATUS_TO_CODE: Mapping[HttpStatus, Code] = MappingProxyType(_HTTP_STATUS_TO_CODE)


def code_to_http_status(code: Code) -> HttpStatus:
    """Return the wire status for ``code``."""
    return CODE_TO_HTTP_STATUS[code]


def http_status_to_code(value: int) -> Code | None:
    """Return the representative code for a wire status value.

    Returns ``None`` when ``value`` is not a defined wire status, or when it is
    defined but has no inverse entry.
    """
    if not is_defined(value):
        return None
    return HTTP_STATUS_TO_CODE.get(HttpStatus(value))
