"""Interop between canonical codes and ``grpc.StatusCode``.

Canonical code values match the gRPC canonical numbering, so the mapping is
one-to-one in both directions.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

import grpc

from .codes import Code
from .status import Status, new_with_code

_CODE_TO_GRPC: dict[Code, grpc.StatusCode] = {
    Code.OK: grpc.StatusCode.OK,
    Code.CANCELLED: grpc.StatusCode.CANCELLED,
    Code.UNKNOWN: grpc.StatusCode.UNKNOWN,
    Code.INVALID_ARGUMENT: grpc.StatusCode.INVALID_ARGUMENT,
    Code.DEADLINE_EXCEEDED: grpc.StatusCode.DEADLINE_EXCEEDED,
    Code.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    Code.ALREADY_EXISTS: grpc.StatusCode.ALREADY_EXISTS,
    Code.PERMISSION_DENIED: grpc.StatusCode.PERMISSION_DENIED,
    Code.RESOURCE_EXHAUSTED: grpc.StatusCode.RESOURCE_EXHAUSTED,
    Code.FAILED_PRECONDITION: grpc.StatusCode.FAILED_PRECONDITION,
    Code.ABORTED: grpc.StatusCode.ABORTED,
    Code.OUT_OF_RANGE: grpc.StatusCode.OUT_OF_RANGE,
    Code.UNIMPLEMENTED: grpc.StatusCode.UNIMPLEMENTED,
    Code.INTERNAL: grpc.StatusCode.INTERNAL,
    Code.UNAVAILABLE: grpc.StatusCode.UNAVAILABLE,
    Code.DATA_LOSS: grpc.StatusCode.DATA_LOSS,
    Code.UNAUTHENTICATED: grpc.StatusCode.UNAUTHENTICATED,
}

CODE_TO_GRPC: Mapping[Code, grpc.StatusCode] = MappingProxyType(_CODE_TO_GRPC)
GRPC_TO_CODE: Mapping[grpc.StatusCode, Code] = MappingProxyType(
    {grpc_code: code for code, grpc_code in _CODE_TO_GRPC.items()}
)


def to_grpc_status_code(code: Code) -> grpc.StatusCode:
    """Return the gRPC status code for ``code``."""
    return CODE_TO_GRPC[code]


def from_grpc_status_code(grpc_code: grpc.StatusCode) -> Status:
    """Return a fresh status for a gRPC status code; unknown values map to UNKNOWN."""
    return new_with_code(GRPC_TO_CODE.get(grpc_code, Code.UNKNOWN))


def status_from_rpc_error(error: grpc.RpcError) -> Status:
    """Map one grpc ``RpcError`` into a status carrying its details text."""
    grpc_code = error.code() if hasattr(error, "code") else grpc.StatusCode.UNKNOWN
    detail = error.details() if hasattr(error, "details") else str(error)
    return from_grpc_status_code(grpc_code).with_description(detail or "")
