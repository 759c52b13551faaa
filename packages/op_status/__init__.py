"""Canonical, transport-agnostic operation status model.

Public entry points:
- ``Code`` and ``HttpStatus`` registries with their mapping tables,
- ``Status`` values and the ``new_*`` factories,
- ``RetryAdvice`` derived from codes,
- ``OpError`` and the chain-walking helpers.
"""

from .cases import Case, NamedCase
from .codes import CODE_COUNT, CODES, Code, by_value
from .errors import (
    OpError,
    as_op_error,
    iter_error_chain,
    new_with_status,
    new_with_status_and_cause,
    status_from_chain,
)
from .http_status import HttpStatus, is_defined
from .mapping import (
    CODE_TO_HTTP_STATUS,
    HTTP_STATUS_TO_CODE,
    code_to_http_status,
    http_status_to_code,
)
from .normalize import exception_to_status
from .retry import RetryAdvice, retry_advice_for
from .status import Status, new_by_http_status, new_with_code, new_with_code_value

__all__ = [
    "CODES",
    "CODE_COUNT",
    "CODE_TO_HTTP_STATUS",
    "Case",
    "Code",
    "HTTP_STATUS_TO_CODE",
    "HttpStatus",
    "NamedCase",
    "OpError",
    "RetryAdvice",
    "Status",
    "as_op_error",
    "by_value",
    "code_to_http_status",
    "exception_to_status",
    "http_status_to_code",
    "is_defined",
    "iter_error_chain",
    "new_by_http_status",
    "new_with_code",
    "new_with_code_value",
    "new_with_status",
    "new_with_status_and_cause",
    "retry_advice_for",
    "status_from_chain",
]
