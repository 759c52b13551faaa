"""Retry advice derived from canonical status codes."""

from __future__ import annotations

from enum import Enum

from .codes import Code


class RetryAdvice(str, Enum):
    """Caller-facing recommendation on whether and how to retry."""

    # UNAVAILABLE: retry just the failing call with exponential backoff. The
    # minimum delay should be 1s unless documented otherwise.
    JUST_RETRY_FAILING_CALL = "just_retry_failing_call"
    # ABORTED: restart at a higher level, e.g. the whole read-modify-write
    # sequence. RESOURCE_EXHAUSTED: retry at a higher level with a delay.
    RETRY_AT_HIGHER_LEVEL = "retry_at_higher_level"
    # FAILED_PRECONDITION: do not retry until the system state is fixed.
    NOT_RETRY_UNTIL_STATE_FIXED = "not_retry_until_state_fixed"
    # Everything else. Make sure the request is idempotent before retrying.
    NO_ADVICE = "no_advice"


_ADVICE_BY_CODE: dict[Code, RetryAdvice] = {
    Code.UNAVAILABLE: RetryAdvice.JUST_RETRY_FAILING_CALL,
    Code.FAILED_PRECONDITION: RetryAdvice.NOT_RETRY_UNTIL_STATE_FIXED,
    Code.ABORTED: RetryAdvice.RETRY_AT_HIGHER_LEVEL,
    Code.RESOURCE_EXHAUSTED: RetryAdvice.RETRY_AT_HIGHER_LEVEL,
}


def retry_advice_for(code: Code) -> RetryAdvice:
    """Return the retry advice for ``code``."""
    return _ADVICE_BY_CODE.get(code, RetryAdvice.NO_ADVICE)
