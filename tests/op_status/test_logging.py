"""Tests for status-aware structured logging."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

from packages.op_status import Code, NamedCase, new_with_code, new_with_status_and_cause
from packages.op_status.config import LoggingSettings
from packages.op_status.logging import (
    JsonFormatter,
    PlainFormatter,
    StatusFieldsFilter,
    bind_context,
    configure_logging,
    current_fields,
    log_context,
    log_status,
    record_fields,
    reset_context,
    status_fields,
)


@pytest.fixture(autouse=True)
def _isolated_logging() -> Iterator[None]:
    """Restore root handlers replaced by a test and reset bound fields."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    reset_context()
    yield
    reset_context()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(message: str = "hello", exc: BaseException | None = None) -> logging.LogRecord:
    exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
    record = logging.LogRecord(
        "op_status.test", logging.ERROR, __file__, 1, message, (), exc_info
    )
    StatusFieldsFilter().filter(record)
    return record


def _failing_call() -> BaseException:
    """Return a RuntimeError wrapping an OpError, as raised by a handler."""
    status = new_with_code(Code.UNAVAILABLE).with_description("db down")
    try:
        try:
            raise new_with_status_and_cause(status, ConnectionError("refused"))
        except Exception as exc:
            raise RuntimeError("request failed") from exc
    except RuntimeError as err:
        return err
    raise AssertionError("unreachable")


def test_bind_and_reset_context() -> None:
    """Bound values are stringified and None values are skipped."""
    bind_context(service="billing", attempt=2, skipped=None)
    assert current_fields() == {"service": "billing", "attempt": "2"}

    reset_context()
    assert current_fields() == {}


def test_log_context_restores_previous_values() -> None:
    """Scoped fields should not outlive their block."""
    bind_context(service="billing")
    with log_context({"code": "NotFound"}):
        assert current_fields() == {"service": "billing", "code": "NotFound"}
    assert current_fields() == {"service": "billing"}


def test_status_fields_describe_status() -> None:
    """Status fields expose code, wire status, advice and detail keys."""
    status = new_with_code(Code.UNAVAILABLE).with_case_and_description(
        NamedCase("backend_down"), "retry later"
    )
    status.add_details({"region": "eu", "host": "db-1"})

    assert status_fields(status) == {
        "code": "ServiceUnavailable",
        "code_value": "14",
        "case": "backend_down",
        "description": "retry later",
        "http_status": "503",
        "retry_advice": "just_retry_failing_call",
        "detail_keys": "host,region",
    }


def test_status_fields_omit_empty_parts() -> None:
    """A bare status has no case, description or detail keys."""
    assert set(status_fields(new_with_code(Code.OK))) == {
        "code",
        "code_value",
        "http_status",
        "retry_advice",
    }


def test_record_fields_pick_status_from_exception_chain() -> None:
    """An OpError anywhere in exc_info contributes its status fields."""
    bind_context(service="billing")

    fields = record_fields(_record(exc=_failing_call()))

    assert fields["service"] == "billing"
    assert fields["code"] == "ServiceUnavailable"
    assert fields["description"] == "db down"
    assert fields["retry_advice"] == "just_retry_failing_call"


def test_record_fields_without_op_error_are_context_only() -> None:
    """Plain exceptions add no status fields."""
    bind_context(service="billing")
    assert record_fields(_record(exc=ValueError("bad"))) == {"service": "billing"}


def test_json_formatter_emits_status_of_logged_exception() -> None:
    """JSON lines carry core fields, the exception and its status."""
    payload = json.loads(JsonFormatter().format(_record("failed", _failing_call())))

    assert payload["message"] == "failed"
    assert payload["level"] == "ERROR"
    assert payload["code"] == "ServiceUnavailable"
    assert payload["http_status"] == "503"
    assert "RuntimeError: request failed" in payload["exception"]


def test_plain_formatter_appends_fields_before_traceback() -> None:
    """Field pairs go on the message line; the traceback follows."""
    with log_context({"b": "2", "a": "1"}):
        line = PlainFormatter().format(_record())
    assert line.endswith("hello a=1 b=2")

    first, _, trace = PlainFormatter().format(_record("failed", _failing_call())).partition("\n")
    assert "failed code=ServiceUnavailable" in first
    assert "RuntimeError: request failed" in trace


def test_log_status_levels_and_fields(caplog: pytest.LogCaptureFixture) -> None:
    """Errors log at WARNING with status fields bound; OK logs at INFO."""
    logger = logging.getLogger("op_status.test")
    caplog.handler.addFilter(StatusFieldsFilter())

    with caplog.at_level(logging.INFO, logger="op_status.test"):
        log_status(logger, new_with_code(Code.NOT_FOUND).with_description("missing"))
        log_status(logger, new_with_code(Code.OK), "done")

    failure, success = caplog.records
    assert failure.levelno == logging.WARNING
    assert failure.getMessage() == "NotFound(5): missing"
    assert failure.fields["code"] == "NotFound"
    assert failure.fields["retry_advice"] == "no_advice"
    assert success.levelno == logging.INFO
    assert success.getMessage() == "done"
    assert current_fields() == {}


def test_configure_logging_replaces_root_handlers() -> None:
    """Configuring twice leaves exactly one handler emitting JSON."""
    stream = io.StringIO()
    settings = LoggingSettings(level="DEBUG", json_output=True, service="svc")
    configure_logging(settings, stream=stream)
    configure_logging(settings, stream=stream)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG

    logging.getLogger("op_status.test").debug("configured")
    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "configured"
    assert payload["service"] == "svc"
    assert payload["environment"] == "dev"


def test_configure_logging_plain_output_reports_exception_status() -> None:
    """logger.exception inside a handler reports the carried status."""
    stream = io.StringIO()
    configure_logging(
        LoggingSettings(level="WARNING", json_output=False, service="svc", environment="test"),
        stream=stream,
    )
    logger = logging.getLogger("op_status.test")

    logger.info("hidden")
    try:
        raise _failing_call()
    except RuntimeError:
        logger.exception("request failed")

    out = stream.getvalue()
    assert "hidden" not in out
    assert "request failed code=ServiceUnavailable" in out
    assert "environment=test" in out
    assert "service=svc" in out
