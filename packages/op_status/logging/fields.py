"""Canonical logging field names for structured status logs.

Keeping names centralized prevents drift between the JSON formatter, context
propagation and ``log_status``.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Status fields.
CODE = "code"
CODE_VALUE = "code_value"
CASE = "case"
DESCRIPTION = "description"
HTTP_STATUS = "http_status"
RETRY_ADVICE = "retry_advice"
DETAIL_KEYS = "detail_keys"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
