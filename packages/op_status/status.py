"""Status value type and factories.

A ``Status`` describes the outcome of an operation with a canonical ``Code``,
an optional ``Case``, an optional description and a bag of details. Instances
are created from the prototype for the appropriate code and refined with
derivation methods::

    new_with_code(Code.NOT_FOUND).with_description("Could not find 'important_file.txt'")

Every factory and derivation returns a fresh value that owns its own details
bag, so ``add_detail`` on one status is never visible through another.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

from .cases import Case, same_case
from .codes import CODE_COUNT, CODES, Code
from .http_status import HttpStatus, is_defined
from .logging import get_logger
from .mapping import HTTP_STATUS_TO_CODE, code_to_http_status
from .retry import RetryAdvice, retry_advice_for

_LOGGER = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Status:
    """Outcome of an operation: code, optional case, description and details.

    Fields are fixed after construction except ``details``, which
    ``add_detail`` and ``add_details`` mutate in place. Equality and hashing
    consider code, case and description only.
    """

    code: Code
    case: Case | None = None
    description: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Trim the description and substitute an empty details bag."""
        object.__setattr__(self, "description", (self.description or "").strip())
        if self.details is None:
            object.__setattr__(self, "details", {})

    def with_description(self, description: str) -> Status:
        """Return a derived status with ``description``, whitespace-trimmed."""
        description = description.strip()
        if description == self.description:
            return self.copy()
        return self._derive(case=self.case, description=description)

    def with_formatted_description(self, template: str, *args: object) -> Status:
        """Return a derived status with a printf-style formatted description."""
        return self.with_description(_format(template, args))

    def augment_description(self, additional_detail: str) -> Status:
        """Return a derived status with ``additional_detail`` appended.

        The text goes on a new line when a description already exists.
        """
        if additional_detail == "":
            return self.copy()
        if self.description == "":
            return self.with_description(additional_detail)
        return self.with_description(f"{self.description}\n{additional_detail}")

    def with_case(self, case: Case | None) -> Status:
        """Return a derived status with ``case``."""
        if same_case(self.case, case):
            return self.copy()
        return self._derive(case=case, description=self.description)

    def with_case_and_description(self, case: Case | None, description: str) -> Status:
        """Return a derived status with both ``case`` and ``description``."""
        description = description.strip()
        if same_case(self.case, case) and description == self.description:
            return self.copy()
        return self._derive(case=case, description=description)

    def with_case_and_formatted_description(
        self, case: Case | None, template: str, *args: object
    ) -> Status:
        """Return a derived status with ``case`` and a formatted description."""
        return self.with_case_and_description(case, _format(template, args))

    def copy(self) -> Status:
        """Return an equivalent status that owns a deep copy of the details."""
        return self._derive(case=self.case, description=self.description)

    def add_detail(self, key: str, value: Any) -> None:
        """Add one detail about the failure. Blank keys are ignored."""
        key = key.strip()
        if not key:
            return
        self.details[key] = value

    def add_details(self, details: Mapping[str, Any]) -> None:
        """Add several details about the failure."""
        for key, value in details.items():
            self.add_detail(key, value)

    @property
    def is_ok(self) -> bool:
        """Return True when this status is OK, i.e. not an error."""
        return self.code is Code.OK

    @property
    def http_status(self) -> HttpStatus:
        """Return the wire status for this status's code."""
        return code_to_http_status(self.code)

    @property
    def retry_advice(self) -> RetryAdvice:
        """Return the retry advice for this status's code."""
        return retry_advice_for(self.code)

    def to_error_condition(self) -> str:
        """Render ``"{code}: {description}"``, or ``"{code}"`` without one."""
        if self.description == "":
            return str(self.code)
        return f"{self.code}: {self.description}"

    def _derive(self, *, case: Case | None, description: str) -> Status:
        return Status(
            code=self.code,
            case=case,
            description=description,
            details=_copy_details(self.details),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return (
            self.code is other.code
            and self.description == other.description
            and same_case(self.case, other.case)
        )

    def __hash__(self) -> int:
        case_id = self.case.identifier() if self.case is not None else None
        return hash((self.code, case_id, self.description))

    def __str__(self) -> str:
        return self.to_error_condition()


def _copy_details(details: dict[str, Any]) -> dict[str, Any]:
    """Return a private copy of a details bag.

    Values are deep-copied where possible; values that cannot be copied
    (locks, sockets, generators) are shared as-is.
    """
    try:
        return copy.deepcopy(details)
    except (TypeError, AttributeError, copy.Error):
        pass
    copied: dict[str, Any] = {}
    for key, value in details.items():
        try:
            copied[key] = copy.deepcopy(value)
        except (TypeError, AttributeError, copy.Error):
            copied[key] = value
    return copied


def _format(template: str, args: tuple[object, ...]) -> str:
    """Apply printf-style formatting; ``%%`` always renders as ``%``.

    A template that does not fit its arguments never raises: the template is
    kept verbatim, followed by the ``repr`` of each argument.
    """
    try:
        return template % args
    except (TypeError, ValueError):
        if not args:
            return template
        return " ".join([template, *(repr(arg) for arg in args)])


# Prototypes indexed by code value. Never handed out directly.
_PROTOTYPES: tuple[Status, ...] = tuple(Status(code=code) for code in CODES)


def new_with_code(code: Code) -> Status:
    """Return a fresh status for ``code``."""
    return _PROTOTYPES[code.value].copy()


def new_with_code_value(value: int) -> Status:
    """Return a fresh status for a numeric code value.

    Out-of-range values yield the Unknown status annotated with the offending
    value instead of raising.
    """
    valid = isinstance(value, int) and not isinstance(value, bool)
    if not valid or not 0 <= value < CODE_COUNT:
        return _PROTOTYPES[Code.UNKNOWN.value].with_description(
            f"Unknown op status code: {value}"
        )
    return _PROTOTYPES[value].copy()


def new_by_http_status(status_code: int) -> Status:
    """Return a fresh status for a wire status value.

    Undefined wire statuses yield an unmodified Unknown status. Defined wire
    statuses resolve to their representative code (see ``mapping``).
    """
    if not is_defined(status_code):
        return new_with_code(Code.UNKNOWN)

    code = HTTP_STATUS_TO_CODE.get(HttpStatus(status_code))
    if code is None:
        _LOGGER.warning(
            "No op status mapped to defined http status: status_code=%s",
            status_code,
        )
        return new_with_code(Code.UNKNOWN)
    return new_with_code(code)
