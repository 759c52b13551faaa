"""Case capability for domain-specific sub-classification of a status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Case(Protocol):
    """A specific error condition, e.g. ``purchase_limit_exceeded``."""

    def identifier(self) -> str:
        """Return the stable string identifier of this case."""
        ...


@dataclass(frozen=True, slots=True)
class NamedCase:
    """Case identified by a fixed name."""

    name: str

    def __post_init__(self) -> None:
        """Normalize and validate the case name."""
        name = self.name.strip()
        if not name:
            raise ValueError("case name must not be blank")
        object.__setattr__(self, "name", name)

    def identifier(self) -> str:
        """Return the case name."""
        return self.name

    def __str__(self) -> str:
        return self.name


def same_case(left: Case | None, right: Case | None) -> bool:
    """Return True when both cases are absent or share an identifier."""
    if left is None or right is None:
        return left is right
    return left.identifier() == right.identifier()
