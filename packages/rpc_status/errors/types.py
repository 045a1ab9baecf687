"""Canonical domain error shapes consumed by the status boundary.

Three shapes exist and each one carries an explicit ``error_kind`` tag set at
class level, so the converter dispatches on the tag instead of probing
attributes:

- ``DomainError``: identity-based sentinel, raised or wrapped as-is.
- ``RichError``: a sentinel paired with free-form string metadata.
- ``FormError``: an ordered list of per-field validation violations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Iterable, Mapping


class ErrorKind(str, Enum):
    """Explicit shape tag attached to every domain error type."""

    PLAIN = "plain"
    RICH = "rich"
    FORM = "form"


class DomainError(Exception):
    """Identity-bearing sentinel error.

    Instances are created once at module import by the owning layer and
    compared by identity only. Two sentinels with the same message are still
    distinct errors.
    """

    error_kind: ClassVar[ErrorKind] = ErrorKind.PLAIN

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.name = name or message

    def __repr__(self) -> str:
        return f"DomainError({self.name})"

    def unwrap(self) -> None:
        """Sentinels are always a root cause, even if raised with ``from``."""
        return None


class WrappedError(Exception):
    """Context message wrapped around exactly one underlying error."""

    error_kind: ClassVar[ErrorKind] = ErrorKind.PLAIN

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause}")
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def unwrap(self) -> BaseException:
        """Return the wrapped error."""
        return self.cause


class RichError(Exception):
    """Sentinel error plus diagnostic metadata supplied at raise time."""

    error_kind: ClassVar[ErrorKind] = ErrorKind.RICH

    def __init__(
        self,
        sentinel: DomainError,
        metadata: Mapping[str, object] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message or str(sentinel))
        self.sentinel = sentinel
        self.metadata: Mapping[str, str] = MappingProxyType(
            {str(key): str(value) for key, value in (metadata or {}).items()}
        )

    def unwrap(self) -> DomainError:
        """Return the sentinel this error enriches."""
        return self.sentinel


@dataclass(frozen=True, slots=True)
class FormViolation:
    """One invalid field and the reason it was rejected."""

    field: str
    description: str

    def __str__(self) -> str:
        return f"{self.field}: {self.description}"


class FormError(Exception):
    """Ordered field violations, always classified as an invalid argument."""

    error_kind: ClassVar[ErrorKind] = ErrorKind.FORM

    def __init__(self, violations: Iterable[FormViolation]) -> None:
        self.violations: tuple[FormViolation, ...] = tuple(violations)
        super().__init__(", ".join(str(item) for item in self.violations))


def kind_of(error: BaseException) -> ErrorKind:
    """Return the explicit shape tag of ``error``; untagged errors are plain."""
    kind = getattr(type(error), "error_kind", None)
    if isinstance(kind, ErrorKind):
        return kind
    return ErrorKind.PLAIN
