"""Transport-neutral status taxonomy and structured detail shapes.

The transport owns wire serialization. This module only fixes the category
set, the stable-code detail, and the field-violation detail that clients
branch on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

SUCCESS = "ok"


class StatusCategory(str, Enum):
    """Canonical transport outcomes; values are the wire-level code names."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    FAILED_PRECONDITION = "failed_precondition"
    UNIMPLEMENTED = "unimplemented"
    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission_denied"
    INTERNAL = "internal"
    CANCELED = "canceled"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """Registered classification of one sentinel error."""

    category: StatusCategory
    code: str | None = None


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    """Key/value detail carrying the stable code and diagnostic metadata."""

    metadata: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """One rejected request field."""

    field: str
    description: str


@dataclass(frozen=True, slots=True)
class BadRequest:
    """Ordered field violations for an invalid request."""

    field_violations: tuple[FieldViolation, ...] = ()


StatusDetail = ErrorInfo | BadRequest


@dataclass(eq=False)
class StatusError(Exception):
    """Classified error ready to cross the RPC boundary.

    Fields are read-only by convention. The class is not frozen because the
    interpreter assigns ``__traceback__`` whenever the error is re-raised, and
    equality stays identity-based like any other exception.
    """

    category: StatusCategory
    message: str
    details: tuple[StatusDetail, ...] = ()
    cause: BaseException | None = field(default=None, repr=False)

    def __str__(self) -> str:
        """Render as ``<category>: <message>``."""
        return f"{self.category.value}: {self.message}"

    @property
    def error_info(self) -> ErrorInfo | None:
        """Return the first ``ErrorInfo`` detail, if any."""
        for detail in self.details:
            if isinstance(detail, ErrorInfo):
                return detail
        return None

    @property
    def bad_request(self) -> BadRequest | None:
        """Return the first ``BadRequest`` detail, if any."""
        for detail in self.details:
            if isinstance(detail, BadRequest):
                return detail
        return None

    @property
    def code(self) -> str:
        """Return the stable code carried in ``ErrorInfo``, or ``""``."""
        info = self.error_info
        if info is None:
            return ""
        return info.metadata.get("code", "")
