"""Factory helpers for raising consistently shaped domain errors."""

from __future__ import annotations

from typing import Iterable, Mapping

from .types import DomainError, FormError, FormViolation, RichError, WrappedError


def wrap(error: BaseException, message: str) -> WrappedError:
    """Wrap ``error`` with call-site context, keeping it reachable as a cause."""
    return WrappedError(message, error)


def with_metadata(
    sentinel: DomainError,
    metadata: Mapping[str, object] | None = None,
    *,
    message: str | None = None,
) -> RichError:
    """Attach diagnostic metadata to one sentinel error."""
    return RichError(sentinel, metadata, message=message)


def form_error(violations: Iterable[tuple[str, str] | FormViolation]) -> FormError:
    """Create a form error from violations or ``(field, description)`` pairs."""
    return FormError(_violation(item) for item in violations)


def _violation(value: tuple[str, str] | FormViolation) -> FormViolation:
    """Normalize one violation input into a ``FormViolation``."""
    if isinstance(value, FormViolation):
        return value
    field, description = value
    return FormViolation(field=field, description=description)
