"""Public domain error API for the status boundary."""

from . import catalog, codes
from .factories import form_error, with_metadata, wrap
from .types import (
    DomainError,
    ErrorKind,
    FormError,
    FormViolation,
    RichError,
    WrappedError,
    kind_of,
)

__all__ = [
    "DomainError",
    "ErrorKind",
    "FormError",
    "FormViolation",
    "RichError",
    "WrappedError",
    "catalog",
    "codes",
    "form_error",
    "kind_of",
    "with_metadata",
    "wrap",
]
