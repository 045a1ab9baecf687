"""Error classification and status mapping for RPC service boundaries."""

from .bootstrap import build_converter
from .config import StatusSettings, load_settings
from .errors import (
    DomainError,
    FormError,
    FormViolation,
    RichError,
    WrappedError,
    form_error,
    with_metadata,
    wrap,
)
from .logging import configure_logging
from .status import (
    SUCCESS,
    ErrorRegistry,
    StatusCategory,
    StatusConverter,
    StatusEntry,
    StatusError,
    abort_with_status,
    abort_with_status_async,
    category_name,
    stable_code_of,
    to_status_error,
)

__all__ = [
    "DomainError",
    "ErrorRegistry",
    "FormError",
    "FormViolation",
    "RichError",
    "SUCCESS",
    "StatusCategory",
    "StatusConverter",
    "StatusEntry",
    "StatusError",
    "StatusSettings",
    "WrappedError",
    "abort_with_status",
    "abort_with_status_async",
    "build_converter",
    "category_name",
    "configure_logging",
    "form_error",
    "load_settings",
    "stable_code_of",
    "to_status_error",
    "with_metadata",
    "wrap",
]
