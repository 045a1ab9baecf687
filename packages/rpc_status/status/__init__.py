"""Public status conversion API."""

from .adapters import find_tagged, form_error_to_status, rich_error_to_status
from .causes import iter_chain, resolve_cause, unwrap_once
from .converter import (
    StatusConverter,
    category_name,
    default_converter,
    stable_code_of,
    to_status_error,
)
from .defaults import DEFAULT_TABLE, default_registry
from .grpc_transport import (
    GRPC_STATUS_CODES,
    abort_with_status,
    abort_with_status_async,
    grpc_code_of,
    status_trailing_metadata,
)
from .registry import ErrorRegistry, RegistryRow
from .types import (
    SUCCESS,
    BadRequest,
    ErrorInfo,
    FieldViolation,
    StatusCategory,
    StatusDetail,
    StatusEntry,
    StatusError,
)

__all__ = [
    "BadRequest",
    "DEFAULT_TABLE",
    "ErrorInfo",
    "ErrorRegistry",
    "FieldViolation",
    "GRPC_STATUS_CODES",
    "RegistryRow",
    "SUCCESS",
    "StatusCategory",
    "StatusConverter",
    "StatusDetail",
    "StatusEntry",
    "StatusError",
    "abort_with_status",
    "abort_with_status_async",
    "category_name",
    "default_converter",
    "default_registry",
    "find_tagged",
    "form_error_to_status",
    "grpc_code_of",
    "iter_chain",
    "resolve_cause",
    "rich_error_to_status",
    "stable_code_of",
    "status_trailing_metadata",
    "to_status_error",
    "unwrap_once",
]
