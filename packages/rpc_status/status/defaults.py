"""Built-in registry table for the document-sync server.

Rows are ``(sentinel, category, stable code)``. A ``None`` code means the
sentinel is classified but exposes no stable code to clients.
"""

from __future__ import annotations

from functools import lru_cache

from packages.rpc_status.errors import catalog, codes

from .registry import ErrorRegistry, RegistryRow
from .types import StatusCategory

_INVALID = StatusCategory.INVALID_ARGUMENT
_NOT_FOUND = StatusCategory.NOT_FOUND
_EXISTS = StatusCategory.ALREADY_EXISTS
_PRECONDITION = StatusCategory.FAILED_PRECONDITION
_UNIMPLEMENTED = StatusCategory.UNIMPLEMENTED

DEFAULT_TABLE: tuple[RegistryRow, ...] = (
    # The request is malformed.
    (catalog.PACK_REQUIRED, _INVALID, codes.PACK_REQUIRED),
    (catalog.CHECKPOINT_REQUIRED, _INVALID, codes.CHECKPOINT_REQUIRED),
    (catalog.UNSUPPORTED_DATE_RANGE, _INVALID, None),
    (catalog.INVALID_SCHEMA_KEY, _INVALID, codes.INVALID_SCHEMA_KEY),
    (catalog.INVALID_HEX_STRING, _INVALID, codes.INVALID_HEX_STRING),
    (catalog.INVALID_ACTOR_ID, _INVALID, codes.INVALID_ACTOR_ID),
    (catalog.INVALID_ID, _INVALID, codes.INVALID_ID),
    (catalog.INVALID_CLIENT_ID, _INVALID, codes.INVALID_CLIENT_ID),
    (catalog.INVALID_CLIENT_KEY, _INVALID, codes.INVALID_CLIENT_KEY),
    (catalog.INVALID_KEY, _INVALID, codes.INVALID_KEY),
    (catalog.EMPTY_PROJECT_FIELDS, _INVALID, codes.EMPTY_PROJECT_FIELDS),
    (catalog.INVALID_YSON, _INVALID, None),
    (catalog.UNSUPPORTED_YSON, _INVALID, None),
    (catalog.SCHEMA_VALIDATION_FAILED, _INVALID, codes.SCHEMA_VALIDATION_FAILED),
    # The requested resource does not exist.
    (catalog.PROJECT_NOT_FOUND, _NOT_FOUND, codes.PROJECT_NOT_FOUND),
    (catalog.CLIENT_NOT_FOUND, _NOT_FOUND, codes.CLIENT_NOT_FOUND),
    (catalog.DOCUMENT_NOT_FOUND, _NOT_FOUND, codes.DOCUMENT_NOT_FOUND),
    (catalog.USER_NOT_FOUND, _NOT_FOUND, codes.USER_NOT_FOUND),
    (catalog.SCHEMA_NOT_FOUND, _NOT_FOUND, codes.SCHEMA_NOT_FOUND),
    # The requested resource already exists.
    (catalog.PROJECT_ALREADY_EXISTS, _EXISTS, codes.PROJECT_ALREADY_EXISTS),
    (catalog.PROJECT_NAME_ALREADY_EXISTS, _EXISTS, codes.PROJECT_NAME_ALREADY_EXISTS),
    (catalog.USER_ALREADY_EXISTS, _EXISTS, codes.USER_ALREADY_EXISTS),
    (catalog.ALREADY_CONNECTED, _EXISTS, codes.ALREADY_CONNECTED),
    (catalog.SCHEMA_ALREADY_EXISTS, _EXISTS, codes.SCHEMA_ALREADY_EXISTS),
    # The system is not in the state the request requires.
    (catalog.CLIENT_NOT_ACTIVATED, _PRECONDITION, codes.CLIENT_NOT_ACTIVATED),
    (catalog.DOCUMENT_NOT_ATTACHED, _PRECONDITION, codes.DOCUMENT_NOT_ATTACHED),
    (catalog.DOCUMENT_ALREADY_ATTACHED, _PRECONDITION, codes.DOCUMENT_ALREADY_ATTACHED),
    (catalog.DOCUMENT_ALREADY_DETACHED, _PRECONDITION, codes.DOCUMENT_ALREADY_DETACHED),
    (catalog.DOCUMENT_ATTACHED, _PRECONDITION, codes.DOCUMENT_ATTACHED),
    (catalog.INVALID_SERVER_SEQ, _PRECONDITION, codes.INVALID_SERVER_SEQ),
    (catalog.CONFLICT_ON_UPDATE, _PRECONDITION, codes.CONFLICT_ON_UPDATE),
    (catalog.DOCUMENT_NOT_REMOVED, _PRECONDITION, None),
    # The server does not implement the functionality.
    (catalog.UNSUPPORTED_OPERATION, _UNIMPLEMENTED, codes.UNSUPPORTED_OPERATION),
    (catalog.UNSUPPORTED_ELEMENT, _UNIMPLEMENTED, codes.UNSUPPORTED_ELEMENT),
    (catalog.UNSUPPORTED_EVENT_TYPE, _UNIMPLEMENTED, codes.UNSUPPORTED_EVENT_TYPE),
    (catalog.UNSUPPORTED_VALUE_TYPE, _UNIMPLEMENTED, codes.UNSUPPORTED_VALUE_TYPE),
    (catalog.UNSUPPORTED_COUNTER_TYPE, _UNIMPLEMENTED, codes.UNSUPPORTED_COUNTER_TYPE),
    # Authentication and authorization.
    (catalog.UNAUTHENTICATED, StatusCategory.UNAUTHENTICATED, codes.UNAUTHENTICATED),
    (catalog.MISMATCHED_PASSWORD, StatusCategory.UNAUTHENTICATED, codes.MISMATCHED_PASSWORD),
    (catalog.PERMISSION_DENIED, StatusCategory.PERMISSION_DENIED, codes.PERMISSION_DENIED),
    # Upstream or capacity failures surfaced as internal errors.
    (catalog.UNEXPECTED_STATUS_CODE, StatusCategory.INTERNAL, codes.UNEXPECTED_STATUS_CODE),
    (catalog.UNEXPECTED_RESPONSE, StatusCategory.INTERNAL, codes.UNEXPECTED_RESPONSE),
    (catalog.WEBHOOK_TIMEOUT, StatusCategory.INTERNAL, codes.WEBHOOK_TIMEOUT),
    (catalog.TOO_MANY_SUBSCRIBERS, StatusCategory.INTERNAL, codes.TOO_MANY_SUBSCRIBERS),
    # The caller canceled the operation.
    (catalog.CANCELED, StatusCategory.CANCELED, None),
)


@lru_cache(maxsize=1)
def default_registry() -> ErrorRegistry:
    """Return the process-wide registry built from ``DEFAULT_TABLE``."""
    return ErrorRegistry.from_table(DEFAULT_TABLE)
