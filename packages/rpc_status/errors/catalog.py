"""Sentinel domain errors raised by the document-sync server layers.

Each sentinel is owned by the layer named in its section header. The status
boundary only classifies these values; it never raises them itself.
"""

from __future__ import annotations

from .types import DomainError

# API converter
PACK_REQUIRED = DomainError("packs required", name="ErrPackRequired")
CHECKPOINT_REQUIRED = DomainError("checkpoint required", name="ErrCheckpointRequired")
UNSUPPORTED_DATE_RANGE = DomainError(
    "unsupported date range", name="ErrUnsupportedDateRange"
)
INVALID_SCHEMA_KEY = DomainError("invalid schema key", name="ErrInvalidSchemaKey")
UNSUPPORTED_OPERATION = DomainError(
    "unsupported operation", name="ErrUnsupportedOperation"
)
UNSUPPORTED_ELEMENT = DomainError("unsupported element", name="ErrUnsupportedElement")
UNSUPPORTED_EVENT_TYPE = DomainError(
    "unsupported event type", name="ErrUnsupportedEventType"
)
UNSUPPORTED_VALUE_TYPE = DomainError(
    "unsupported value type", name="ErrUnsupportedValueType"
)
UNSUPPORTED_COUNTER_TYPE = DomainError(
    "unsupported counter type", name="ErrUnsupportedCounterType"
)

# Logical time and identifiers
INVALID_HEX_STRING = DomainError("invalid hex string", name="ErrInvalidHexString")
INVALID_ACTOR_ID = DomainError("invalid actor id", name="ErrInvalidActorID")
INVALID_ID = DomainError("invalid id", name="ErrInvalidID")
EMPTY_PROJECT_FIELDS = DomainError(
    "updatable project fields are empty", name="ErrEmptyProjectFields"
)

# Clients
INVALID_CLIENT_ID = DomainError("invalid client id", name="ErrInvalidClientID")
INVALID_CLIENT_KEY = DomainError("invalid client key", name="ErrInvalidClientKey")

# Document keys and payloads
INVALID_KEY = DomainError("invalid key", name="ErrInvalidKey")
INVALID_YSON = DomainError("invalid YSON", name="ErrInvalidYSON")
UNSUPPORTED_YSON = DomainError("unsupported YSON type", name="ErrUnsupported")
SCHEMA_VALIDATION_FAILED = DomainError(
    "schema validation failed", name="ErrSchemaValidationFailed"
)

# Database
PROJECT_NOT_FOUND = DomainError("project not found", name="ErrProjectNotFound")
CLIENT_NOT_FOUND = DomainError("client not found", name="ErrClientNotFound")
DOCUMENT_NOT_FOUND = DomainError("document not found", name="ErrDocumentNotFound")
USER_NOT_FOUND = DomainError("user not found", name="ErrUserNotFound")
SCHEMA_NOT_FOUND = DomainError("schema not found", name="ErrSchemaNotFound")
PROJECT_ALREADY_EXISTS = DomainError(
    "project already exists", name="ErrProjectAlreadyExists"
)
PROJECT_NAME_ALREADY_EXISTS = DomainError(
    "project name already exists", name="ErrProjectNameAlreadyExists"
)
USER_ALREADY_EXISTS = DomainError("user already exists", name="ErrUserAlreadyExists")
SCHEMA_ALREADY_EXISTS = DomainError(
    "schema already exists", name="ErrSchemaAlreadyExists"
)
CLIENT_NOT_ACTIVATED = DomainError(
    "client not activated", name="ErrClientNotActivated"
)
DOCUMENT_NOT_ATTACHED = DomainError(
    "document not attached", name="ErrDocumentNotAttached"
)
DOCUMENT_ALREADY_ATTACHED = DomainError(
    "document already attached", name="ErrDocumentAlreadyAttached"
)
DOCUMENT_ALREADY_DETACHED = DomainError(
    "document already detached", name="ErrDocumentAlreadyDetached"
)
CONFLICT_ON_UPDATE = DomainError("conflict on update", name="ErrConflictOnUpdate")
MISMATCHED_PASSWORD = DomainError("mismatched password", name="ErrMismatchedPassword")

# Documents and packs
DOCUMENT_ATTACHED = DomainError(
    "document is attached to clients", name="ErrDocumentAttached"
)
INVALID_SERVER_SEQ = DomainError("invalid server seq", name="ErrInvalidServerSeq")
DOCUMENT_NOT_REMOVED = DomainError(
    "document is not removed yet", name="ErrDocumentNotRemoved"
)

# Pub/sub
ALREADY_CONNECTED = DomainError("already connected", name="ErrAlreadyConnected")
TOO_MANY_SUBSCRIBERS = DomainError(
    "subscription limit exceeded", name="ErrTooManySubscribers"
)

# Auth
UNAUTHENTICATED = DomainError("unauthenticated", name="ErrUnauthenticated")
PERMISSION_DENIED = DomainError("permission denied", name="ErrPermissionDenied")

# Webhook
UNEXPECTED_STATUS_CODE = DomainError(
    "unexpected status code from webhook", name="ErrUnexpectedStatusCode"
)
UNEXPECTED_RESPONSE = DomainError(
    "unexpected response from webhook", name="ErrUnexpectedResponse"
)
WEBHOOK_TIMEOUT = DomainError("webhook timeout", name="ErrWebhookTimeout")

# Request lifecycle
CANCELED = DomainError("context canceled", name="ErrCanceled")
