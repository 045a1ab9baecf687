"""Stable client-facing error code constants.

Clients branch on these strings, so they never change once published, even if
the human-readable message of the matching sentinel does. Sentinels without an
entry here are still classified by category; they just expose no code.
"""

# Invalid argument
PACK_REQUIRED = "ErrPackRequired"
CHECKPOINT_REQUIRED = "ErrCheckpointRequired"
INVALID_SCHEMA_KEY = "ErrInvalidSchemaKey"
INVALID_HEX_STRING = "ErrInvalidHexString"
INVALID_ACTOR_ID = "ErrInvalidActorID"
INVALID_ID = "ErrInvalidID"
INVALID_CLIENT_ID = "ErrInvalidClientID"
INVALID_CLIENT_KEY = "ErrInvalidClientKey"
INVALID_KEY = "ErrInvalidKey"
EMPTY_PROJECT_FIELDS = "ErrEmptyProjectFields"
SCHEMA_VALIDATION_FAILED = "ErrSchemaValidationFailed"

# Not found
PROJECT_NOT_FOUND = "ErrProjectNotFound"
CLIENT_NOT_FOUND = "ErrClientNotFound"
DOCUMENT_NOT_FOUND = "ErrDocumentNotFound"
USER_NOT_FOUND = "ErrUserNotFound"
SCHEMA_NOT_FOUND = "ErrSchemaNotFound"

# Already exists
PROJECT_ALREADY_EXISTS = "ErrProjectAlreadyExists"
PROJECT_NAME_ALREADY_EXISTS = "ErrProjectNameAlreadyExists"
USER_ALREADY_EXISTS = "ErrUserAlreadyExists"
SCHEMA_ALREADY_EXISTS = "ErrSchemaAlreadyExists"
ALREADY_CONNECTED = "ErrAlreadyConnected"

# Failed precondition
CLIENT_NOT_ACTIVATED = "ErrClientNotActivated"
DOCUMENT_NOT_ATTACHED = "ErrDocumentNotAttached"
DOCUMENT_ALREADY_ATTACHED = "ErrDocumentAlreadyAttached"
DOCUMENT_ALREADY_DETACHED = "ErrDocumentAlreadyDetached"
DOCUMENT_ATTACHED = "ErrDocumentAttached"
INVALID_SERVER_SEQ = "ErrInvalidServerSeq"
CONFLICT_ON_UPDATE = "ErrConflictOnUpdate"

# Unimplemented
UNSUPPORTED_OPERATION = "ErrUnsupportedOperation"
UNSUPPORTED_ELEMENT = "ErrUnsupportedElement"
UNSUPPORTED_EVENT_TYPE = "ErrUnsupportedEventType"
UNSUPPORTED_VALUE_TYPE = "ErrUnsupportedValueType"
UNSUPPORTED_COUNTER_TYPE = "ErrUnsupportedCounterType"

# Authentication / authorization
UNAUTHENTICATED = "ErrUnauthenticated"
MISMATCHED_PASSWORD = "ErrMismatchedPassword"
PERMISSION_DENIED = "ErrPermissionDenied"

# Internal
UNEXPECTED_STATUS_CODE = "ErrUnexpectedStatusCode"
UNEXPECTED_RESPONSE = "ErrUnexpectedResponse"
WEBHOOK_TIMEOUT = "ErrWebhookTimeout"
TOO_MANY_SUBSCRIBERS = "ErrTooManySubscribers"
