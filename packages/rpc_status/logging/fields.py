"""Structured log field names shared by every status-boundary logger."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Process identity, held by the handler filter ``configure_logging`` installs.
SERVICE = "service"
ENVIRONMENT = "environment"

# Status conversion fields.
STATUS_ABORT_EVENT = "status_abort"
LOOKUP_FAULT_EVENT = "status_lookup_fault"
UNWRAP_LIMIT_EVENT = "status_unwrap_limit"
UNWRAP_FAULT_EVENT = "status_unwrap_fault"
ERROR_CATEGORY = "error_category"
ERROR_CODE = "error_code"
EXCEPTION_TYPE = "exception_type"
MAX_DEPTH = "max_depth"
