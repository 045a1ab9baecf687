"""Process startup wiring for the status boundary."""

from __future__ import annotations

from packages.rpc_status.config import StatusSettings, load_settings
from packages.rpc_status.logging import configure_logging, get_logger
from packages.rpc_status.status import (
    ErrorRegistry,
    StatusConverter,
    default_registry,
)

_LOGGER = get_logger(__name__)


def build_converter(
    settings: StatusSettings | None = None,
    *,
    registry: ErrorRegistry | None = None,
) -> StatusConverter:
    """Configure logging and build the converter request handlers share.

    Call once before the server accepts requests. The returned converter is
    immutable and safe to share across threads and tasks.
    """
    resolved = settings if settings is not None else load_settings()
    configure_logging(
        level=resolved.logging.level,
        json_output=resolved.logging.json_output,
        service=resolved.logging.service,
        environment=resolved.logging.environment,
    )
    converter = StatusConverter(
        registry if registry is not None else default_registry(),
        max_unwrap_depth=resolved.status.max_unwrap_depth,
    )
    _LOGGER.info(
        "Status converter ready with %d registered errors", len(converter.registry)
    )
    return converter
