"""Public logging API for the status boundary.

Thin wrapper over Python's ``logging`` module with stdout defaults, process
identity on every record, and contextvar-scoped call fields.
"""

from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_logger,
)
from .context import get_context, log_context

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "configure_logging",
    "get_context",
    "get_logger",
    "log_context",
]
