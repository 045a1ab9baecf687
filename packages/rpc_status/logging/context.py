"""Per-call structured fields for status-boundary log records.

Fields live in a contextvar, so each request thread or task sees only what
its own ``log_context`` blocks bound.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_FIELDS: ContextVar[Mapping[str, str]] = ContextVar(
    "rpc_status_log_fields", default={}
)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_LOG_FIELDS.get())


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind stringified ``values`` for one block; ``None`` values are skipped."""
    merged = {**_LOG_FIELDS.get()}
    merged.update(
        {str(key): str(value) for key, value in values.items() if value is not None}
    )
    token = _LOG_FIELDS.set(merged)
    try:
        yield
    finally:
        _LOG_FIELDS.reset(token)
