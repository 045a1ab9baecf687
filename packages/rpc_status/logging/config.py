"""Stdout logging setup for processes hosting the status boundary.

Every record carries the process identity (service and environment) plus
whatever the emitting call bound with ``log_context``. Records are written
to one stdout handler as newline-delimited JSON or as plain text.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from . import fields
from .context import get_context

RECORD_FIELDS_ATTR = "status_fields"


class ContextFilter(logging.Filter):
    """Attach process identity and the bound call fields to each record.

    Identity is held by the filter rather than the contextvar, so records from
    request-handler threads carry it too.
    """

    def __init__(
        self, *, service: str | None = None, environment: str | None = None
    ) -> None:
        super().__init__()
        self._identity = {
            key: value
            for key, value in (
                (fields.SERVICE, service),
                (fields.ENVIRONMENT, environment),
            )
            if value
        }

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, RECORD_FIELDS_ATTR, {**self._identity, **get_context()})
        return True


def _record_fields(record: logging.LogRecord) -> dict[str, str]:
    values = getattr(record, RECORD_FIELDS_ATTR, None)
    return values if isinstance(values, dict) else {}


class JsonFormatter(logging.Formatter):
    """Render one record as a compact JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        for key, value in _record_fields(record).items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Text formatter; status fields lead, the rest follow sorted."""

    _LEADING = (fields.EVENT, fields.ERROR_CATEGORY, fields.ERROR_CODE)

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        values = _record_fields(record)
        if not values:
            return message
        keys = [key for key in self._LEADING if key in values]
        keys += sorted(key for key in values if key not in self._LEADING)
        return message + " " + " ".join(f"{key}={values[key]}" for key in keys)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Install one stdout handler on the root logger.

    Calling this again replaces the previous handler rather than stacking a
    second one.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter(service=service, environment=environment))
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard hierarchy."""
    return logging.getLogger(name)
