"""Tests for structured logging helpers and startup wiring."""

from __future__ import annotations

import io
import json
import logging
import threading
from typing import Iterator

import pytest

from packages.rpc_status.bootstrap import build_converter
from packages.rpc_status.config import StatusSettings
from packages.rpc_status.errors import DomainError, wrap
from packages.rpc_status.logging import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    get_context,
    log_context,
)
from packages.rpc_status.status import ErrorRegistry, StatusCategory


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Remove handlers installed by tests and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, PlainFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)


def _record(message: str, log_filter: ContextFilter | None = None) -> logging.LogRecord:
    """Build one record passed through a context filter."""
    record = logging.LogRecord(
        name="rpc_status.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    (log_filter or ContextFilter()).filter(record)
    return record


def test_log_context_binds_nests_and_restores() -> None:
    """log_context should apply values only inside the block."""
    assert get_context() == {}

    with log_context({"error_category": "not_found", "skipped": None}):
        with log_context({"error_code": "ErrDocumentNotFound"}):
            assert get_context() == {
                "error_category": "not_found",
                "error_code": "ErrDocumentNotFound",
            }
        assert get_context() == {"error_category": "not_found"}

    assert get_context() == {}


def test_json_formatter_includes_identity_and_call_fields() -> None:
    """JSON output should carry core fields, identity and bound fields."""
    log_filter = ContextFilter(service="sync-api", environment="prod")
    with log_context({"error_code": "ErrDocumentNotFound"}):
        record = _record("Aborting RPC", log_filter)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "rpc_status.test"
    assert payload["message"] == "Aborting RPC"
    assert payload["service"] == "sync-api"
    assert payload["environment"] == "prod"
    assert payload["error_code"] == "ErrDocumentNotFound"


def test_json_formatter_keeps_core_fields_over_bound_fields() -> None:
    """Bound fields must not overwrite the record's own message."""
    with log_context({"message": "spoofed"}):
        record = _record("real")

    assert json.loads(JsonFormatter().format(record))["message"] == "real"


def test_plain_formatter_leads_with_status_fields() -> None:
    """Status fields come first, then the remaining fields sorted."""
    log_filter = ContextFilter(service="sync-api")
    with log_context({"b": "2", "error_category": "internal", "event": "status_abort"}):
        record = _record("hello", log_filter)

    assert PlainFormatter().format(record).endswith(
        "hello event=status_abort error_category=internal b=2 service=sync-api"
    )


def test_configure_logging_installs_single_handler() -> None:
    """Repeated configuration should not stack handlers."""
    configure_logging(level="debug", json_output=False, service="sync-api")
    configure_logging(level="debug", json_output=False, service="sync-api")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, PlainFormatter)
    assert root.level == logging.DEBUG
    assert get_context() == {}


def test_configured_identity_reaches_other_threads() -> None:
    """Records emitted on a handler thread should still name the service."""
    configure_logging(level="info", json_output=True, service="sync-api")
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    stream = io.StringIO()
    handler.setStream(stream)

    def _emit() -> None:
        logging.getLogger("rpc_status.worker").info("handled")

    worker = threading.Thread(target=_emit)
    worker.start()
    worker.join()

    payload = json.loads(stream.getvalue().splitlines()[-1])
    assert payload["message"] == "handled"
    assert payload["service"] == "sync-api"
    assert "environment" not in payload


def test_build_converter_applies_settings_and_registry() -> None:
    """Startup wiring should honor the configured unwrap bound and registry."""
    sentinel = DomainError("user not found")
    registry = ErrorRegistry.from_table(
        [(sentinel, StatusCategory.NOT_FOUND, "ErrUserNotFound")]
    )
    settings = StatusSettings(
        logging={"level": "WARNING", "json_output": True},
        status={"max_unwrap_depth": 2},
    )

    converter = build_converter(settings, registry=registry)

    assert converter.registry is registry
    assert converter.stable_code_of(wrap(sentinel, "a")) == "ErrUserNotFound"
    assert converter.stable_code_of(wrap(wrap(wrap(sentinel, "a"), "b"), "c")) == ""
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)
