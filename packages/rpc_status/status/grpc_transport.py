"""gRPC bridge for converted status errors.

Maps categories onto ``grpc.StatusCode`` and aborts servicer contexts. The
stable code travels as trailing metadata; richer detail serialization stays
with the transport.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import grpc
import grpc.aio

from packages.rpc_status.logging import fields, get_logger, log_context

from .converter import StatusConverter, default_converter
from .types import StatusCategory, StatusError

_LOGGER = get_logger(__name__)

ERROR_CODE_METADATA_KEY = "error-code"

GRPC_STATUS_CODES: Mapping[StatusCategory, grpc.StatusCode] = MappingProxyType(
    {
        StatusCategory.INVALID_ARGUMENT: grpc.StatusCode.INVALID_ARGUMENT,
        StatusCategory.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
        StatusCategory.ALREADY_EXISTS: grpc.StatusCode.ALREADY_EXISTS,
        StatusCategory.FAILED_PRECONDITION: grpc.StatusCode.FAILED_PRECONDITION,
        StatusCategory.UNIMPLEMENTED: grpc.StatusCode.UNIMPLEMENTED,
        StatusCategory.UNAUTHENTICATED: grpc.StatusCode.UNAUTHENTICATED,
        StatusCategory.PERMISSION_DENIED: grpc.StatusCode.PERMISSION_DENIED,
        StatusCategory.INTERNAL: grpc.StatusCode.INTERNAL,
        StatusCategory.CANCELED: grpc.StatusCode.CANCELLED,
    }
)


def grpc_code_of(category: StatusCategory) -> grpc.StatusCode:
    """Return the gRPC status code for one category."""
    return GRPC_STATUS_CODES[category]


def status_trailing_metadata(status: StatusError) -> tuple[tuple[str, str], ...]:
    """Return trailing metadata exposing the stable code, when there is one."""
    if not status.code:
        return ()
    return ((ERROR_CODE_METADATA_KEY, status.code),)


def _prepare_abort(
    error: BaseException | None, converter: StatusConverter | None
) -> StatusError | None:
    """Convert ``error`` and log the abort it will cause."""
    status = (converter or default_converter()).convert(error)
    if status is None:
        return None

    level = logging.WARNING
    if status.category is StatusCategory.INTERNAL:
        level = logging.ERROR
    with log_context(
        {
            fields.EVENT: fields.STATUS_ABORT_EVENT,
            fields.ERROR_CATEGORY: status.category.value,
            fields.ERROR_CODE: status.code or None,
            fields.EXCEPTION_TYPE: type(error).__name__,
        }
    ):
        _LOGGER.log(level, "Aborting RPC: %s", status.message)
    return status


def abort_with_status(
    *,
    context: grpc.ServicerContext,
    error: BaseException | None,
    converter: StatusConverter | None = None,
) -> None:
    """Abort a synchronous RPC with the status converted from ``error``.

    Returns without touching ``context`` when ``error`` is ``None``. Servicers
    running on ``grpc.aio`` use ``abort_with_status_async`` instead.
    """
    status = _prepare_abort(error, converter)
    if status is None:
        return
    metadata = status_trailing_metadata(status)
    if metadata:
        context.set_trailing_metadata(metadata)
    context.abort(grpc_code_of(status.category), status.message)


async def abort_with_status_async(
    *,
    context: grpc.aio.ServicerContext,
    error: BaseException | None,
    converter: StatusConverter | None = None,
) -> None:
    """Abort a ``grpc.aio`` RPC with the status converted from ``error``."""
    status = _prepare_abort(error, converter)
    if status is None:
        return
    metadata = status_trailing_metadata(status)
    if metadata:
        context.set_trailing_metadata(metadata)
    await context.abort(grpc_code_of(status.category), status.message)
