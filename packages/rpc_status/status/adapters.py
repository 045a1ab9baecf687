"""Shape-specific adapters for rich and form domain errors.

Each adapter returns ``None`` when it does not apply, letting the converter
fall through to the next stage.
"""

from __future__ import annotations

from packages.rpc_status.config import DEFAULT_MAX_UNWRAP_DEPTH
from packages.rpc_status.errors import ErrorKind, FormError, RichError, kind_of

from .causes import iter_chain
from .registry import ErrorRegistry
from .types import BadRequest, ErrorInfo, FieldViolation, StatusCategory, StatusError


def find_tagged(
    error: BaseException, kind: ErrorKind, *, max_depth: int = DEFAULT_MAX_UNWRAP_DEPTH
) -> BaseException | None:
    """Return the outermost link in the cause chain tagged with ``kind``."""
    for link in iter_chain(error, max_depth=max_depth):
        if kind_of(link) is kind:
            return link
    return None


def rich_error_to_status(
    error: BaseException,
    registry: ErrorRegistry,
    *,
    max_depth: int = DEFAULT_MAX_UNWRAP_DEPTH,
) -> StatusError | None:
    """Classify a rich error through its sentinel and merge its metadata.

    Caller metadata is applied after the registered code, so a caller-supplied
    ``code`` key replaces it.
    """
    rich = find_tagged(error, ErrorKind.RICH, max_depth=max_depth)
    if not isinstance(rich, RichError):
        return None

    entry = registry.entry_of(rich.sentinel)
    if entry is None:
        return None

    metadata = {"code": entry.code or ""}
    metadata.update(rich.metadata)
    return StatusError(
        category=entry.category,
        message=str(error),
        details=(ErrorInfo(metadata=metadata),),
        cause=error,
    )


def form_error_to_status(
    error: BaseException, *, max_depth: int = DEFAULT_MAX_UNWRAP_DEPTH
) -> StatusError | None:
    """Classify form violations as an invalid argument, preserving order."""
    form = find_tagged(error, ErrorKind.FORM, max_depth=max_depth)
    if not isinstance(form, FormError):
        return None

    details: tuple[BadRequest, ...] = ()
    if form.violations:
        details = (
            BadRequest(
                field_violations=tuple(
                    FieldViolation(field=item.field, description=item.description)
                    for item in form.violations
                )
            ),
        )
    return StatusError(
        category=StatusCategory.INVALID_ARGUMENT,
        message=str(error),
        details=details,
        cause=error,
    )
