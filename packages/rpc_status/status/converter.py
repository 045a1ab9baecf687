"""Boundary conversion from domain errors to transport status errors.

Resolution order is fixed:

1. Rich errors (sentinel plus metadata), since they carry the most detail.
2. Plain sentinels found at the root of the cause chain.
3. Form errors (field violations), always an invalid argument.
4. Anything else is an internal error carrying the original message.

Every operation is a pure function of its input and the immutable registry.
"""

from __future__ import annotations

from functools import lru_cache

from packages.rpc_status.config import DEFAULT_MAX_UNWRAP_DEPTH

from .adapters import form_error_to_status, rich_error_to_status
from .causes import resolve_cause
from .defaults import default_registry
from .registry import ErrorRegistry
from .types import SUCCESS, ErrorInfo, StatusCategory, StatusError


class StatusConverter:
    """Classify errors against one registry."""

    def __init__(
        self,
        registry: ErrorRegistry,
        *,
        max_unwrap_depth: int = DEFAULT_MAX_UNWRAP_DEPTH,
    ) -> None:
        if max_unwrap_depth <= 0:
            raise ValueError("max_unwrap_depth must be positive")
        self._registry = registry
        self._max_depth = max_unwrap_depth

    @property
    def registry(self) -> ErrorRegistry:
        """Registry this converter classifies against."""
        return self._registry

    def convert(self, error: BaseException | None) -> StatusError | None:
        """Return the transport status for ``error``; ``None`` means success."""
        if error is None:
            return None

        status = rich_error_to_status(error, self._registry, max_depth=self._max_depth)
        if status is not None:
            return status

        status = self._sentinel_to_status(error)
        if status is not None:
            return status

        status = form_error_to_status(error, max_depth=self._max_depth)
        if status is not None:
            return status

        return StatusError(
            category=StatusCategory.INTERNAL, message=str(error), cause=error
        )

    def stable_code_of(self, error: BaseException | None) -> str:
        """Return the stable code of the root cause.

        ``"ok"`` for success, ``""`` when the root cause has no registered code.
        """
        if error is None:
            return SUCCESS
        code = self._registry.code_of(resolve_cause(error, max_depth=self._max_depth))
        return code or ""

    def category_name(self, error: BaseException | None) -> str:
        """Return the canonical name of the resolved category, ``"ok"`` for success."""
        status = self.convert(error)
        if status is None:
            return SUCCESS
        return status.category.value

    def _sentinel_to_status(self, error: BaseException) -> StatusError | None:
        """Classify ``error`` by the registered sentinel at its root."""
        entry = self._registry.entry_of(resolve_cause(error, max_depth=self._max_depth))
        if entry is None:
            return None
        details = () if not entry.code else (ErrorInfo(metadata={"code": entry.code}),)
        return StatusError(
            category=entry.category, message=str(error), details=details, cause=error
        )


@lru_cache(maxsize=1)
def default_converter() -> StatusConverter:
    """Return the process-wide converter over the built-in registry."""
    return StatusConverter(default_registry())


def to_status_error(error: BaseException | None) -> StatusError | None:
    """Convert ``error`` with the default converter."""
    return default_converter().convert(error)


def stable_code_of(error: BaseException | None) -> str:
    """Return the stable code of ``error`` under the default registry."""
    return default_converter().stable_code_of(error)


def category_name(error: BaseException | None) -> str:
    """Return the category name of ``error`` under the default registry."""
    return default_converter().category_name(error)
