"""Immutable sentinel-to-status registry.

The registry is built once at startup, validated eagerly, and then only read.
Lookups are keyed by sentinel identity and never raise: an error value that
cannot be used as a key is reported as unregistered.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from packages.rpc_status.logging import fields, get_logger, log_context

from .types import StatusCategory, StatusEntry

_LOGGER = get_logger(__name__)

RegistryRow = tuple[BaseException, StatusCategory, str | None]


class ErrorRegistry:
    """Read-only map from sentinel error identity to ``StatusEntry``."""

    def __init__(self, entries: Mapping[BaseException, StatusEntry]) -> None:
        for sentinel, entry in entries.items():
            _validate_entry(sentinel, entry)
        self._entries: Mapping[BaseException, StatusEntry] = MappingProxyType(
            dict(entries)
        )

    @classmethod
    def from_table(cls, rows: Iterable[RegistryRow]) -> "ErrorRegistry":
        """Build a registry from ``(sentinel, category, code)`` rows.

        Raises ``ValueError`` when a sentinel is registered twice or cannot be
        used as an identity key.
        """
        entries: dict[BaseException, StatusEntry] = {}
        for sentinel, category, code in rows:
            _validate_sentinel(sentinel)
            if sentinel in entries:
                raise ValueError(f"sentinel registered twice: {sentinel!r}")
            entries[sentinel] = StatusEntry(category=StatusCategory(category), code=code)
        return cls(entries)

    def entry_of(self, error: object) -> StatusEntry | None:
        """Return the entry registered for ``error``, or ``None``."""
        try:
            return self._entries.get(error)  # type: ignore[call-overload]
        except Exception as exc:  # noqa: BLE001
            with log_context(
                {
                    fields.EVENT: fields.LOOKUP_FAULT_EVENT,
                    fields.EXCEPTION_TYPE: type(error).__name__,
                }
            ):
                _LOGGER.debug("Registry lookup fault contained: %s", type(exc).__name__)
            return None

    def category_of(self, error: object) -> StatusCategory | None:
        """Return the registered category for ``error``, or ``None``."""
        entry = self.entry_of(error)
        return None if entry is None else entry.category

    def code_of(self, error: object) -> str | None:
        """Return the registered stable code for ``error``, or ``None``."""
        entry = self.entry_of(error)
        return None if entry is None else entry.code

    def sentinels(self) -> tuple[BaseException, ...]:
        """Return every registered sentinel in registration order."""
        return tuple(self._entries)

    def __contains__(self, error: object) -> bool:
        return self.entry_of(error) is not None

    def __len__(self) -> int:
        return len(self._entries)


def _validate_entry(sentinel: object, entry: object) -> None:
    """Reject entries that could not be looked up by identity later."""
    _validate_sentinel(sentinel)
    if not isinstance(entry, StatusEntry):
        raise ValueError(f"registry entry must be a StatusEntry: {entry!r}")


def _validate_sentinel(sentinel: object) -> None:
    """Require an exception instance that is hashable."""
    if not isinstance(sentinel, BaseException):
        raise ValueError(f"registry key must be an exception instance: {sentinel!r}")
    try:
        hash(sentinel)
    except TypeError:
        raise ValueError(f"registry key is not hashable: {sentinel!r}") from None
