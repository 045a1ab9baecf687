"""Cause-chain traversal for wrapped errors.

One unwrap step prefers an explicit ``unwrap()`` method and falls back to the
``__cause__`` set by ``raise ... from ...``. Implicit ``__context__`` is not a
wrap relationship and is never followed. An ``unwrap()`` returning several
errors ends the chain, since there is no single cause to follow.
"""

from __future__ import annotations

from typing import Iterator

from packages.rpc_status.config import DEFAULT_MAX_UNWRAP_DEPTH
from packages.rpc_status.logging import fields, get_logger, log_context

_LOGGER = get_logger(__name__)


def unwrap_once(error: BaseException) -> BaseException | None:
    """Return the error directly wrapped by ``error``, if there is exactly one.

    A foreign ``unwrap`` that cannot be called without arguments, or that
    raises, is treated as the end of the chain.
    """
    try:
        unwrap = getattr(error, "unwrap", None)
        if callable(unwrap):
            cause = unwrap()
            return cause if isinstance(cause, BaseException) else None
        cause = getattr(error, "__cause__", None)
    except Exception as exc:  # noqa: BLE001
        with log_context(
            {
                fields.EVENT: fields.UNWRAP_FAULT_EVENT,
                fields.EXCEPTION_TYPE: type(error).__name__,
            }
        ):
            _LOGGER.debug("Unwrap fault contained: %s", type(exc).__name__)
        return None
    return cause if isinstance(cause, BaseException) else None


def iter_chain(
    error: BaseException | None, *, max_depth: int = DEFAULT_MAX_UNWRAP_DEPTH
) -> Iterator[BaseException]:
    """Yield ``error`` and each wrapped cause below it, outermost first.

    At most ``max_depth`` unwrap steps are taken, so cyclic chains stop.
    """
    current = error
    steps = 0
    while current is not None:
        yield current
        following = unwrap_once(current)
        if following is not None and steps >= max_depth:
            with log_context(
                {fields.EVENT: fields.UNWRAP_LIMIT_EVENT, fields.MAX_DEPTH: max_depth}
            ):
                _LOGGER.debug("Cause chain exceeded unwrap limit")
            return
        current = following
        steps += 1


def resolve_cause(
    error: BaseException | None, *, max_depth: int = DEFAULT_MAX_UNWRAP_DEPTH
) -> BaseException | None:
    """Return the root cause of ``error``; ``None`` means success."""
    root = None
    for root in iter_chain(error, max_depth=max_depth):
        pass
    return root
