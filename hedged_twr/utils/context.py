# hedged_twr/utils/context.py
"""
Caller context for log correlation.

The calculator itself is stateless; a calling service can tag every log
line produced while it runs a batch of calculations with a correlation ID.

Uses contextvars so the value is isolated per thread and per asyncio task,
and the scope restores whatever ID was active before it, so scopes nest.

Usage:
    from hedged_twr.utils.context import correlation_scope

    with correlation_scope("report-2024-q4"):
        HedgedReturnCalculator.calculate(periods, 365)   # logs carry the ID
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """
    Get the correlation ID of the enclosing scope.

    Returns:
        The correlation ID, or None outside any scope.
    """
    return _correlation_id_var.get()


@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """
    Tag log records emitted inside the block with correlation_id.

    Args:
        correlation_id: Identifier of the calling request or job
    """
    token = _correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id_var.reset(token)
