"""Best-effort helpers for fan-out reads."""

from collections.abc import Awaitable
from typing import TypeVar

import logfire

T = TypeVar("T")


async def best_effort(operation: Awaitable[T], default: T, label: str, **context) -> T:
    """Await a sub-fetch, substituting ``default`` if it raises.

    Used where one category's failure must not blank the whole response.
    The failure is logged with the given context.

    Args:
        operation: Awaitable performing the read
        default: Value returned when the read fails
        label: Short name of the read for the log record
        **context: Extra structured attributes for the log record

    Returns:
        The read result, or ``default`` on failure
    """
    try:
        return await operation
    except Exception as e:
        logfire.warn(
            "Sub-fetch failed, using default",
            fetch=label,
            error=str(e),
            error_type=type(e).__name__,
            **context,
        )
        return default
