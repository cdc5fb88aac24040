"""
Подъем значений в Outcome.

Bridges from exception-based and Optional-based code into Outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from .._helpers import describe
from ..outcome import Err, Ok, Outcome

logger = logging.getLogger(__name__)


def try_[T, **P](
    fn: Callable[P, T],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Outcome[T, Exception]:
    """
    Call `fn`, turning a raised exception into Err(exception).

    **When to use:** bridge between exception-based code and Outcome-based code.

    Example:
        import json

        parsed = try_(json.loads, raw).map_err(lambda e: ParseError(str(e)))

    NOTE: Catches Exception subclasses only. KeyboardInterrupt, SystemExit and
          asyncio.CancelledError still propagate.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as exc:
        logger.debug("Captured %r from %s", exc, describe(fn))
        return Err(exc)


async def try_async[T, **P](
    fn: Callable[P, Awaitable[T]],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Outcome[T, Exception]:
    """
    Await `fn(...)`, turning its settlement into an Outcome.

    **When to use:** async version of try_() for code that raises instead of
    returning Outcome (HTTP clients, drivers, third-party SDKs).

    Example:
        user = await try_async(client.get_user, user_id=42)

    NOTE: `fn` is a callable, not an awaitable: the computation starts
          inside try_async, so a failure while creating it is captured too.
    """
    try:
        return Ok(await fn(*args, **kwargs))
    except Exception as exc:
        logger.debug("Captured %r from %s", exc, describe(fn))
        return Err(exc)


def from_optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Outcome[T, E]:
    """
    Convert Optional to Outcome. None becomes Err(error()).

    **When to use:** dict lookups, cache checks, config reads.

    Example:
        user = from_optional(users.get(user_id), error=lambda: NotFound(user_id))

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return Err(error())
    return Ok(value)


__all__ = (
    "from_optional",
    "try_",
    "try_async",
)
