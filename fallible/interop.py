"""
Bridge between fallible Outcomes and kungfu Results.

kungfu is the Result/LazyCoroResult library most pipeline code around us
is written against. These conversions let both live in the same codebase,
and let step-sequences yield kungfu values directly:

    @do_async
    async def load(user_id: int):
        user = yield fetch_user(user_id)   # LazyCoroResult[User, APIError]
        yield done(user.name)
"""

from __future__ import annotations

import typing

import kungfu
from kungfu import LazyCoroResult

from .outcome import Err, Ok, Outcome


def from_kungfu[T, E](result: kungfu.Result[T, E]) -> Outcome[T, E]:
    """Convert kungfu Ok/Error into Ok/Err."""
    match result:
        case kungfu.Ok(value):
            return Ok(value)
        case kungfu.Error(error):
            return Err(error)
        case _ as unreachable:
            raise TypeError(f"Not a kungfu Result: {unreachable!r}")


def to_kungfu[T, E](outcome: Outcome[T, E]) -> kungfu.Result[T, E]:
    """Convert Ok/Err into kungfu Ok/Error."""
    match outcome:
        case Ok(value):
            return kungfu.Ok(value)
        case Err(error):
            return kungfu.Error(error)
        case _ as unreachable:
            typing.assert_never(unreachable)


def is_kungfu_result(value: object) -> bool:
    return isinstance(value, (kungfu.Ok, kungfu.Error))


async def from_lazy_coro_result[T, E](lazy: LazyCoroResult[T, E]) -> Outcome[T, E]:
    """
    Await a LazyCoroResult and convert its settled Result.

    NOTE: this is where the lazy computation actually runs.
    """
    return from_kungfu(await lazy)


def to_lazy_coro_result[T, E](outcome: Outcome[T, E]) -> LazyCoroResult[T, E]:
    """
    Lift an already-computed Outcome into a LazyCoroResult.

    NOTE: not lazy in any useful sense, the Outcome is already computed.
    """
    result = to_kungfu(outcome)

    async def run() -> kungfu.Result[T, E]:
        return result

    return LazyCoroResult(run)


__all__ = (
    "from_kungfu",
    "from_lazy_coro_result",
    "is_kungfu_result",
    "to_kungfu",
    "to_lazy_coro_result",
)
