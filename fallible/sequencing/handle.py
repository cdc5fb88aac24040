"""
Sequencing protocol
===================

Drivers that run a step-sequence (a generator) and short-circuit on the
first failure:

    def checkout(cart_id: int) -> StepSequence[Receipt]:
        cart = yield from load_cart(cart_id)        # Outcome[Cart, DbError]
        total = yield from price(cart)              # Outcome[Money, PricingError]
        return Receipt(cart, total)

    handle(checkout, ...)  # Ok(Receipt) | Err(DbError) | Err(PricingError)

Pause points:
- `yield from outcome` (sync only): one-shot pause through OneShot
- `yield outcome`: plain pause, the only form async generators allow
- `yield done(value)`: finish the run with Ok(value)

Async generators cannot `return value`, so handle_async() step-sequences
finish with `yield done(value)` (falling off the end gives Ok(None)).
"""

from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import describe
from .._types import AsyncStepSequence, StepSequence
from ..interop import from_kungfu, is_kungfu_result
from ..outcome import Err, Ok, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Done[T]:
    """Completion marker: `yield done(value)` ends the run with Ok(value)."""

    value: T


def done[T](value: T) -> Done[T]:
    return Done(value)


type _Surfaced = Ok[typing.Any] | Err[typing.Any] | Done[typing.Any]


def _surface(item: object) -> _Surfaced:
    """Normalize whatever crossed a pause point."""
    match item:
        case Ok() | Err() | Done():
            return item
        case _ if is_kungfu_result(item):
            return from_kungfu(typing.cast(typing.Any, item))
        case _:
            # bare value: already unwrapped success
            return Ok(item)


def _bind[Self, G](
    args: tuple[Callable[[], G]] | tuple[Self, Callable[[Self], G]],
) -> G:
    match args:
        case (fn,):
            return fn()
        case (receiver, fn):
            return fn(receiver)
        case _:
            raise TypeError(f"expected (fn) or (receiver, fn), got {len(args)} arguments")


# ============================================================================
# Synchronous driver
# ============================================================================


def drive[R](steps: StepSequence[R]) -> Outcome[R, typing.Any]:
    """
    Run an already-created step-sequence generator to its Outcome.

    1. advance with the last unwrapped value (None at start)
    2. generator returned -> Ok(return value)
    3. paused on Err -> close generator, return that Err unchanged
    4. paused on Ok -> resume with its value, go to 1

    Raises TypeError when the step-sequence yields an awaitable: only
    drive_async() can settle it.
    """
    sent: typing.Any = None
    try:
        while True:
            try:
                item = steps.send(sent)
            except StopIteration as stop:
                return Ok(stop.value)

            if inspect.isawaitable(item):
                if inspect.iscoroutine(item):
                    item.close()
                raise TypeError(f"awaitable yielded to handle(): {item!r}; use handle_async")

            match _surface(item):
                case Err() as failed:
                    logger.debug("Step-sequence %s short-circuited: %r", describe(steps), failed)
                    return failed
                case Done(value):
                    logger.debug("Step-sequence %s finished early via done()", describe(steps))
                    return Ok(value)
                case Ok(value):
                    sent = value
    finally:
        # runs pending finally-blocks of an abandoned step-sequence
        steps.close()


@typing.overload
def handle[R](fn: Callable[[], StepSequence[R]], /) -> Outcome[R, typing.Any]: ...


@typing.overload
def handle[Self, R](
    receiver: Self,
    fn: Callable[[Self], StepSequence[R]],
    /,
) -> Outcome[R, typing.Any]: ...


def handle(*args: typing.Any) -> Outcome[typing.Any, typing.Any]:
    """
    Run a step-sequence, stopping at the first failure.

    Forms:
        handle(fn)            # fn() -> generator
        handle(receiver, fn)  # fn(receiver) -> generator, receiver is the context

    Example:
        def parse_header(header: list[int]):
            version = yield from parse_version(header)
            length = yield from parse_length(header)
            return (version, length)

        handle(lambda: parse_header([1, 2, 3]))  # Ok(("one", 2))

    An exception raised inside the step-sequence (e.g. an explicit
    .unwrap()) propagates unchanged. The only error of its own is a
    TypeError for a yielded awaitable.
    """
    return drive(_bind(args))


# ============================================================================
# Asynchronous driver
# ============================================================================


async def drive_async(steps: AsyncStepSequence) -> Outcome[typing.Any, typing.Any]:
    """
    Async twin of drive().

    A yielded awaitable (coroutine, Task, LazyCoroResult, ...) is awaited
    first and its settled value is what gets inspected.
    """
    sent: typing.Any = None
    try:
        while True:
            try:
                item = await steps.asend(sent)
            except StopAsyncIteration:
                return Ok(None)

            if inspect.isawaitable(item):
                item = await item

            match _surface(item):
                case Err() as failed:
                    logger.debug("Step-sequence %s short-circuited: %r", describe(steps), failed)
                    return failed
                case Done(value):
                    logger.debug("Step-sequence %s finished early via done()", describe(steps))
                    return Ok(value)
                case Ok(value):
                    sent = value
    finally:
        await steps.aclose()


@typing.overload
async def handle_async(
    fn: Callable[[], AsyncStepSequence], /
) -> Outcome[typing.Any, typing.Any]: ...


@typing.overload
async def handle_async[Self](
    receiver: Self,
    fn: Callable[[Self], AsyncStepSequence],
    /,
) -> Outcome[typing.Any, typing.Any]: ...


async def handle_async(*args: typing.Any) -> Outcome[typing.Any, typing.Any]:
    """
    Run an async step-sequence, stopping at the first failure.

    Example:
        async def load_profile(user_id: int):
            user = yield await fetch_user(user_id)   # await in the body
            avatar = yield fetch_avatar(user)        # or let the driver await it
            settings = yield parse_settings(user)    # already-settled Outcome
            yield done(Profile(user, avatar, settings))

        await handle_async(lambda: load_profile(42))

    Effects happen in textual order of the step-sequence: only one
    pause is ever outstanding.
    """
    return await drive_async(_bind(args))


__all__ = (
    "Done",
    "done",
    "drive",
    "drive_async",
    "handle",
    "handle_async",
)
