"""
Decorator forms of handle() / handle_async().

    class Checkout:
        def __init__(self, repo: CartRepo) -> None:
            self.repo = repo

        @do
        def run(self, cart_id: int):
            cart = yield from self.repo.load(cart_id)
            return cart.total

    Checkout(repo).run(7)  # Outcome[Money, DbError]

`self` is bound the normal Python way, so methods need no receiver argument.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from functools import wraps

from .._types import AsyncStepSequence, StepSequence
from ..outcome import Outcome
from .handle import drive, drive_async


def do[**P, R](
    fn: Callable[P, StepSequence[R]],
) -> Callable[P, Outcome[R, typing.Any]]:
    """
    Turn a step-sequence generator function into a function returning Outcome.

    **When to use:** for named functions and methods. For one-off inline
    sequences, `handle(lambda: ...)` reads better.
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[R, typing.Any]:
        return drive(fn(*args, **kwargs))

    return wrapper


def do_async[**P](
    fn: Callable[P, AsyncStepSequence],
) -> Callable[P, Coroutine[typing.Any, typing.Any, Outcome[typing.Any, typing.Any]]]:
    """Async version of do(): decorated function returns a coroutine of Outcome."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[typing.Any, typing.Any]:
        return await drive_async(fn(*args, **kwargs))

    return wrapper


__all__ = ("do", "do_async")
