"""
Decorators that lift exception-raising functions into Outcome-returning ones.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine
from functools import wraps

from ..outcome import Outcome
from .up import try_, try_async


def safe[T, **P](fn: Callable[P, T]) -> Callable[P, Outcome[T, Exception]]:
    """
    Decorator: call through try_(), so the function returns Outcome instead of raising.

    Example:
        @safe
        def read_config(path: Path) -> dict:
            return tomllib.loads(path.read_text())

        read_config(Path("missing.toml"))  # Err(FileNotFoundError(...))
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception]:
        return try_(fn, *args, **kwargs)

    return wrapper


def safe_async[T, **P](
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Coroutine[typing.Any, typing.Any, Outcome[T, Exception]]]:
    """Async version of safe()."""

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception]:
        return await try_async(fn, *args, **kwargs)

    return wrapper


__all__ = ("safe", "safe_async")
