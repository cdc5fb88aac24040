"""Shared helpers for fallible tests."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable
from functools import reduce


def pipe(value: typing.Any, *fns: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """Left-to-right application, the composition helper point-free forms are made for."""
    return reduce(lambda acc, fn: fn(acc), fns, value)


async def settle[T](value: T, delay: float = 0.0) -> T:
    """Pending computation that settles to `value` after `delay` seconds."""
    await asyncio.sleep(delay)
    return value
