"""
One-shot suspension primitive.

A generator-protocol object that pauses exactly once. It is what
`iter(outcome)` returns, so inside a step-sequence

    value = yield from fetch_user(user_id)

surfaces the Outcome to the driver once and evaluates to whatever the
driver sends back.
"""

from __future__ import annotations

import typing
from collections.abc import Generator


class OneShot[Y, S](Generator[Y, S, S]):
    """
    Generator that yields its payload once, then completes.

    States: pending -> consumed.
    - First drive (`next` or `send`, whatever is sent): returns payload, consumes.
    - Any later `send(value)`: raises StopIteration(value), so the enclosing
      `yield from` evaluates to `value`. The payload is never re-emitted.
    - `close()`: consumes, completes immediately.
    - `throw(exc)`: re-raises `exc` unchanged.
    """

    __slots__ = ("_payload", "_consumed")

    def __init__(self, payload: Y, /) -> None:
        self._payload = payload
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def send(self, value: S, /) -> Y:
        if self._consumed:
            raise StopIteration(value)
        self._consumed = True
        return self._payload

    def throw(self, typ: typing.Any, val: typing.Any = None, tb: typing.Any = None, /) -> Y:
        # Generator declares throw() abstract; the mixin body re-raises
        return super().throw(typ, val, tb)

    def close(self) -> None:
        self._consumed = True

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "pending"
        return f"OneShot({self._payload!r}, {state})"


__all__ = ("OneShot",)
