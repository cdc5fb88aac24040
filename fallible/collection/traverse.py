"""Traverse / sequence

Homogeneous, list-producing counterparts of all_()."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..outcome import Err, Ok, Outcome


def traverse[A, T, E](
    items: Iterable[A],
    handler: Callable[[A], Outcome[T, E]],
) -> Outcome[list[T], E]:
    """
    Map every item through `handler`, collect values, stop at the first Err.

    Items after the failing one are neither consumed from `items` nor passed
    to `handler`.
    """
    values: list[T] = []
    for item in items:
        match handler(item):
            case Ok(value):
                values.append(value)
            case Err() as failed:
                return failed
    return Ok(values)


def sequence[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """
    Flip structure: [Outcome[T]] -> Outcome[[T]].

    Implemented as traverse(id).
    """
    return traverse(outcomes, lambda o: o)


__all__ = ("sequence", "traverse")
