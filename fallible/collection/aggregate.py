"""Aggregation of a fixed tuple of Outcomes.

Heterogeneous: every position keeps its own value and error type."""

from __future__ import annotations

import typing

from ..outcome import Err, Ok, Outcome


@typing.overload
def all_() -> Ok[tuple[()]]: ...
@typing.overload
def all_[T1, E1](o1: Outcome[T1, E1], /) -> Outcome[tuple[T1], E1]: ...
@typing.overload
def all_[T1, E1, T2, E2](
    o1: Outcome[T1, E1],
    o2: Outcome[T2, E2],
    /,
) -> Outcome[tuple[T1, T2], E1 | E2]: ...
@typing.overload
def all_[T1, E1, T2, E2, T3, E3](
    o1: Outcome[T1, E1],
    o2: Outcome[T2, E2],
    o3: Outcome[T3, E3],
    /,
) -> Outcome[tuple[T1, T2, T3], E1 | E2 | E3]: ...
@typing.overload
def all_[T1, E1, T2, E2, T3, E3, T4, E4](
    o1: Outcome[T1, E1],
    o2: Outcome[T2, E2],
    o3: Outcome[T3, E3],
    o4: Outcome[T4, E4],
    /,
) -> Outcome[tuple[T1, T2, T3, T4], E1 | E2 | E3 | E4]: ...
@typing.overload
def all_(*outcomes: Outcome[typing.Any, typing.Any]) -> Outcome[tuple[typing.Any, ...], typing.Any]: ...


def all_(*outcomes: Outcome[typing.Any, typing.Any]) -> Outcome[tuple[typing.Any, ...], typing.Any]:
    """
    Combine Outcomes positionally.

    - every element Ok -> Ok(tuple of values), aligned with the input
    - otherwise -> the lowest-index Err, returned as-is; later elements are
      not inspected
    - no elements -> Ok(())

    Example:
        all_(success(1), success("2"))            # Ok((1, "2"))
        all_(success(1), failure(2), failure(3))  # Err(2)
    """
    values: list[typing.Any] = []
    for outcome in outcomes:
        match outcome:
            case Ok(value):
                values.append(value)
            case Err():
                return outcome
    return Ok(tuple(values))


__all__ = ("all_",)
