"""
Point-free, curried forms of the Outcome combinators.

Each function takes its configuration first and returns a one-argument
function of the Outcome, for use with any left-to-right `pipe` helper:

    from fallible import pointfree as P

    pipe(
        parse_port(raw),
        P.map(lambda p: p + 1),
        P.and_then(check_range),
        P.unwrap_or(8080),
    )

NOTE: names shadow builtins (`map`) on purpose; import the module, not its names.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._types import Mapper, NoError
from .outcome import Err, Ok, Outcome


def is_success[T](outcome: Outcome[T, typing.Any], /) -> typing.TypeGuard[Ok[T]]:
    """
    Narrowing predicate: inside `if P.is_success(o):` the checker sees `o` as Ok.

    NOTE: a method cannot narrow its own receiver, so `o.is_success()` only
          answers the question; this form (or `match`) narrows.
    """
    return outcome.is_success()


def is_failure[E](outcome: Outcome[typing.Any, E], /) -> typing.TypeGuard[Err[E]]:
    """Narrowing predicate, dual of is_success()."""
    return outcome.is_failure()


def map[T, U](f: Mapper[T, U], /) -> Callable[[Outcome[T, typing.Any]], Outcome[U, typing.Any]]:
    """Ok(v) -> Ok(f(v)); Err passes through, `f` not called."""
    return lambda outcome: outcome.map(f)


def map_err[E, F](f: Mapper[E, F], /) -> Callable[[Outcome[typing.Any, E]], Outcome[typing.Any, F]]:
    """Err(e) -> Err(f(e)); Ok passes through."""
    return lambda outcome: outcome.map_err(f)


def and_then[T, U, F](
    f: Callable[[T], Outcome[U, F]],
    /,
) -> Callable[[Outcome[T, typing.Any]], Outcome[U, typing.Any]]:
    """Ok(v) -> f(v); Err passes through."""
    return lambda outcome: outcome.and_then(f)


def or_[D](default: D, /) -> Callable[[Outcome[typing.Any, typing.Any]], Outcome[typing.Any, NoError]]:
    """Err -> Ok(default); Ok passes through."""
    return lambda outcome: outcome.or_(default)


def or_else[E, D](f: Mapper[E, D], /) -> Callable[[Outcome[typing.Any, E]], Outcome[typing.Any, NoError]]:
    """Err(e) -> Ok(f(e)); Ok passes through."""
    return lambda outcome: outcome.or_else(f)


def unwrap[T](outcome: Outcome[T, typing.Any], /) -> T:
    """Already point-free: Ok(v) -> v, Err raises UnwrapError."""
    return outcome.unwrap()


def unwrap_err[E](outcome: Outcome[typing.Any, E], /) -> E:
    return outcome.unwrap_err()


def expect(message: str | Callable[[typing.Any], str], /) -> Callable[[Outcome[typing.Any, typing.Any]], typing.Any]:
    return lambda outcome: outcome.expect(message)


def unwrap_or[D](default: D, /) -> Callable[[Outcome[typing.Any, typing.Any]], typing.Any]:
    return lambda outcome: outcome.unwrap_or(default)


def unwrap_or_else[E, D](f: Callable[[E], D], /) -> Callable[[Outcome[typing.Any, E]], typing.Any]:
    return lambda outcome: outcome.unwrap_or_else(f)


def match[T, E, R1, R2](
    *,
    ok: Callable[[T], R1],
    err: Callable[[E], R2],
) -> Callable[[Outcome[T, E]], R1 | R2]:
    """Universal eliminator: exactly one handler runs."""

    def run(outcome: Outcome[T, E]) -> R1 | R2:
        match outcome:
            case Ok(value):
                return ok(value)
            case Err(error):
                return err(error)
            case _ as unreachable:
                typing.assert_never(unreachable)

    return run


__all__ = (
    "and_then",
    "expect",
    "is_failure",
    "is_success",
    "map",
    "map_err",
    "match",
    "or_",
    "or_else",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_else",
)
