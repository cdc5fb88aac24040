"""
Outcome - success-or-failure value
==================================

Closed two-variant union:
- Ok[T]:  computation succeeded with `value`
- Err[E]: computation failed with `error`

Both variants are immutable. Every combinator returns a new Outcome
(or the receiver itself when it passes through unchanged).

Example:
    from fallible import Err, Ok, Outcome, failure, success

    def parse_port(raw: str) -> Outcome[int, str]:
        if not raw.isdigit():
            return failure(f"not a number: {raw}")
        return success(int(raw))

    match parse_port("8080").map(lambda p: p + 1):
        case Ok(port):
            print(port)
        case Err(reason):
            print(reason)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._errors import UnexpectedVariantError, UnwrapError
from .oneshot import OneShot


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant."""

    value: T

    def is_success(self) -> typing.Literal[True]:
        return True

    def is_failure(self) -> typing.Literal[False]:
        return False

    # Functor / monad operations

    def map[U](self, f: Callable[[T], U], /) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[typing.Any], typing.Any], /) -> Ok[T]:
        return self

    def and_then[U, F](self, f: Callable[[T], Outcome[U, F]], /) -> Outcome[U, F]:
        return f(self.value)

    # Recovery

    def or_(self, default: object, /) -> Ok[T]:
        return self

    def or_else(self, f: Callable[[typing.Any], typing.Any], /) -> Ok[T]:
        return self

    # Extraction

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> typing.NoReturn:
        raise UnwrapError(f"Tried to unwrap_err on value: {self.value}", self.value)

    def expect(self, message: str | Callable[[typing.Any], str], /) -> T:
        return self.value

    def unwrap_or(self, default: object, /) -> T:
        return self.value

    def unwrap_or_else(self, f: Callable[[typing.Any], typing.Any], /) -> T:
        return self.value

    def match[R1, R2](
        self,
        *,
        ok: Callable[[T], R1],
        err: Callable[[typing.Any], R2],
    ) -> R1:
        return ok(self.value)

    # Step-sequence protocol: `value = yield from outcome`

    def __iter__(self) -> OneShot[Ok[T], T]:
        return OneShot(self)


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure variant."""

    error: E

    def is_success(self) -> typing.Literal[False]:
        return False

    def is_failure(self) -> typing.Literal[True]:
        return True

    # Functor / monad operations

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F], /) -> Err[F]:
        return Err(f(self.error))

    def and_then(self, f: Callable[[typing.Any], typing.Any], /) -> Err[E]:
        return self

    # Recovery
    # NOTE: both eliminate the failure channel, result never fails

    def or_[D](self, default: D, /) -> Ok[D]:
        return Ok(default)

    def or_else[D](self, f: Callable[[E], D], /) -> Ok[D]:
        return Ok(f(self.error))

    # Extraction

    def unwrap(self) -> typing.NoReturn:
        raise UnwrapError(f"Tried to unwrap error: {self.error}", self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect(self, message: str | Callable[[E], str], /) -> typing.NoReturn:
        text = message(self.error) if callable(message) else message
        raise UnwrapError(text, self.error)

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    def unwrap_or_else[D](self, f: Callable[[E], D], /) -> D:
        return f(self.error)

    def match[R1, R2](
        self,
        *,
        ok: Callable[[typing.Any], R1],
        err: Callable[[E], R2],
    ) -> R2:
        return err(self.error)

    # Step-sequence protocol: `yield from failure(...)` aborts the run

    def __iter__(self) -> OneShot[Err[E], typing.Never]:
        return OneShot(self)


# Outcome = Ok | Err, exhaustive with `match`
type Outcome[T, E] = Ok[T] | Err[E]


# ============================================================================
# Constructors
# ============================================================================


def success[T](value: T) -> Ok[T]:
    """Wrap `value` into the success variant."""
    return Ok(value)


def failure[E](error: E) -> Err[E]:
    """Wrap `error` into the failure variant. Dual of success()."""
    return Err(error)


# ============================================================================
# Assertions
# ============================================================================


def assert_success[T, E](outcome: Outcome[T, E]) -> Ok[T]:
    """
    Return `outcome` narrowed to Ok, raise UnexpectedVariantError on Err.

    **When to use:** the caller already knows the variant by other means
    (a prior check, a test). Not a recovery path.
    """
    match outcome:
        case Ok():
            return outcome
        case Err(error):
            raise UnexpectedVariantError(f"Expected Ok, got Err: {error}", error)


def assert_failure[T, E](outcome: Outcome[T, E]) -> Err[E]:
    """Return `outcome` narrowed to Err, raise UnexpectedVariantError on Ok."""
    match outcome:
        case Err():
            return outcome
        case Ok(value):
            raise UnexpectedVariantError(f"Expected Err, got Ok: {value}", value)


__all__ = (
    "Err",
    "Ok",
    "Outcome",
    "assert_failure",
    "assert_success",
    "failure",
    "success",
)
