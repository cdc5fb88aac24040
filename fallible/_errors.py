from __future__ import annotations


class OutcomeError(Exception):
    """Programmer error on an Outcome: the wrong variant was assumed."""

    payload: object

    def __init__(self, message: str, payload: object) -> None:
        self.payload = payload
        super().__init__(message)


class UnwrapError(OutcomeError):
    """unwrap/unwrap_err/expect was called on the wrong variant."""


class UnexpectedVariantError(OutcomeError):
    """assert_success/assert_failure found the other variant."""


__all__ = ("OutcomeError", "UnexpectedVariantError", "UnwrapError")
