"""Internal helpers for fallible.

Not part of the public API."""

from __future__ import annotations

import typing


def describe(fn: typing.Any) -> str:
    """Human-readable name of a callable or generator for log records."""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


__all__ = ("describe",)
