"""
Core type definitions for fallible.

Алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncGenerator, Callable, Generator

# ============================================================================
# Type aliases
# ============================================================================

# Mapper = function transforming one payload into another
type Mapper[A, B] = Callable[[A], B]

# NoError = type representing "never fails" semantic
# NOTE: Never (bottom type) instead of None: an error that cannot be created.
type NoError = typing.Never

# ============================================================================
# Step-sequences
# ============================================================================

# StepSequence = generator driven by handle(); yields Outcomes, returns R
type StepSequence[R] = Generator[typing.Any, typing.Any, R]

# AsyncStepSequence = async generator driven by handle_async()
# NOTE: async generators cannot `return value`, completion is `yield done(value)`.
type AsyncStepSequence = AsyncGenerator[typing.Any, typing.Any]

__all__ = (
    "AsyncStepSequence",
    "Mapper",
    "NoError",
    "StepSequence",
)
