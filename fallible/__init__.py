"""
Fallible computations without exceptions.

Core building blocks:
- Outcome (Ok | Err) with a total combinator algebra
- try_/try_async bridges from exception-raising code
- handle/handle_async: straight-line generator code where the first
  failure short-circuits the rest

Architecture:
- Methods on Ok/Err for fluent chaining
- Curried forms in `pointfree` for pipelines
- One-shot suspension (OneShot) makes `value = yield from outcome` work
"""

import logging

# Core types
from ._types import AsyncStepSequence, Mapper, NoError, StepSequence
from .outcome import Err, Ok, Outcome, assert_failure, assert_success, failure, success

# Suspension primitive
from .oneshot import OneShot

# Point-free combinators (namespace import)
from . import pointfree

# Collection operations
from .collection import all_, sequence, traverse

# Lift helpers
from . import lift
from .lift import from_optional, safe, safe_async, try_, try_async

# Sequencing protocol
from .sequencing import Done, do, do_async, done, drive, drive_async, handle, handle_async

# kungfu interop
from .interop import from_kungfu, from_lazy_coro_result, to_kungfu, to_lazy_coro_result

# Errors
from ._errors import OutcomeError, UnexpectedVariantError, UnwrapError

# Stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncStepSequence",
    "Mapper",
    "NoError",
    "StepSequence",
    # Outcome
    "Err",
    "Ok",
    "Outcome",
    "assert_failure",
    "assert_success",
    "failure",
    "success",
    # Suspension
    "OneShot",
    # Point-free namespace
    "pointfree",
    # Collection
    "all_",
    "sequence",
    "traverse",
    # Lift
    "lift",
    "from_optional",
    "safe",
    "safe_async",
    "try_",
    "try_async",
    # Sequencing
    "Done",
    "do",
    "do_async",
    "done",
    "drive",
    "drive_async",
    "handle",
    "handle_async",
    # Interop
    "from_kungfu",
    "from_lazy_coro_result",
    "to_kungfu",
    "to_lazy_coro_result",
    # Errors
    "OutcomeError",
    "UnexpectedVariantError",
    "UnwrapError",
)
