"""
Lift helpers: from raising / Optional code into Outcome.

    from fallible import lift as L

    parsed = L.try_(json.loads, raw)
    user = await L.try_async(client.get_user, 42)
    cached = L.from_optional(cache.get(key), error=lambda: CacheMiss(key))

    @L.safe
    def read(path: Path) -> str: ...
"""

from __future__ import annotations

from .call import safe, safe_async
from .up import from_optional, try_, try_async

__all__ = (
    # Up
    "from_optional",
    "try_",
    "try_async",
    # Decorators
    "safe",
    "safe_async",
)
