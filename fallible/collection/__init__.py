from .aggregate import all_
from .traverse import sequence, traverse

__all__ = (
    "all_",
    "sequence",
    "traverse",
)
