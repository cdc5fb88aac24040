from .do import do, do_async
from .handle import Done, done, drive, drive_async, handle, handle_async

__all__ = (
    "Done",
    "do",
    "do_async",
    "done",
    "drive",
    "drive_async",
    "handle",
    "handle_async",
)
