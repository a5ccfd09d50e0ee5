"""
Read/write contract shared by every cursor storage backend.
"""

from typing import Protocol, runtime_checkable

from cursor_keeper.point import PointArg


@runtime_checkable
class CursorStorage(Protocol):
    """A place where a single cursor point is persisted."""

    def read_cursor(self) -> PointArg:
        """Return the stored point or raise a CursorStoreError."""
        ...

    def write_cursor(self, point: PointArg) -> None:
        """Persist the point or raise a CursorStoreError."""
        ...
