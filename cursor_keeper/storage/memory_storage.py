"""
Ephemeral storage for tests and pipelines that never resume.
"""

from cursor_keeper.config import MemoryConfig
from cursor_keeper.point import PointArg


class MemoryStorage:
    """Always reads back the point it was built with. Writes are discarded."""

    def __init__(self, config: MemoryConfig):
        self._point = config.point

    def read_cursor(self) -> PointArg:
        return self._point

    def write_cursor(self, point: PointArg) -> None:
        # Nothing is persisted
        pass
