"""
Cursor storage backends.
"""

from cursor_keeper.storage.base import CursorStorage
from cursor_keeper.storage.file_storage import FileStorage
from cursor_keeper.storage.memory_storage import MemoryStorage
from cursor_keeper.storage.redis_storage import RedisStorage
from cursor_keeper.storage.dispatcher import Storage

__all__ = [
    "CursorStorage",
    "FileStorage",
    "MemoryStorage",
    "RedisStorage",
    "Storage",
]
