"""
Utility modules for cursor_keeper.
"""

from cursor_keeper.utils.logging_config import get_logger, setup_file_logging
from cursor_keeper.utils.exceptions import (
    CursorStoreError,
    CursorNotFoundError,
    CursorParseError,
    StorageConnectionError,
    StorageIOError,
    ConfigError,
)
from cursor_keeper.utils.rwlock import ReadWriteLock

__all__ = [
    "get_logger",
    "setup_file_logging",
    "CursorStoreError",
    "CursorNotFoundError",
    "CursorParseError",
    "StorageConnectionError",
    "StorageIOError",
    "ConfigError",
    "ReadWriteLock",
]
