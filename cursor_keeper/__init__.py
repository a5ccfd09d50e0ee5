"""
cursor_keeper - Pipeline Cursor Persistence

Keeps the last processed position of a block pipeline so that, after a
restart, processing resumes from the right point instead of reprocessing or
skipping data.

Usage:
    from cursor_keeper import Provider, FileConfig, PointArg

    provider = Provider.initialize(FileConfig(path="pipeline.cursor"))

    # Source: where to resume
    start = provider.get_cursor()

    # Sink: after each processed block
    provider.set_cursor(PointArg(4492799, "f8084c61b6a238acec985b59310b6ecec49c0ab8"))

Architecture:
    Provider (cached State + debounce) → Storage → FileStorage | MemoryStorage | RedisStorage
"""

from cursor_keeper.point import PointArg
from cursor_keeper.config import (
    Config,
    FileConfig,
    MemoryConfig,
    RedisConfig,
    config_from_dict,
    load_config,
)
from cursor_keeper.storage import (
    CursorStorage,
    Storage,
    FileStorage,
    MemoryStorage,
    RedisStorage,
)
from cursor_keeper.provider import (
    Provider,
    State,
    Unknown,
    Invalid,
    AtPoint,
    DEFAULT_DEBOUNCE_SECONDS,
)
from cursor_keeper.utils import (
    get_logger,
    setup_file_logging,
    CursorStoreError,
    CursorNotFoundError,
    CursorParseError,
    StorageConnectionError,
    StorageIOError,
    ConfigError,
)

__version__ = "0.1.0"

__all__ = [
    # Point
    "PointArg",
    
    # Config
    "Config",
    "FileConfig",
    "MemoryConfig",
    "RedisConfig",
    "config_from_dict",
    "load_config",
    
    # Storage
    "CursorStorage",
    "Storage",
    "FileStorage",
    "MemoryStorage",
    "RedisStorage",
    
    # Provider
    "Provider",
    "State",
    "Unknown",
    "Invalid",
    "AtPoint",
    "DEFAULT_DEBOUNCE_SECONDS",
    
    # Utils
    "get_logger",
    "setup_file_logging",
    "CursorStoreError",
    "CursorNotFoundError",
    "CursorParseError",
    "StorageConnectionError",
    "StorageIOError",
    "ConfigError",
]
