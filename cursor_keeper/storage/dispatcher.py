"""
Storage dispatcher selecting exactly one backend from configuration.
"""

from cursor_keeper.config import Config, FileConfig, MemoryConfig, RedisConfig
from cursor_keeper.point import PointArg
from cursor_keeper.storage.base import CursorStorage
from cursor_keeper.storage.file_storage import FileStorage
from cursor_keeper.storage.memory_storage import MemoryStorage
from cursor_keeper.storage.redis_storage import RedisStorage
from cursor_keeper.utils.exceptions import ConfigError


class Storage:
    """
    Wraps the single backend chosen at construction.
    
    The backend set is closed: File, Memory and Redis. Calls are forwarded
    unchanged so nothing backend-specific leaks to the provider.
    """

    def __init__(self, backend: CursorStorage):
        self._backend = backend

    @classmethod
    def from_config(cls, config: Config) -> "Storage":
        """
        Build the storage for a config variant.

        Raises:
            ConfigError: If the config is not one of the known variants
        """
        if isinstance(config, FileConfig):
            return cls(FileStorage(config))
        if isinstance(config, MemoryConfig):
            return cls(MemoryStorage(config))
        if isinstance(config, RedisConfig):
            return cls(RedisStorage(config))
        raise ConfigError(f"Unsupported cursor config: {type(config).__name__}")

    @property
    def backend(self) -> CursorStorage:
        return self._backend

    def read_cursor(self) -> PointArg:
        return self._backend.read_cursor()

    def write_cursor(self, point: PointArg) -> None:
        self._backend.write_cursor(point)
