"""
Redis-backed cursor storage.

The cursor lives under a single configured key as the JSON form of the
point. A connection pool is built per call; cursor writes are infrequent
compared to block throughput, so nothing is kept open between calls.
"""

import redis

from cursor_keeper.config import RedisConfig
from cursor_keeper.point import PointArg
from cursor_keeper.utils.exceptions import (
    CursorNotFoundError,
    CursorParseError,
    StorageConnectionError,
)
from cursor_keeper.utils.logging_config import get_logger

logger = get_logger("redis_storage")


class RedisStorage:
    """Persists the cursor as a JSON string under one Redis key."""

    def __init__(self, config: RedisConfig):
        self._url = config.url
        self._key = config.key

    @property
    def key(self) -> str:
        return self._key

    @property
    def location(self) -> str:
        return f"{self._url}/{self._key}"

    def get_pool(self) -> redis.ConnectionPool:
        """
        Build a connection pool for the configured URL.

        Raises:
            StorageConnectionError: If the URL is invalid
        """
        try:
            return redis.ConnectionPool.from_url(self._url)
        except ValueError as e:
            raise StorageConnectionError(f"Invalid Redis URL: {e}", location=self.location)

    def read_cursor(self) -> PointArg:
        """
        Fetch and decode the cursor stored under the key.

        Raises:
            CursorNotFoundError: If the key is absent
            CursorParseError: If the payload is not a JSON point
            StorageConnectionError: On pool or connection failure
        """
        pool = self.get_pool()
        try:
            data = redis.Redis(connection_pool=pool).get(self._key)
        except redis.ResponseError as e:
            # e.g. WRONGTYPE when the key holds a non-string value
            raise CursorParseError(self._key, f"unreadable value: {e}", location=self.location)
        except redis.RedisError as e:
            raise StorageConnectionError(f"Failed to read cursor from Redis: {e}", location=self.location)
        finally:
            pool.disconnect()

        if data is None:
            raise CursorNotFoundError(location=self.location)

        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise CursorParseError(repr(data), f"payload is not UTF-8: {e}", location=self.location)

        try:
            return PointArg.from_json(data)
        except CursorParseError as e:
            e.location = self.location
            raise

    def write_cursor(self, point: PointArg) -> None:
        """
        Store the point's JSON form under the key.

        Raises:
            StorageConnectionError: On pool or connection failure
        """
        payload = point.to_json()
        pool = self.get_pool()
        try:
            redis.Redis(connection_pool=pool).set(self._key, payload)
        except redis.RedisError as e:
            raise StorageConnectionError(f"Failed to write cursor to Redis: {e}", location=self.location)
        finally:
            pool.disconnect()

        logger.debug(f"Wrote cursor {point} to {self.location}")
