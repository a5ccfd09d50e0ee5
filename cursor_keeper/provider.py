"""
Cursor Provider
Tracks the last processed point of a pipeline and persists it to storage.

A source calls get_cursor() to find where to resume reading. A sink calls
set_cursor() after each processed block. Backend writes are debounced:
within DEFAULT_DEBOUNCE_SECONDS of the last confirmed write, set_cursor()
only updates the in-memory value.

States:
    - Unknown: before the initial load
    - Invalid: the initial load failed, no cursor available
    - AtPoint: a cursor is cached along with when it was last confirmed
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from cursor_keeper.config import Config
from cursor_keeper.point import PointArg
from cursor_keeper.storage import Storage
from cursor_keeper.utils.exceptions import CursorStoreError
from cursor_keeper.utils.logging_config import get_logger
from cursor_keeper.utils.rwlock import ReadWriteLock

logger = get_logger("provider")

DEFAULT_DEBOUNCE_SECONDS = 10.0


@dataclass(frozen=True)
class Unknown:
    """No load has been attempted yet."""


@dataclass(frozen=True)
class Invalid:
    """The backend read failed or returned unparsable data."""


@dataclass(frozen=True)
class AtPoint:
    """A valid cursor, confirmed at clock reading `reached`."""
    point: PointArg
    reached: float


State = Union[Unknown, Invalid, AtPoint]


class Provider:
    """
    Owns one storage backend and the cached cursor state.

    get_cursor() takes the shared side of the lock and never does I/O.
    load_cursor() and set_cursor() hold the exclusive side for their whole
    duration, backend I/O included, so at most one write is in flight.

    Usage:
        provider = Provider.initialize(FileConfig(path="pipeline.cursor"))

        # Source
        start = provider.get_cursor() or genesis

        # Sink, after each block
        provider.set_cursor(PointArg(slot, block_hash))
    """

    def __init__(
        self,
        config: Config,
        clock: Callable[[], float] = time.monotonic,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        """
        Build a provider without loading the cursor. Use initialize() instead.

        Args:
            config: Backend selection
            clock: Zero-argument callable returning seconds (monotonic)
            debounce_seconds: Minimum interval between backend writes
        """
        self._storage = Storage.from_config(config)
        self._clock = clock
        self._debounce_seconds = debounce_seconds
        self._lock = ReadWriteLock()
        self._state: State = Unknown()

    @classmethod
    def initialize(
        cls,
        config: Config,
        clock: Callable[[], float] = time.monotonic,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> "Provider":
        """
        Build a provider and load the stored cursor.

        Never fails because of the stored cursor: a missing or corrupt value
        leaves the provider in the Invalid state and get_cursor() returns None.
        """
        provider = cls(config, clock=clock, debounce_seconds=debounce_seconds)
        provider.load_cursor()
        return provider

    def load_cursor(self) -> None:
        """Read the cursor from storage into the cached state."""
        with self._lock.write_locked():
            try:
                point = self._storage.read_cursor()
            except CursorStoreError as e:
                logger.warning(f"failure reading cursor from storage: {e}")
                self._state = Invalid()
                return

            self._state = AtPoint(point=point, reached=self._clock())
            logger.info(f"Loaded cursor at {point}")

    def get_cursor(self) -> Optional[PointArg]:
        """Return the cached cursor, or None if no valid cursor is known."""
        with self._lock.read_locked():
            state = self._state

        if isinstance(state, AtPoint):
            return state.point
        return None

    def set_cursor(self, point: PointArg) -> None:
        """
        Record that processing has reached `point`.

        Within the debounce window only the cached value changes. Otherwise
        the point is written to storage first and cached on success.

        Args:
            point: Latest processed position

        Raises:
            CursorStoreError: If the backend write fails; the cache is unchanged
        """
        with self._lock.write_locked():
            state = self._state
            now = self._clock()

            if isinstance(state, AtPoint) and now - state.reached < self._debounce_seconds:
                self._state = AtPoint(point=point, reached=state.reached)
                logger.debug(f"Cursor at {point}, storage write debounced")
                return

            try:
                self._storage.write_cursor(point)
            except CursorStoreError as e:
                logger.error(f"failure writing cursor {point} to storage: {e}")
                raise

            self._state = AtPoint(point=point, reached=self._clock())
            logger.debug(f"Cursor at {point} persisted")

    @property
    def state(self) -> State:
        """Snapshot of the cached state."""
        with self._lock.read_locked():
            return self._state

    @property
    def storage(self) -> Storage:
        return self._storage
