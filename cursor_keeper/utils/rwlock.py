"""
Reader/writer lock for state shared between pipeline threads.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    A lock allowing many concurrent readers or a single writer.
    
    Writers are preferred: once a writer is waiting, new readers block until
    it has finished, so a busy source cannot starve the sink. Not reentrant.
    
    Usage:
        lock = ReadWriteLock()
        
        with lock.read_locked():
            value = shared_value
        
        with lock.write_locked():
            shared_value = new_value
    """
    
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0
    
    def acquire_read(self) -> None:
        """Block until shared access is granted."""
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
    
    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()
    
    def acquire_write(self) -> None:
        """Block until exclusive access is granted."""
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
    
    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()
    
    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()
    
    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
    
    @property
    def readers(self) -> int:
        """Number of threads currently holding shared access."""
        with self._cond:
            return self._readers
    
    @property
    def write_held(self) -> bool:
        with self._cond:
            return self._writer
