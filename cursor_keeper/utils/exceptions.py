"""
Custom exceptions for cursor_keeper.

Exception Hierarchy:
    CursorStoreError (base)
    ├── CursorNotFoundError
    ├── CursorParseError
    ├── StorageConnectionError
    ├── StorageIOError
    └── ConfigError
"""

from typing import Optional


class CursorStoreError(Exception):
    """Base exception for cursor persistence errors."""

    def __init__(self, message: str, location: Optional[str] = None):
        self.location = location
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.location:
            return f"{message} ({self.location})"
        return message


class CursorNotFoundError(CursorStoreError):
    """No cursor has been stored yet (file or key absent)."""

    def __init__(self, location: Optional[str] = None):
        super().__init__("Cursor not found", location=location)


class CursorParseError(CursorStoreError):
    """Stored cursor content could not be parsed as a point."""

    def __init__(self, raw: str, reason: Optional[str] = None, location: Optional[str] = None):
        self.raw = raw
        message = f"Failed to parse cursor {raw!r}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, location=location)


class StorageConnectionError(CursorStoreError):
    """Remote store could not be reached or the connection pool failed."""
    pass


class StorageIOError(CursorStoreError):
    """Filesystem failure while reading or writing a cursor."""
    pass


class ConfigError(CursorStoreError):
    """Invalid cursor backend configuration."""
    pass
