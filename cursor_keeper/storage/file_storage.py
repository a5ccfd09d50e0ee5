"""
File-based cursor storage.

The file holds the canonical "slot,hash" string. Writes go to a sibling
"<path>.tmp" file which is then renamed over the target, so readers never
observe a partial cursor and a crash mid-write leaves the previous value.
"""

import os
from pathlib import Path

from cursor_keeper.config import FileConfig
from cursor_keeper.point import PointArg
from cursor_keeper.utils.exceptions import (
    CursorNotFoundError,
    CursorParseError,
    StorageIOError,
)


class FileStorage:
    """Persists the cursor to a single file on the local filesystem."""

    def __init__(self, config: FileConfig):
        self._path = Path(config.path)
        self._tmp_path = Path(f"{config.path}.tmp")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def tmp_path(self) -> Path:
        return self._tmp_path

    def read_cursor(self) -> PointArg:
        """
        Read and parse the cursor file.

        Raises:
            CursorNotFoundError: If the file does not exist
            CursorParseError: If the content is not a valid point
            StorageIOError: On any other filesystem failure
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise CursorNotFoundError(location=str(self._path))
        except UnicodeDecodeError as e:
            raise CursorParseError("<binary>", f"content is not UTF-8: {e}", location=str(self._path))
        except OSError as e:
            raise StorageIOError(f"Failed to read cursor file: {e}", location=str(self._path))

        try:
            return PointArg.parse(content)
        except CursorParseError as e:
            e.location = str(self._path)
            raise

    def write_cursor(self, point: PointArg) -> None:
        """
        Atomically replace the cursor file with the given point.

        Raises:
            StorageIOError: If the temp file cannot be written or renamed
        """
        tmp_path = self.tmp_path
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(str(point))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageIOError(f"Failed to write cursor file: {e}", location=str(self._path))
