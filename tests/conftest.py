"""
Shared pytest fixtures for cursor_keeper tests.

Provides sample points, a controllable clock, and temporary cursor files.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add project root to path for cursor_keeper imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cursor_keeper.point import PointArg
from cursor_keeper.config import FileConfig, MemoryConfig


# =============================================================================
# Clock Fixtures
# =============================================================================

class FakeClock:
    """Monotonic clock that only moves when told to."""
    
    def __init__(self, start: float = 1000.0):
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at t=1000s."""
    return FakeClock()


# =============================================================================
# Point Fixtures
# =============================================================================

@pytest.fixture
def point_a() -> PointArg:
    return PointArg(4492799, "f8084c61b6a238acec985b59310b6ecec49c0ab8")


@pytest.fixture
def point_b() -> PointArg:
    return PointArg(4492820, "2e3f0c4d0a2f37c6e6c3d0a1a5b0e9fbd5c3a0e1")


@pytest.fixture
def point_c() -> PointArg:
    return PointArg(4492901, "9a1c3e5b7d9f0a2c4e6b8d0f1a3c5e7b9d1f3a5c")


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def cursor_path(tmp_path) -> Path:
    """Path for a cursor file that does not exist yet."""
    return tmp_path / "pipeline.cursor"


@pytest.fixture
def file_config(cursor_path) -> FileConfig:
    return FileConfig(path=str(cursor_path))


@pytest.fixture
def memory_config(point_a) -> MemoryConfig:
    return MemoryConfig(point=point_a)


# =============================================================================
# Backend Fixtures
# =============================================================================

@pytest.fixture
def mock_backend(point_a) -> MagicMock:
    """Backend double whose read returns point_a and whose writes are recorded."""
    backend = MagicMock()
    backend.read_cursor.return_value = point_a
    backend.write_cursor.return_value = None
    return backend
