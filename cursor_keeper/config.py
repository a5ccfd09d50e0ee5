"""
Configuration for cursor_keeper.

Selects exactly one storage backend. Loaded from a JSON document whose
"type" field is the backend tag:

    {"type": "File", "path": "/var/lib/pipeline/cursor"}
    {"type": "Memory", "point": "4492799,f8084c61b6a238acec985b59310b6ecec49c0ab8"}
    {"type": "Redis", "url": "redis://localhost:6379/0", "key": "pipeline-cursor"}
"""

import json
from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, Union

from cursor_keeper.point import PointArg
from cursor_keeper.utils.exceptions import ConfigError, CursorParseError


@dataclass(frozen=True)
class FileConfig:
    """File-based storage configuration."""
    path: str


@dataclass(frozen=True)
class MemoryConfig:
    """Ephemeral storage seeded with a fixed point."""
    point: PointArg


@dataclass(frozen=True)
class RedisConfig:
    """Redis storage configuration."""
    url: str
    key: str


Config = Union[FileConfig, MemoryConfig, RedisConfig]


def _require(data: Dict[str, Any], field_name: str, backend: str) -> Any:
    if field_name not in data:
        raise ConfigError(f"{backend} cursor config requires '{field_name}'")
    return data[field_name]


def config_from_dict(data: Dict[str, Any]) -> Config:
    """
    Build a backend config from a tagged mapping.

    Args:
        data: Mapping with a "type" tag (File, Memory or Redis, any case)

    Returns:
        The matching config variant

    Raises:
        ConfigError: If the tag is unknown or a required field is missing
    """
    if not isinstance(data, dict):
        raise ConfigError(f"cursor config must be an object, got {type(data).__name__}")

    tag = str(data.get("type", "")).lower()

    if tag == "file":
        path = str(_require(data, "path", "File"))
        if not path:
            raise ConfigError("File cursor config requires a non-empty 'path'")
        return FileConfig(path=path)

    if tag == "memory":
        raw_point = _require(data, "point", "Memory")
        try:
            point = PointArg.coerce(raw_point)
        except CursorParseError as e:
            raise ConfigError(f"Memory cursor config has an invalid point: {e}")
        return MemoryConfig(point=point)

    if tag == "redis":
        return RedisConfig(
            url=str(_require(data, "url", "Redis")),
            key=str(_require(data, "key", "Redis")),
        )

    raise ConfigError(f"Unknown cursor storage type: {data.get('type')!r}")


def load_config(config_path: Path) -> Config:
    """
    Load the cursor backend configuration from a JSON file.

    The backend may be the whole document or nested under a top-level
    "cursor" key, so the section can live inside a larger pipeline config.

    Args:
        config_path: Path to the JSON file

    Returns:
        Config variant described by the file
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError("Cursor config file not found", location=str(config_path))

    try:
        with open(config_path) as f:
            data = json.load(f)
    except ValueError as e:
        raise ConfigError(f"Cursor config is not valid JSON: {e}", location=str(config_path))

    if isinstance(data, dict) and "type" not in data and "cursor" in data:
        data = data["cursor"]

    return config_from_dict(data)
