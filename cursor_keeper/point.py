"""
Point values identifying a position in the processed block stream.

A point is a (slot, hash) pair. Two serializations are supported:
    - canonical string: "4492799,f8084c61b6a238acec985b59310b6ecec49c0ab8"
    - JSON: [4492799, "f8084c61b6a238acec985b59310b6ecec49c0ab8"]
"""

import json
from dataclasses import dataclass
from typing import Any, Sequence, Union

from cursor_keeper.utils.exceptions import CursorParseError

MAX_SLOT = 2**64 - 1


@dataclass(frozen=True)
class PointArg:
    """Immutable cursor position. Ordering is defined by the upstream pipeline."""
    slot: int
    hash: str

    def __post_init__(self):
        if isinstance(self.slot, bool) or not isinstance(self.slot, int) or not 0 <= self.slot <= MAX_SLOT:
            raise ValueError(f"slot must be an unsigned 64-bit integer, got {self.slot!r}")
        if not isinstance(self.hash, str) or not self.hash or self.hash != self.hash.strip():
            raise ValueError(f"hash must be a non-empty string without surrounding whitespace, got {self.hash!r}")

    def __str__(self) -> str:
        return f"{self.slot},{self.hash}"

    @classmethod
    def parse(cls, text: str) -> "PointArg":
        """
        Parse the canonical "slot,hash" form.

        Args:
            text: Serialized point; surrounding whitespace is ignored

        Returns:
            Parsed PointArg

        Raises:
            CursorParseError: If the text is not a valid point
        """
        raw = text.strip()
        if "," not in raw:
            raise CursorParseError(text, "expected 'slot,hash'")

        slot_part, hash_part = raw.split(",", 1)
        return cls(slot=_parse_slot(slot_part, text), hash=_parse_hash(hash_part, text))

    def to_json(self) -> str:
        return json.dumps([self.slot, self.hash])

    @classmethod
    def from_json(cls, text: str) -> "PointArg":
        """
        Parse the JSON form [slot, "hash"].

        Raises:
            CursorParseError: If the payload is not valid JSON or has the wrong shape
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            raise CursorParseError(str(text), f"invalid JSON: {e}")

        if not isinstance(data, list) or len(data) != 2:
            raise CursorParseError(str(text), "expected [slot, hash]")

        return cls(slot=_parse_slot(data[0], text), hash=_parse_hash(data[1], text))

    @classmethod
    def coerce(cls, value: Union["PointArg", str, Sequence[Any]]) -> "PointArg":
        """Build a point from a PointArg, a "slot,hash" string or a [slot, hash] pair."""
        if isinstance(value, PointArg):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(slot=_parse_slot(value[0], value), hash=_parse_hash(value[1], value))
        raise CursorParseError(repr(value), "unsupported point value")


def _parse_slot(value: Any, raw: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise CursorParseError(str(raw), "slot must be an integer")
    if isinstance(value, int):
        slot = value
    elif isinstance(value, str) and value.isascii() and value.isdigit():
        slot = int(value)
    else:
        raise CursorParseError(str(raw), "slot must be a non-negative integer")

    if not 0 <= slot <= MAX_SLOT:
        raise CursorParseError(str(raw), "slot must be an unsigned 64-bit integer")
    return slot


def _parse_hash(value: Any, raw: Any) -> str:
    if not isinstance(value, str) or not value or value != value.strip():
        raise CursorParseError(str(raw), "hash must be a non-empty string")
    return value
