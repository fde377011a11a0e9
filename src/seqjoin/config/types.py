# topmark:header:start
#
#   project      : SeqJoin
#   file         : types.py
#   file_relpath : src/seqjoin/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration value types."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ItemType(str, Enum):
    """How textual items (CLI arguments, lines of an items file) are coerced.

    Attributes:
        STR: Keep items as strings.
        INT: Parse items with ``int()``.
        FLOAT: Parse items with ``float()``.
    """

    STR = "str"
    INT = "int"
    FLOAT = "float"

    def coerce(self, raw: str) -> Any:
        """Convert ``raw`` to this item type.

        Raises:
            ValueError: If ``raw`` is not a valid literal for this type.
        """
        if self is ItemType.INT:
            return int(raw)
        if self is ItemType.FLOAT:
            return float(raw)
        return raw

    @classmethod
    def from_name(cls, name: str | None) -> ItemType | None:
        """Return the member whose value matches ``name`` (case-insensitive), else None."""
        if name is None:
            return None
        key: str = name.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None
