# topmark:header:start
#
#   project      : SeqJoin
#   file         : strategies.py
#   file_relpath : src/seqjoin/core/strategies.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Join strategies.

Two interchangeable algorithms write a sequence to a sink with exactly one
delimiter between adjacent elements and none at the boundaries:

- **boundary-flag**: keep an "is first" flag and write the delimiter before
  every element except the first (one conditional per element).
- **peel-first**: write the first element unconditionally, then
  ``delimiter + element`` for the rest (one branch in total).

Both writers must produce identical output for identical input. They return
the number of elements written so callers can decide on a terminator.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from seqjoin.config.logging import get_logger
from seqjoin.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seqjoin.core.formatters import ElementFormatter
    from seqjoin.core.sinks import Sink

logger = get_logger(__name__)

Writer = Callable[["Iterable[Any]", "Sink", str, "ElementFormatter"], int]


class JoinStrategy(str, Enum):
    """Available join algorithms.

    Attributes:
        BOUNDARY_FLAG: Per-element "is first" check.
        PEEL_FIRST: Peel off the first element, then prefix the rest.
    """

    BOUNDARY_FLAG = "boundary-flag"
    PEEL_FIRST = "peel-first"


def write_boundary_flag(
    items: Iterable[Any],
    sink: Sink,
    delimiter: str,
    formatter: ElementFormatter,
) -> int:
    """Write ``items`` using the boundary-flag strategy.

    Args:
        items (Iterable[Any]): Elements in traversal order.
        sink (Sink): Destination for the rendered text.
        delimiter (str): Separator between adjacent elements.
        formatter (ElementFormatter): Element-to-text conversion.

    Returns:
        int: Number of elements written.
    """
    first = True
    count = 0
    for item in items:
        text: str = formatter(item)
        if not first:
            sink.write(delimiter)
        sink.write(text)
        first = False
        count += 1
    return count


def write_peel_first(
    items: Iterable[Any],
    sink: Sink,
    delimiter: str,
    formatter: ElementFormatter,
) -> int:
    """Write ``items`` using the peel-first strategy.

    Args:
        items (Iterable[Any]): Elements in traversal order.
        sink (Sink): Destination for the rendered text.
        delimiter (str): Separator between adjacent elements.
        formatter (ElementFormatter): Element-to-text conversion.

    Returns:
        int: Number of elements written.
    """
    it = iter(items)
    sentinel = object()
    head: Any = next(it, sentinel)
    if head is sentinel:
        return 0
    sink.write(formatter(head))
    count = 1
    for item in it:
        text: str = formatter(item)
        sink.write(delimiter + text)
        count += 1
    return count


_WRITERS: dict[JoinStrategy, Writer] = {
    JoinStrategy.BOUNDARY_FLAG: write_boundary_flag,
    JoinStrategy.PEEL_FIRST: write_peel_first,
}


def coerce_strategy(strategy: JoinStrategy | str) -> JoinStrategy:
    """Return ``strategy`` as a `JoinStrategy` member.

    Accepts members, their values (``"peel-first"``) or their names
    (``"PEEL_FIRST"``, case-insensitive, ``_`` and ``-`` interchangeable).

    Raises:
        InvalidArgumentError: If ``strategy`` names no known strategy.
    """
    if isinstance(strategy, JoinStrategy):
        return strategy
    if isinstance(strategy, str):
        key: str = strategy.strip().lower().replace("_", "-")
        for member in JoinStrategy:
            if member.value == key:
                return member
    choices: str = ", ".join(s.value for s in JoinStrategy)
    raise InvalidArgumentError(f"Unknown join strategy {strategy!r} (expected one of: {choices})")


def get_writer(strategy: JoinStrategy | str) -> Writer:
    """Return the writer implementing ``strategy``."""
    member: JoinStrategy = coerce_strategy(strategy)
    logger.trace("Selected join strategy: %s", member.value)
    return _WRITERS[member]
