# topmark:header:start
#
#   project      : SeqJoin
#   file         : io.py
#   file_relpath : src/seqjoin/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Item input handling for Click commands.

Items come from positional arguments and from newline-delimited files given
with ``--items-from`` (``-`` reads STDIN). Blank lines are ignored; other
lines are taken verbatim without their line ending.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seqjoin.cli.errors import SeqjoinFileNotFoundError, SeqjoinUsageError
from seqjoin.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from seqjoin.config.types import ItemType

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def split_nonempty_lines(text: str) -> list[str]:
    """Return the lines of ``text`` that are not blank, without line endings."""
    return [ln for ln in text.splitlines() if ln.strip()]


def read_items_from(sources: Sequence[str]) -> list[str]:
    """Read newline-delimited items from each source, in order.

    Args:
        sources (Sequence[str]): File paths; ``-`` denotes STDIN (at most once).

    Returns:
        list[str]: The items of all sources, concatenated.

    Raises:
        SeqjoinUsageError: If STDIN is requested more than once.
        SeqjoinFileNotFoundError: If a file cannot be read.
    """
    if sum(1 for s in sources if s == STDIN_SENTINEL) > 1:
        raise SeqjoinUsageError("STDIN ('-') can be given to --items-from only once.")

    items: list[str] = []
    for source in sources:
        if source == STDIN_SENTINEL:
            text: str = click.get_text_stream("stdin").read()
            logger.debug("Read %d characters of items from STDIN", len(text))
        else:
            path = Path(source)
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as e:
                logger.error("Cannot read items file %s: %s", path, e)
                raise SeqjoinFileNotFoundError(f"Cannot read items file {path}: {e}") from e
            logger.debug("Read items from %s", path)
        items.extend(split_nonempty_lines(text))
    return items


def coerce_items(raw_items: Iterable[str], item_type: ItemType) -> Iterator[object]:
    """Lazily convert textual items to ``item_type``.

    Raises:
        SeqjoinUsageError: When an item is not a valid literal for ``item_type``
            (raised while iterating).
    """
    for raw in raw_items:
        try:
            yield item_type.coerce(raw)
        except ValueError as e:
            raise SeqjoinUsageError(
                f"Cannot convert item {raw!r} to {item_type.value}: {e}"
            ) from e
