# topmark:header:start
#
#   project      : SeqJoin
#   file         : join.py
#   file_relpath : src/seqjoin/cli/commands/join.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin `join` command.

Prints the given items separated by the configured delimiter, with no
delimiter before the first or after the last item.

Input:
    - Positional ``ITEMS`` followed by the lines of every ``--items-from`` file
      (``-`` reads STDIN).

Output:
    - ``text`` (default): the joined items followed by the terminator. An empty
      input prints nothing at all.
    - ``markdown``: the joined items as an inline code span.
    - ``json``: ``{"text", "count", "delimiter", "strategy"}``.

Exit codes:
    - 64 when an item cannot be converted to ``--as`` or flags are invalid.
    - 65 when an item cannot be formatted with ``--element-format``.
    - 66 when an ``--items-from`` file cannot be read.
    - 78 on configuration errors.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

import click

from seqjoin.cli.cli_types import EnumChoiceParam
from seqjoin.cli.config_resolver import resolve_config_from_click
from seqjoin.cli.errors import SeqjoinDataError, SeqjoinUsageError
from seqjoin.cli.io import coerce_items, read_items_from
from seqjoin.cli.options import common_config_options
from seqjoin.config.logging import get_logger
from seqjoin.config.types import ItemType
from seqjoin.core.errors import InvalidArgumentError
from seqjoin.core.formats import OutputFormat
from seqjoin.core.joiner import format_joined, format_range, print_joined, print_range
from seqjoin.core.lazy import materialize
from seqjoin.core.sinks import ConsoleSink
from seqjoin.core.strategies import JoinStrategy

if TYPE_CHECKING:
    from seqjoin.cli.console_api import ConsoleLike
    from seqjoin.config import Config

logger = get_logger(__name__)


def _markdown_code_span(text: str) -> str:
    """Wrap ``text`` in an inline code span that survives embedded backticks.

    The fence is one backtick longer than the longest backtick run in ``text``;
    a text starting or ending with a backtick is padded with one space.
    """
    longest: int = max((len(run) for run in re.findall(r"`+", text)), default=0)
    fence: str = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{fence}{text}{fence}"


@click.command(
    name="join",
    help="Print ITEMS separated by a delimiter (none before the first or after the last).",
)
@click.argument("items", nargs=-1)
@click.option(
    "-d",
    "--delimiter",
    default=None,
    help="Delimiter placed between adjacent items (default from config: ' , ').",
)
@click.option(
    "--strategy",
    type=EnumChoiceParam(JoinStrategy),
    default=None,
    help=f"Join algorithm ({', '.join(s.value for s in JoinStrategy)}).",
)
@click.option(
    "--element-format",
    default=None,
    help="Element format: 'str', 'repr', a format spec ('.2f') or a template ('<{}>').",
)
@click.option(
    "--as",
    "item_type",
    type=EnumChoiceParam(ItemType),
    default=None,
    help=f"Convert items before formatting ({', '.join(t.value for t in ItemType)}).",
)
@click.option(
    "--items-from",
    "items_from",
    type=str,  # Ensure '-' passes through untouched
    multiple=True,
    help="Read newline-delimited items from file(s) (use '-' for STDIN).",
)
@click.option(
    "--start",
    type=click.IntRange(min=0),
    default=None,
    help="Position of the first item to print (0-based).",
)
@click.option(
    "--stop",
    type=click.IntRange(min=0),
    default=None,
    help="Position after the last item to print (exclusive).",
)
@click.option(
    "--terminator",
    default=None,
    help="Text written after the last item (default from config: newline).",
)
@click.option(
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not write a terminator after the last item.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@common_config_options
def join_command(
    *,
    items: tuple[str, ...],
    delimiter: str | None,
    strategy: JoinStrategy | None,
    element_format: str | None,
    item_type: ItemType | None,
    items_from: tuple[str, ...],
    start: int | None,
    stop: int | None,
    terminator: str | None,
    no_newline: bool,
    output_format: OutputFormat | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Join ITEMS with a delimiter and print the result.

    Args:
        items (tuple[str, ...]): Positional items.
        delimiter (str | None): Delimiter override.
        strategy (JoinStrategy | None): Join strategy override.
        element_format (str | None): Element formatter override.
        item_type (ItemType | None): Item conversion override.
        items_from (tuple[str, ...]): Files with newline-delimited items.
        start (int | None): First position of the printed window.
        stop (int | None): End position (exclusive) of the printed window.
        terminator (str | None): Terminator override.
        no_newline (bool): Suppress the terminator.
        output_format (OutputFormat | None): Output format.
        config_paths (tuple[str, ...]): Explicit config files.
        no_config (bool): Skip local config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if no_newline and terminator is not None:
        raise SeqjoinUsageError("'--terminator' and '--no-newline' are mutually exclusive.")

    config: Config = resolve_config_from_click(
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "delimiter": delimiter,
            "strategy": strategy,
            "element_format": element_format,
            "item_type": item_type,
            "terminator": "" if no_newline else terminator,
        },
    )

    raw_items: list[str] = list(items) + read_items_from(items_from)
    # Convert everything up front so conversion errors never leave partial output.
    values: tuple[Any, ...] = materialize(coerce_items(raw_items, config.item_type))
    windowed: bool = start is not None or stop is not None
    first: int = start or 0
    if stop is not None and stop < first:
        raise SeqjoinUsageError(f"'--stop' ({stop}) must not precede '--start' ({first}).")
    logger.debug(
        "Joining %d item(s) (window=%s) as %s", len(values), windowed, config.item_type.value
    )

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    try:
        if fmt is OutputFormat.TEXT:
            sink = ConsoleSink(console)
            if windowed:
                print_range(
                    values,
                    first,
                    stop,
                    sink,
                    config.delimiter,
                    formatter=config.element_format,
                    strategy=config.strategy,
                    terminator=config.terminator,
                )
            else:
                print_joined(
                    values,
                    sink,
                    config.delimiter,
                    formatter=config.element_format,
                    strategy=config.strategy,
                    terminator=config.terminator,
                )
            return

        shown: tuple[Any, ...] = values[first:stop] if windowed else values
        text: str = (
            format_range(
                values,
                first,
                stop,
                config.delimiter,
                formatter=config.element_format,
                strategy=config.strategy,
            )
            if windowed
            else format_joined(
                values,
                config.delimiter,
                formatter=config.element_format,
                strategy=config.strategy,
            )
        )
    except InvalidArgumentError as e:
        raise SeqjoinUsageError(str(e)) from e
    except (ValueError, TypeError, IndexError, KeyError) as e:
        logger.debug("Element formatting failed: %s", e)
        raise SeqjoinDataError(f"Cannot format item: {e}") from e

    if fmt is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "text": text,
            "count": len(shown),
            "delimiter": config.delimiter,
            "strategy": config.strategy.value,
        }
        console.print(json.dumps(payload))
    elif shown:
        console.write(_markdown_code_span(text) + "\n")
