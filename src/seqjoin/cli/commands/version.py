# topmark:header:start
#
#   project      : SeqJoin
#   file         : version.py
#   file_relpath : src/seqjoin/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin `version` command.

Prints the current SeqJoin version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from seqjoin.cli.cli_types import EnumChoiceParam
from seqjoin.constants import SEQJOIN_VERSION
from seqjoin.core.formats import OutputFormat

if TYPE_CHECKING:
    from seqjoin.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SeqJoin.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SeqJoin.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbose: bool = ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": SEQJOIN_VERSION}))
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# SeqJoin Version\n")
        console.print(f"**SeqJoin version: {SEQJOIN_VERSION}**")
    elif verbose:
        console.print(console.styled("SeqJoin version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SEQJOIN_VERSION, bold=True)}")
    else:
        console.print(console.styled(SEQJOIN_VERSION, bold=True))
