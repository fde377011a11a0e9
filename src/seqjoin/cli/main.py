# topmark:header:start
#
#   project      : SeqJoin
#   file         : main.py
#   file_relpath : src/seqjoin/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands pick the console up from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from seqjoin.cli.color import ColorMode, resolve_color_mode
from seqjoin.cli.commands.config import config_command
from seqjoin.cli.commands.join import join_command
from seqjoin.cli.commands.version import version_command
from seqjoin.cli.console import ClickConsole
from seqjoin.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from seqjoin.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from seqjoin.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit ``--color`` value (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity as a logging-style level (INFO and below = verbose).
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging is configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(color_mode_override=effective_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SeqJoin CLI: print sequences with a delimiter between adjacent items.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SeqJoin CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'seqjoin join [ITEMS...]' to print a delimited sequence.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(join_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
