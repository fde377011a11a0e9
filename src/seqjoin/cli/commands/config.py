# topmark:header:start
#
#   project      : SeqJoin
#   file         : config.py
#   file_relpath : src/seqjoin/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin `config` command group.

Subcommands:
    - ``config dump``: print the effective (merged) configuration as TOML.
    - ``config defaults``: print the built-in defaults as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from seqjoin.cli.config_resolver import resolve_config_from_click
from seqjoin.cli.options import common_config_options
from seqjoin.config import MutableConfig
from seqjoin.config.loaders import to_toml

if TYPE_CHECKING:
    from seqjoin.cli.console_api import ConsoleLike
    from seqjoin.config import Config


@click.group(name="config", help="Inspect SeqJoin configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="dump", help="Print the effective configuration as TOML.")
@common_config_options
def config_dump_command(*, config_paths: tuple[str, ...], no_config: bool) -> None:
    """Print the merged configuration.

    Args:
        config_paths (tuple[str, ...]): Explicit config files.
        no_config (bool): Skip local config discovery.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    config: Config = resolve_config_from_click(config_paths=config_paths, no_config=no_config)
    for path in config.config_files:
        console.print(f"# source: {path}")
    console.print(to_toml(config.to_toml_dict()), nl=False)


@config_command.command(name="defaults", help="Print the built-in default configuration as TOML.")
def config_defaults_command() -> None:
    """Print the defaults, ignoring any config file."""
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    config: Config = MutableConfig.from_defaults().freeze()
    console.print(to_toml(config.to_toml_dict()), nl=False)
