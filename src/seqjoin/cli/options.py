# topmark:header:start
#
#   project      : SeqJoin
#   file         : options.py
#   file_relpath : src/seqjoin/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config layering)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from seqjoin.cli.color import ColorMode
from seqjoin.cli.errors import SeqjoinUsageError
from seqjoin.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A logging-style level (lower is more verbose).

    Raises:
        SeqjoinUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SeqjoinUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False),
        multiple=True,
        help="Additional TOML config file(s), applied in order after discovery.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Ignore the local seqjoin.toml / [tool.seqjoin] in pyproject.toml.",
    )(f)
    return f
