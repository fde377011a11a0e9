# topmark:header:start
#
#   project      : SeqJoin
#   file         : errors.py
#   file_relpath : src/seqjoin/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SeqJoin CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default.
"""

from __future__ import annotations

from typing import IO, Any

import click

from seqjoin.cli.exit_codes import ExitCode


class SeqjoinCliError(click.ClickException):
    """Base class for all SeqJoin CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SeqjoinUsageError(SeqjoinCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SeqjoinDataError(SeqjoinCliError):
    """Error for elements that cannot be converted to text."""

    exit_code = ExitCode.DATA_ERROR


class SeqjoinFileNotFoundError(SeqjoinCliError):
    """Error when an input file does not exist or cannot be read."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SeqjoinConfigError(SeqjoinCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
