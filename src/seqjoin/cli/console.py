# topmark:header:start
#
#   project      : SeqJoin
#   file         : console.py
#   file_relpath : src/seqjoin/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output from internal logging. Use it for
messages intended for end users, while reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from seqjoin.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def write(self, text: str, /) -> int:
        """Write ``text`` to stdout verbatim, without a newline.

        Unlike `print`, escape sequences in ``text`` are kept even when color
        is disabled: this is data, not a styled message.

        Returns:
            int: The number of characters written.
        """
        click.echo(text, nl=False, file=self.out, color=True)
        return len(text)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
