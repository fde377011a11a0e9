# topmark:header:start
#
#   project      : SeqJoin
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SeqJoin in a controlled working directory.

`run_cli_in()` changes the process working directory to ``tmp_path`` before
invoking the Click CLI, so local config discovery (``seqjoin.toml``,
``pyproject.toml``) and relative ``--items-from`` paths resolve against the
temporary test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from seqjoin.cli.exit_codes import ExitCode
from seqjoin.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Prefer `run_cli_in` for anything that depends on config discovery.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
