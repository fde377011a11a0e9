# topmark:header:start
#
#   project      : SeqJoin
#   file         : color.py
#   file_relpath : src/seqjoin/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers.

`ColorMode` captures the user's intent from ``--color``; `resolve_color_mode`
turns it into a final on/off decision using the ``FORCE_COLOR`` /
``NO_COLOR`` environment variables and TTY detection.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. ``ALWAYS`` → True, ``NEVER`` → False.
        2. ``FORCE_COLOR`` (set and not ``"0"``) → True; ``NO_COLOR`` → False.
        3. Otherwise ``stdout.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value, ``None`` if absent.
        stdout_isatty (bool | None): Override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
