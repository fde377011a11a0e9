# topmark:header:start
#
#   project      : SeqJoin
#   file         : formats.py
#   file_relpath : src/seqjoin/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions.

`OutputFormat` is the format vocabulary of the CLI commands; it lives here so
it carries no Click or console dependency.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown snippet.
        JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
