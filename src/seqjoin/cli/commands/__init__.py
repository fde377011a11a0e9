# topmark:header:start
#
#   project      : SeqJoin
#   file         : __init__.py
#   file_relpath : src/seqjoin/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click subcommands of the SeqJoin CLI."""

from __future__ import annotations
