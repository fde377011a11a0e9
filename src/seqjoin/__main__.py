# topmark:header:start
#
#   project      : SeqJoin
#   file         : __main__.py
#   file_relpath : src/seqjoin/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SeqJoin via ``python -m seqjoin``.

Delegates to :func:`seqjoin.cli.main.cli`, the same Click group installed as
the ``seqjoin`` console script.

Examples:
    Join three items::

        python -m seqjoin join -d ", " a b c
"""

from __future__ import annotations

from seqjoin.cli.main import cli

if __name__ == "__main__":
    cli()
