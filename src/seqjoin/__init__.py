# topmark:header:start
#
#   project      : SeqJoin
#   file         : __init__.py
#   file_relpath : src/seqjoin/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SeqJoin package.

SeqJoin prints the elements of any ordered sequence separated by a delimiter,
with no delimiter before the first or after the last element. It exposes both
a CLI and a small typed API (`seqjoin.api`).
"""

from __future__ import annotations
