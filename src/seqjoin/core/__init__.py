# topmark:header:start
#
#   project      : SeqJoin
#   file         : __init__.py
#   file_relpath : src/seqjoin/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks of SeqJoin.

Modules:
    - `seqjoin.core.joiner`: the delimiter-correct sequence printer.
    - `seqjoin.core.strategies`: boundary-flag and peel-first join algorithms.
    - `seqjoin.core.formatters`: element-to-text conversion rules.
    - `seqjoin.core.sinks`: output sink protocol and adapters.
    - `seqjoin.core.lazy`: single-pass sequences and explicit materialization.
    - `seqjoin.core.errors`: library exceptions.
"""

from __future__ import annotations
