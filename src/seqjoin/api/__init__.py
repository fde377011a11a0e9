# topmark:header:start
#
#   project      : SeqJoin
#   file         : __init__.py
#   file_relpath : src/seqjoin/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public SeqJoin API (stable surface).

This module exposes a **small, typed API** for printing sequences with a
delimiter from Python code. The goal is to keep this surface **stable** across
minor versions; internal modules remain private.

Versioning policy
-----------------
- The **signatures** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Example:
-------
```python
import sys

from seqjoin import api

api.format_joined([1, 2, 3, 4, 5], " , ")  # '1 , 2 , 3 , 4 , 5'
api.format_joined([1.1, 2.2, 3.3], formatter=".2f")  # '1.10 , 2.20 , 3.30'
api.print_joined(range(3), sys.stdout, "-", terminator="\\n")  # 0-1-2
api.format_range("abcdef", 1, 4, "")  # 'bcd'
```
"""

from __future__ import annotations

from seqjoin.constants import SEQJOIN_VERSION
from seqjoin.core.errors import ExhaustedSequenceError, InvalidArgumentError, SeqjoinError
from seqjoin.core.joiner import format_joined, format_range, print_joined, print_range
from seqjoin.core.lazy import SinglePass, is_reiterable, materialize
from seqjoin.core.sinks import StringSink
from seqjoin.core.strategies import JoinStrategy

__all__: list[str] = [
    "ExhaustedSequenceError",
    "InvalidArgumentError",
    "JoinStrategy",
    "SeqjoinError",
    "SinglePass",
    "StringSink",
    "format_joined",
    "format_range",
    "is_reiterable",
    "materialize",
    "print_joined",
    "print_range",
    "version",
]


def version() -> str:
    """Return the installed SeqJoin version (PEP 440)."""
    return SEQJOIN_VERSION
