# topmark:header:start
#
#   project      : SeqJoin
#   file         : errors.py
#   file_relpath : src/seqjoin/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SeqJoin core.

Usage:
    Raise these from library code to signal invalid calls. Element formatting
    failures are *not* represented here: whatever the element formatter raises
    reaches the caller unchanged.
"""

from __future__ import annotations


class SeqjoinError(Exception):
    """Base class for all SeqJoin library errors."""


class InvalidArgumentError(SeqjoinError, ValueError):
    """Invalid argument at the call boundary (missing sink, bad delimiter, bad range)."""


class ExhaustedSequenceError(SeqjoinError, RuntimeError):
    """A single-pass sequence was traversed more than once."""
