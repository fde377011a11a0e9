# topmark:header:start
#
#   project      : SeqJoin
#   file         : test_lazy.py
#   file_relpath : tests/core/test_lazy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass sequences and explicit materialization."""

from __future__ import annotations

import pytest

from seqjoin.core.errors import ExhaustedSequenceError
from seqjoin.core.joiner import format_joined
from seqjoin.core.lazy import SinglePass, is_reiterable, materialize


def test_single_pass_prints_generator_output() -> None:
    """A lazy sequence prints the same as its materialized form."""
    squares = SinglePass(n * n for n in range(5))
    assert format_joined(squares, " , ") == "0 , 1 , 4 , 9 , 16"
    assert squares.consumed


def test_single_pass_rejects_second_traversal() -> None:
    """Traversing a single-pass sequence twice is an error, not silent empty output."""
    seq = SinglePass([1, 2])
    format_joined(seq)
    with pytest.raises(ExhaustedSequenceError):
        format_joined(seq)


def test_single_pass_is_not_consumed_until_iterated() -> None:
    """Wrapping does not start the traversal."""
    seq = SinglePass(iter([1]))
    assert not seq.consumed


def test_empty_single_pass_prints_nothing() -> None:
    """An empty lazy sequence produces empty output."""
    assert format_joined(SinglePass(()), " , ") == ""


def test_is_reiterable() -> None:
    """Containers are reiterable; iterators and single-pass wrappers are not."""
    assert is_reiterable([1])
    assert is_reiterable(range(3))
    assert not is_reiterable(iter([1]))
    assert not is_reiterable(x for x in [1])
    assert not is_reiterable(SinglePass([1]))


def test_materialize_allows_repeated_printing() -> None:
    """Materialization is the explicit opt-in for multiple traversals."""
    values = materialize(str(c) for c in "abc")
    assert values == ("a", "b", "c")
    assert format_joined(values, "-") == format_joined(values, "-") == "a-b-c"


def test_materialize_returns_tuples_unchanged() -> None:
    """Tuples are already materialized."""
    t = (1, 2)
    assert materialize(t) is t
