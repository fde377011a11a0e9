# topmark:header:start
#
#   project      : SeqJoin
#   file         : lazy.py
#   file_relpath : src/seqjoin/core/lazy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pass (lazy) sequences.

Generator expressions produce values on demand and can be consumed once.
`SinglePass` makes that contract explicit for any iterable, and
`materialize` is the explicit opt-in for callers that need to traverse the
same values more than once.

Example:
    ```python
    squares = SinglePass(n * n for n in range(4))
    assert format_joined(squares, ", ") == "0, 1, 4, 9"
    format_joined(squares, ", ")  # raises ExhaustedSequenceError
    ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from seqjoin.core.errors import ExhaustedSequenceError

T = TypeVar("T")


class SinglePass(Generic[T]):
    """A finite, single-pass, non-restartable sequence.

    Args:
        source (Iterable[T]): Values to expose; only iterated when this object is.
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Iterable[T] = source
        self._consumed: bool = False

    @property
    def consumed(self) -> bool:
        """Whether the sequence has already been handed out for iteration."""
        return self._consumed

    def __iter__(self) -> Iterator[T]:
        if self._consumed:
            raise ExhaustedSequenceError("Single-pass sequence was already traversed")
        self._consumed = True
        return iter(self._source)


def is_reiterable(obj: Iterable[object]) -> bool:
    """Return True if iterating ``obj`` again starts over from the first element.

    Iterators (including generators) return themselves from ``iter()`` and are
    therefore single-pass; `SinglePass` instances are single-pass by contract.
    """
    if isinstance(obj, (Iterator, SinglePass)):
        return False
    return True


def materialize(values: Iterable[T]) -> tuple[T, ...]:
    """Materialize ``values`` into an ordered, reusable tuple.

    Tuples are returned unchanged; anything else is traversed exactly once.
    """
    if isinstance(values, tuple):
        return values  # type: ignore[return-value]
    return tuple(values)
