# topmark:header:start
#
#   project      : SeqJoin
#   file         : joiner.py
#   file_relpath : src/seqjoin/core/joiner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimiter-correct sequence printer.

This module exposes the named printing functions:

- `print_joined` / `format_joined`: operate on any iterable.
- `print_range` / `format_range`: operate on a half-open ``[start, stop)``
  window of any iterable's traversal order, so one implementation serves every
  ordered collection (lists, tuples, ranges, generators, dict views, ...).

Guarantees:
    - Exactly one delimiter between adjacent elements; none before the first
      or after the last.
    - An empty sequence produces no output, not even the terminator.
    - The sequence is traversed front-to-back exactly once; elements are never
      reordered.
    - Element formatter failures propagate unchanged. With `print_joined`,
      elements rendered before the failure have already reached the sink.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TYPE_CHECKING, Any

from seqjoin.config.logging import get_logger
from seqjoin.constants import DEFAULT_DELIMITER
from seqjoin.core.errors import InvalidArgumentError
from seqjoin.core.formatters import resolve_formatter
from seqjoin.core.sinks import StringSink, ensure_sink
from seqjoin.core.strategies import JoinStrategy, get_writer

if TYPE_CHECKING:
    from seqjoin.core.formatters import ElementFormatter
    from seqjoin.core.sinks import Sink
    from seqjoin.core.strategies import Writer

logger = get_logger(__name__)


def _require_text(value: object, name: str) -> str:
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_iterable(items: object, name: str = "items") -> Iterator[Any]:
    """Return an iterator over ``items``; legacy ``__getitem__`` sequences are accepted."""
    if items is None:
        raise InvalidArgumentError(f"{name} is required")
    try:
        return iter(items)  # type: ignore[call-overload]
    except TypeError as e:
        raise InvalidArgumentError(f"{name} is not iterable: {type(items).__name__}") from e


def _window(source: object, start: int, stop: int | None) -> Iterable[Any]:
    """Return the ``[start, stop)`` window of ``source`` as a lazy iterator.

    Bounds are checked before ``source`` is touched.
    """
    if isinstance(start, bool) or not isinstance(start, int) or start < 0:
        raise InvalidArgumentError(f"start must be a non-negative integer, got {start!r}")
    if stop is not None:
        if isinstance(stop, bool) or not isinstance(stop, int) or stop < 0:
            raise InvalidArgumentError(f"stop must be a non-negative integer, got {stop!r}")
        if stop < start:
            raise InvalidArgumentError(f"stop ({stop}) must not precede start ({start})")
    return islice(_require_iterable(source, "source"), start, stop)


def print_joined(
    items: Iterable[Any],
    sink: Sink,
    delimiter: str = DEFAULT_DELIMITER,
    *,
    formatter: ElementFormatter | str | None = None,
    strategy: JoinStrategy | str = JoinStrategy.PEEL_FIRST,
    terminator: str = "",
) -> None:
    """Write ``items`` to ``sink`` separated by ``delimiter``.

    Args:
        items (Iterable[Any]): Elements to print, in traversal order.
        sink (Sink): Destination exposing ``write(str)``; not closed or flushed.
        delimiter (str): Separator written strictly between adjacent elements.
        formatter (ElementFormatter | str | None): Element formatting rule,
            see `seqjoin.core.formatters.resolve_formatter`. Defaults to ``str``.
        strategy (JoinStrategy | str): Join algorithm; both produce identical output.
        terminator (str): Text written after the last element. Skipped when
            no element was written.

    Raises:
        InvalidArgumentError: If an argument is missing or of the wrong kind.
    """
    out: Sink = ensure_sink(sink)
    sep: str = _require_text(delimiter, "delimiter")
    end: str = _require_text(terminator, "terminator")
    fmt: ElementFormatter = resolve_formatter(formatter)
    writer: Writer = get_writer(strategy)
    # Last, so a single-pass input is not consumed when another argument is invalid.
    seq: Iterator[Any] = _require_iterable(items)

    count: int = writer(seq, out, sep, fmt)
    if count and end:
        out.write(end)
    logger.debug("Joined %d element(s) with delimiter %r", count, sep)


def format_joined(
    items: Iterable[Any],
    delimiter: str = DEFAULT_DELIMITER,
    *,
    formatter: ElementFormatter | str | None = None,
    strategy: JoinStrategy | str = JoinStrategy.PEEL_FIRST,
    terminator: str = "",
) -> str:
    """Return ``items`` rendered as text separated by ``delimiter``.

    Same contract as `print_joined`, but the text is returned instead of
    being written to a caller-supplied sink.

    Examples:
        >>> format_joined([1, 2, 3, 4, 5], " , ")
        '1 , 2 , 3 , 4 , 5'
        >>> format_joined([], " , ")
        ''
    """
    sink = StringSink()
    print_joined(
        items,
        sink,
        delimiter,
        formatter=formatter,
        strategy=strategy,
        terminator=terminator,
    )
    return sink.getvalue()


def print_range(
    source: Iterable[Any],
    start: int,
    stop: int | None,
    sink: Sink,
    delimiter: str = DEFAULT_DELIMITER,
    *,
    formatter: ElementFormatter | str | None = None,
    strategy: JoinStrategy | str = JoinStrategy.PEEL_FIRST,
    terminator: str = "",
) -> None:
    """Write the ``[start, stop)`` window of ``source`` to ``sink``.

    ``start`` and ``stop`` are positions in the traversal order of ``source``
    (``stop=None`` runs to exhaustion), so this works for containers and
    single-pass iterators alike.

    Raises:
        InvalidArgumentError: On negative positions, ``stop < start``, or any
            argument rejected by `print_joined`.
    """
    window: Iterable[Any] = _window(source, start, stop)
    print_joined(
        window,
        sink,
        delimiter,
        formatter=formatter,
        strategy=strategy,
        terminator=terminator,
    )


def format_range(
    source: Iterable[Any],
    start: int,
    stop: int | None,
    delimiter: str = DEFAULT_DELIMITER,
    *,
    formatter: ElementFormatter | str | None = None,
    strategy: JoinStrategy | str = JoinStrategy.PEEL_FIRST,
    terminator: str = "",
) -> str:
    """Return the ``[start, stop)`` window of ``source`` rendered as text."""
    sink = StringSink()
    print_range(
        source,
        start,
        stop,
        sink,
        delimiter,
        formatter=formatter,
        strategy=strategy,
        terminator=terminator,
    )
    return sink.getvalue()
