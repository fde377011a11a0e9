# topmark:header:start
#
#   project      : SeqJoin
#   file         : sinks.py
#   file_relpath : src/seqjoin/core/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks for the sequence printer.

A sink is any object with a ``write(str)`` method: ``sys.stdout``, an
``io.StringIO``, an open text file, or one of the adapters below. Sinks are
borrowed for the duration of a call; the printer never closes or flushes them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from seqjoin.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from seqjoin.cli.console_api import ConsoleLike


class Sink(Protocol):
    """Append-only text destination."""

    def write(self, text: str, /) -> object:
        """Append ``text`` to the destination."""
        ...


class StringSink:
    """In-memory sink collecting everything written to it.

    Attributes:
        parts (list[str]): Chunks in write order.
    """

    parts: list[str]

    def __init__(self) -> None:
        self.parts = []

    def write(self, text: str, /) -> int:
        """Append ``text`` and return the number of characters written."""
        self.parts.append(text)
        return len(text)

    def getvalue(self) -> str:
        """Return the accumulated text."""
        return "".join(self.parts)


class ConsoleSink:
    """Adapt a program-output console to the `Sink` protocol.

    Text goes through `ConsoleLike.write`, byte for byte: no newline is added
    and escape sequences inside elements or delimiters are never stripped.

    Args:
        console (ConsoleLike): The console receiving the text.
    """

    def __init__(self, console: ConsoleLike) -> None:
        self.console = console

    def write(self, text: str, /) -> int:
        """Forward ``text`` to the console unchanged."""
        return self.console.write(text)


def ensure_sink(sink: object) -> Sink:
    """Validate that ``sink`` can receive text.

    Args:
        sink (object): Candidate sink.

    Returns:
        Sink: The same object, typed as a sink.

    Raises:
        InvalidArgumentError: If ``sink`` is ``None`` or lacks a callable ``write``.
    """
    if sink is None:
        raise InvalidArgumentError("An output sink is required")
    if not callable(getattr(sink, "write", None)):
        raise InvalidArgumentError(f"Output sink has no write() method: {sink!r}")
    return sink  # type: ignore[return-value]
