# topmark:header:start
#
#   project      : SeqJoin
#   file         : test_sinks.py
#   file_relpath : tests/core/test_sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink adapters and validation."""

from __future__ import annotations

import io

import pytest

from seqjoin.cli.console import ClickConsole
from seqjoin.core.errors import InvalidArgumentError
from seqjoin.core.joiner import print_joined
from seqjoin.core.sinks import ConsoleSink, StringSink, ensure_sink


def test_string_sink_accumulates_in_order() -> None:
    """`StringSink` keeps chunks in write order."""
    sink = StringSink()
    assert sink.write("ab") == 2
    assert sink.write("") == 0
    sink.write("c")
    assert sink.parts == ["ab", "", "c"]
    assert sink.getvalue() == "abc"


def test_console_sink_forwards_without_newlines() -> None:
    """`ConsoleSink` should never add line breaks of its own."""
    buf = io.StringIO()
    console = ClickConsole(enable_color=False, out=buf, err=io.StringIO())
    print_joined([1, 2, 3], ConsoleSink(console), " , ", terminator="\n")
    assert buf.getvalue() == "1 , 2 , 3\n"


def test_console_sink_keeps_escape_sequences_without_color() -> None:
    """Escape sequences are element data and reach the stream unchanged."""
    buf = io.StringIO()
    console = ClickConsole(enable_color=False, out=buf, err=io.StringIO())
    print_joined(["\x1b[31mred", "x"], ConsoleSink(console), "\x1b[0m")
    assert buf.getvalue() == "\x1b[31mred\x1b[0mx"

def test_ensure_sink_accepts_text_streams() -> None:
    """Any object with a callable ``write`` is a sink."""
    buf = io.StringIO()
    assert ensure_sink(buf) is buf


def test_ensure_sink_rejects_none() -> None:
    """A missing sink is an invalid argument."""
    with pytest.raises(InvalidArgumentError, match="required"):
        ensure_sink(None)


def test_ensure_sink_rejects_non_callable_write() -> None:
    """A ``write`` attribute that is not callable does not make a sink."""

    class Fake:
        write = "nope"

    with pytest.raises(InvalidArgumentError, match="write"):
        ensure_sink(Fake())


def test_sink_write_errors_propagate() -> None:
    """Errors raised by the sink reach the caller."""

    class Broken:
        def write(self, text: str) -> int:
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        print_joined([1], Broken())
