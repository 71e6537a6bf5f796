from __future__ import annotations

import io
from contextlib import redirect_stdout

import pytest

from hivestudio import CaptureSink, StdoutSink, TextSink


def test_sinks_satisfy_protocol() -> None:
    assert isinstance(StdoutSink(), TextSink)
    assert isinstance(CaptureSink(), TextSink)


def test_stdout_sink_follows_redirection() -> None:
    sink = StdoutSink()
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        sink.write_line("hello")
        sink.write_line("\nworld")
    assert buffer.getvalue() == "hello\n\nworld\n"


def test_stdout_sink_explicit_stream() -> None:
    buffer = io.StringIO()
    StdoutSink(buffer).write_line("line")
    assert buffer.getvalue() == "line\n"


def test_stdout_sink_propagates_closed_stream() -> None:
    buffer = io.StringIO()
    buffer.close()
    with pytest.raises(ValueError):
        StdoutSink(buffer).write_line("line")


def test_capture_sink_text_and_clear() -> None:
    sink = CaptureSink()
    sink.write_line("a")
    sink.write_line("\nb")
    assert sink.lines == ["a", "\nb"]
    assert sink.text() == "a\n\nb\n"
    sink.clear()
    assert sink.lines == []
    assert sink.text() == ""
