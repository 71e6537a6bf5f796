"""Line-oriented text sinks that scenarios write into."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything that accepts output one line at a time."""

    def write_line(self, line: str) -> None: ...


class StdoutSink:
    """Print lines to ``stream`` or, when unset, to the current ``sys.stdout``.

    ``sys.stdout`` is looked up on every write so redirections installed after
    construction (``contextlib.redirect_stdout``, pytest's ``capsys``) apply.
    Write failures from the stream propagate unchanged.
    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        print(line, file=self._stream if self._stream is not None else sys.stdout)


@dataclass(slots=True)
class CaptureSink:
    """Collect lines in memory; used by tests and by the catalog helpers."""

    lines: list[str] = field(default_factory=list)

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        """Return the captured output the way ``print`` would have laid it out."""

        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


__all__ = ["TextSink", "StdoutSink", "CaptureSink"]
