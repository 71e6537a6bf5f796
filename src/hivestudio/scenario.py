"""Shared data structures for the scripted workflow scenarios."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .sinks import StdoutSink, TextSink


@dataclass(frozen=True, slots=True)
class Step:
    """A single numbered instruction.

    Attributes:
        description: Short human-readable label printed after ``Step N:``.
        command: Literal shell command the reader is expected to run by hand.
    """

    description: str
    command: str


@dataclass(frozen=True, slots=True)
class Scenario:
    """Describes a scripted workflow and how it is laid out on the console.

    Attributes:
        slug: Stable identifier used by the catalog and the CLI.
        title: Short name shown in listings.
        banner: First line printed when the scenario runs.
        steps: Ordered instructions, numbered from one.
        footer: Completion lines printed after the last step.
        tags: Topic labels such as ``("ml", "team")``.
    """

    slug: str
    title: str
    banner: str
    steps: tuple[Step, ...]
    footer: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    def iter_lines(self) -> Iterator[str]:
        """Yield the rendered lines in output order.

        Every step after the first, and the first footer line, carry a leading
        newline so consecutive blocks are separated by an empty line.
        """

        yield self.banner
        for number, step in enumerate(self.steps, start=1):
            prefix = "" if number == 1 else "\n"
            yield f"{prefix}Step {number}: {step.description}"
            yield f"Command: {step.command}"
        for index, line in enumerate(self.footer):
            yield f"\n{line}" if index == 0 else line

    def render(self) -> tuple[str, ...]:
        """Return the rendered lines as a tuple.

        >>> demo = Scenario(
        ...     slug="demo",
        ...     title="Demo",
        ...     banner="Demo banner",
        ...     steps=(Step("Start", "make start"), Step("Stop", "make stop")),
        ...     footer=("Done",),
        ... )
        >>> demo.render()  # doctest: +NORMALIZE_WHITESPACE
        ('Demo banner', 'Step 1: Start', 'Command: make start',
         '\\nStep 2: Stop', 'Command: make stop', '\\nDone')
        """

        return tuple(self.iter_lines())

    def emit(self, sink: TextSink | None = None) -> None:
        """Write the rendered lines into ``sink`` (stdout by default)."""

        target = sink if sink is not None else StdoutSink()
        for line in self.iter_lines():
            target.write_line(line)

    def commands(self) -> tuple[str, ...]:
        return tuple(step.command for step in self.steps)

    def as_dict(self) -> dict[str, Any]:
        """Represent the scenario as plain data for JSON output or testing."""

        return {
            "slug": self.slug,
            "title": self.title,
            "banner": self.banner,
            "steps": [
                {"number": number, "description": step.description, "command": step.command}
                for number, step in enumerate(self.steps, start=1)
            ],
            "footer": list(self.footer),
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class ScenarioRun:
    """Holds the lines produced by one scenario execution."""

    slug: str
    lines: tuple[str, ...]


__all__ = ["Step", "Scenario", "ScenarioRun"]
