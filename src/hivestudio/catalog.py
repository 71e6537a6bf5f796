"""Registry of the bundled scenarios and helpers to run them by slug."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator, Mapping
from contextlib import contextmanager
from importlib import import_module
from types import MappingProxyType

from .config import ExampleConfig
from .scenario import Scenario, ScenarioRun
from .sinks import CaptureSink, StdoutSink, TextSink
from .workflows import ML_PIPELINE, SIMPLE_API

logger = logging.getLogger(__name__)

Runner = Callable[..., Awaitable[None]]
LineListener = Callable[[str, str], None]

SCENARIOS: tuple[Scenario, ...] = (ML_PIPELINE, SIMPLE_API)

# slug -> "module:attribute"; resolved on first use so importing the catalog
# never imports the runnable modules.
RUNNERS: Mapping[str, str] = MappingProxyType(
    {
        ML_PIPELINE.slug: "hivestudio.examples.ml_pipeline:create_ml_pipeline",
        SIMPLE_API.slug: "hivestudio.examples.simple_api:create_simple_api",
    }
)

_LISTENERS: list[LineListener] = []


class UnknownScenarioError(LookupError):
    """Raised when a slug does not name a bundled scenario."""

    def __init__(self, slug: str, available: tuple[str, ...]) -> None:
        self.slug = slug
        self.available = available
        valid = ", ".join(available)
        super().__init__(f"unknown scenario '{slug}'. Expected one of: {valid}")


class _RecordingSink:
    """Forward lines to ``target`` while keeping a copy and notifying listeners."""

    __slots__ = ("_slug", "_target", "lines")

    def __init__(self, slug: str, target: TextSink) -> None:
        self._slug = slug
        self._target = target
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self._target.write_line(line)
        self.lines.append(line)
        for listener in tuple(_LISTENERS):
            listener(self._slug, line)


def slugs() -> tuple[str, ...]:
    return tuple(scenario.slug for scenario in SCENARIOS)


def get_scenario(slug: str) -> Scenario:
    """Return the scenario registered under ``slug``.

    Raises:
        UnknownScenarioError: If no scenario uses ``slug``.
    """

    for scenario in SCENARIOS:
        if scenario.slug == slug:
            return scenario
    raise UnknownScenarioError(slug, slugs())


def get_runner(slug: str) -> Runner:
    """Import and return the async runner registered under ``slug``."""

    module_name, _, attribute = RUNNERS[get_scenario(slug).slug].partition(":")
    return getattr(import_module(module_name), attribute)


async def arun_scenario(
    slug: str,
    *,
    sink: TextSink | None = None,
    config: ExampleConfig | None = None,
) -> ScenarioRun:
    """Await a scenario's runner inside an existing event loop.

    Takes the same arguments and returns the same result as :func:`run_scenario`.
    """

    runner = get_runner(slug)
    recorder = _RecordingSink(slug, sink if sink is not None else StdoutSink())
    active = config or ExampleConfig()

    logger.info("running scenario %s", slug)
    if active.trace_lines:
        with observe_lines():
            await runner(sink=recorder)
    else:
        await runner(sink=recorder)
    logger.info("scenario %s emitted %d lines", slug, len(recorder.lines))
    return ScenarioRun(slug=slug, lines=tuple(recorder.lines))


def run_scenario(
    slug: str,
    *,
    sink: TextSink | None = None,
    config: ExampleConfig | None = None,
) -> ScenarioRun:
    """Run a scenario's async runner to completion and report what it printed.

    Args:
        slug: Scenario identifier such as ``"ml-pipeline"``.
        sink: Destination for the output; standard output when omitted.
        config: Optional settings; ``trace_lines`` logs each line at DEBUG.

    Returns:
        ScenarioRun: The slug paired with the emitted lines.

    Raises:
        UnknownScenarioError: If no scenario uses ``slug``.
        RuntimeError: If called while an event loop is running in this thread;
            await :func:`arun_scenario` there instead.
    """

    get_scenario(slug)
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            "run_scenario() cannot be called from a running event loop; "
            "await arun_scenario() instead"
        )
    return asyncio.run(arun_scenario(slug, sink=sink, config=config))


def run_all(verbose: bool = True) -> list[ScenarioRun]:
    """Execute every scenario in catalog order.

    Args:
        verbose: When ``False`` the output is captured instead of printed.

    Returns:
        list[ScenarioRun]: One entry per scenario.
    """

    results: list[ScenarioRun] = []
    for scenario in SCENARIOS:
        sink: TextSink = StdoutSink() if verbose else CaptureSink()
        results.append(run_scenario(scenario.slug, sink=sink))
    return results


def add_line_listener(listener: LineListener) -> None:
    """Register a callback invoked with ``(slug, line)`` for every emitted line."""

    _LISTENERS.append(listener)


def remove_line_listener(listener: LineListener) -> None:
    """Remove a previously registered line listener; unknown listeners are ignored."""

    try:
        _LISTENERS.remove(listener)
    except ValueError:
        pass


@contextmanager
def observe_lines(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Iterator[None]:
    """Context manager that logs emitted scenario lines during its scope."""

    active_logger = logger or logging.getLogger("hivestudio.catalog")

    def _listener(slug: str, line: str) -> None:
        active_logger.log(level, "scenario=%s line=%r", slug, line)

    add_line_listener(_listener)
    try:
        yield
    finally:
        remove_line_listener(_listener)


__all__ = [
    "RUNNERS",
    "SCENARIOS",
    "UnknownScenarioError",
    "add_line_listener",
    "arun_scenario",
    "get_runner",
    "get_scenario",
    "observe_lines",
    "remove_line_listener",
    "run_all",
    "run_scenario",
    "slugs",
]
