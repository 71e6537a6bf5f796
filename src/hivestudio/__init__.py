"""Scripted walkthroughs for driving agent teams from the command line.

`hivestudio` bundles example workflows (an ML pipeline and a simple REST API)
that print the commands a user would run by hand. Nothing is executed; the
scenarios are plain text written to a line sink. See :mod:`hivestudio.catalog`
for lookup by slug and :mod:`hivestudio.cli` for the menu.

The runners themselves are loaded on first access so that
``python -m hivestudio.examples.<name>`` finds its module unimported.
"""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from .catalog import (
    RUNNERS,
    SCENARIOS,
    UnknownScenarioError,
    add_line_listener,
    arun_scenario,
    get_runner,
    get_scenario,
    observe_lines,
    remove_line_listener,
    run_all,
    run_scenario,
)
from .config import ExampleConfig
from .scenario import Scenario, ScenarioRun, Step
from .sinks import CaptureSink, StdoutSink, TextSink

__all__ = [
    "CaptureSink",
    "ExampleConfig",
    "RUNNERS",
    "SCENARIOS",
    "Scenario",
    "ScenarioRun",
    "StdoutSink",
    "Step",
    "TextSink",
    "UnknownScenarioError",
    "add_line_listener",
    "arun_scenario",
    "create_ml_pipeline",
    "create_simple_api",
    "get_runner",
    "get_scenario",
    "observe_lines",
    "remove_line_listener",
    "run_all",
    "run_scenario",
]

_LAZY_RUNNERS = {
    "create_ml_pipeline": "hivestudio.examples.ml_pipeline",
    "create_simple_api": "hivestudio.examples.simple_api",
}


def __getattr__(name: str) -> Any:
    module_name = _LAZY_RUNNERS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module_name), name)


try:
    __version__ = version("hivestudio")
except PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.0.0"
