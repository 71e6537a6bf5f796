from __future__ import annotations

import argparse
import json
import logging

from .catalog import SCENARIOS, UnknownScenarioError, get_scenario, run_scenario, slugs
from .config import ExampleConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the scenario menu."""

    parser = argparse.ArgumentParser(
        prog="hivestudio",
        description="Print scripted agent-team workflow walkthroughs.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"),
        default=None,
        help="Override HIVESTUDIO_LOG_LEVEL",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List the bundled scenarios")

    run = commands.add_parser("run", help="Print one or more scenarios")
    run.add_argument("slugs", nargs="*", metavar="slug", help="Scenario to run")
    run.add_argument("--all", action="store_true", help="Run every scenario in order")

    show = commands.add_parser("show", help="Describe a scenario without the narration")
    show.add_argument("slug", help="Scenario to describe")
    show.add_argument(
        "--json",
        action="store_true",
        help="Emit the full scenario as JSON instead of bare commands",
    )
    return parser


def _configure_logging(config: ExampleConfig, override: str | None) -> None:
    if override is not None:
        config.log_level = override
    logging.basicConfig(
        level=config.level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point used by ``hivestudio`` and ``python -m hivestudio``."""

    parser = build_parser()
    args = parser.parse_args(argv)
    config = ExampleConfig.from_env()
    _configure_logging(config, args.log_level)
    logger.debug("resolved config %s", config)

    try:
        if args.command == "list":
            for scenario in SCENARIOS:
                print(f"{scenario.slug}\t{scenario.title}")
        elif args.command == "run":
            if args.all and args.slugs:
                parser.error("pass scenario slugs or --all, not both")
            selected = slugs() if args.all else tuple(args.slugs)
            if not selected:
                parser.error("run needs at least one scenario slug or --all")
            # resolve every slug before printing anything
            for slug in selected:
                get_scenario(slug)
            for slug in selected:
                run_scenario(slug, config=config)
        else:
            scenario = get_scenario(args.slug)
            if args.json:
                print(json.dumps(scenario.as_dict(), indent=2, ensure_ascii=False))
            else:
                for command in scenario.commands():
                    print(command)
    except UnknownScenarioError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
