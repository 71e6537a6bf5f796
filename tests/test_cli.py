from __future__ import annotations

import json
import os
from unittest import mock

import pytest

from hivestudio import get_scenario
from hivestudio.cli import build_parser, main


def test_list(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "ml-pipeline\tML pipeline\nsimple-api\tSimple API\n"


def test_run_single(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["run", "simple-api"]) == 0
    out = capsys.readouterr().out
    assert out == "".join(f"{line}\n" for line in get_scenario("simple-api").render())


def test_run_all(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["run", "--all"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("🤖 Creating ML Pipeline")
    assert out.rstrip("\n").endswith("Run the commands above to see the ecosystem in action!")


def test_run_unknown_slug_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["run", "ml-pipeline", "web-app"])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "unknown scenario 'web-app'" in captured.err


@pytest.mark.parametrize("argv", [["run"], ["run", "--all", "ml-pipeline"]])
def test_run_usage_errors(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_show_commands(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "ml-pipeline"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == list(get_scenario("ml-pipeline").commands())
    assert lines[0] == './scripts/spawn-team.sh ml-team "Recommendation system"'


def test_show_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", "simple-api", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == get_scenario("simple-api").as_dict()
    assert payload["steps"][2]["command"] == "npx claude-flow swarm status"


def test_show_unknown_slug() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["show", "nope"])
    assert excinfo.value.code == 2


def test_log_level_flag_overrides_env() -> None:
    with mock.patch.dict(os.environ, {"HIVESTUDIO_LOG_LEVEL": "ERROR"}, clear=True), mock.patch(
        "hivestudio.cli.logging.basicConfig"
    ) as basic_config:
        assert main(["--log-level", "debug", "list"]) == 0
    assert basic_config.call_args.kwargs["level"] == 10


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
