"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from agecalc.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["calc", "--help"], ["--first-name", "--last-name", "--email", "--day", "--month", "--year"]),
    (["validate", "--help"], ["--email", "--day", "--examples"]),
    (["clock", "--help"], ["--ticks", "--interval"]),
    (["form", "--help"], ["interactively"]),
    (["theme", "--help"], ["show", "set", "toggle"]),
    (["theme", "set", "--help"], ["VALUE"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(
    "args",
    [["calc"], ["validate"], ["clock"], ["form"], ["theme"], ["theme", "show"], ["theme", "set"]],
)
def test_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
