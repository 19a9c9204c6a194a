"""Tests for the ``validate`` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from agecalc.cli import cli


@pytest.mark.usefixtures("_isolated_cli")
class TestValidate:
    def test_all_valid(self, cli_runner: CliRunner) -> None:
        args = [
            "--json",
            "validate",
            "--first-name",
            "Ana",
            "--last-name",
            "Souza",
            "--email",
            "ana@mail.com",
            "--day",
            "1",
            "--month",
            "1",
            "--year",
            "2000",
        ]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "validate"
        assert data["data"]["errors"] == {}
        assert data["data"]["status"] == "editing"

    def test_reports_errors(self, cli_runner: CliRunner) -> None:
        args = ["--json", "validate", "--email", "nope", "--day", "31", "--month", "4"]
        args += ["--year", "2020"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "INVALID_FIELDS"
        errors = data["data"]["errors"]
        assert errors["email"] == "Email inválido"
        assert errors["day"] == "Máx: 30 dias"
        assert "month" not in errors
        assert data["data"]["root_error"] is None

    def test_rich_output_lists_errors(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--year", "20"])
        assert result.exit_code == 1
        assert "Use 4 dígitos" in result.stderr
        assert "Campo" in result.stderr
