"""Tests for the list and check commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from gqlscalars.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestListCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["name"] for item in data["data"]["items"]] == [
            "String",
            "Int",
            "Float",
            "Boolean",
            "ID",
        ]

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.output.split() == ["String", "Int", "Float", "Boolean", "ID"]

    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "Name" in result.output
        assert "Boolean" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestCheckCommand:
    def test_builtin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "ID"])
        assert result.exit_code == 0
        assert result.output.strip() == "true"

    def test_custom(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "DateTime"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["specified"] is False
