"""Tests for the format and parse commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from datespin.cli import cli

US = ["--pattern", "MM/dd/yyyy HH:mm"]


class TestFormatCommand:
    def test_rich_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "format", "2024-03-05T09:30"])
        assert result.exit_code == 0
        assert "03/05/2024 09:30" in result.output

    def test_canonical_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "-q", "format", "03/05/2024"])
        assert result.exit_code == 0
        assert result.output.strip() == "03/05/2024 00:00"

    def test_unreadable_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "format", "garbage"])
        assert result.exit_code == 1
        assert "ERROR" in result.output


class TestParseCommand:
    def test_full_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "-q", "parse", "03/05/2024 09:30"])
        assert result.exit_code == 0
        assert result.output.strip() == "2024-03-05T09:30:00"

    def test_date_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "--json", "parse", "03/05/2024"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["value"] == "2024-03-05T00:00:00"
        assert data["canonical"] == "03/05/2024 00:00"

    def test_failure_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "parse", "not-a-date"])
        assert result.exit_code == 1
        assert "could not be parsed at index 0" in result.output

    def test_failure_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [*US, "--json", "parse", "03/05/2024 09:3x"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "PARSE_ERROR"
        assert payload["error"]["detail"]["error_index"] == 10
