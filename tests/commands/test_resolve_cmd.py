"""Tests for the resolve CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from white_label.cli import cli

CLAUSES = '"Northwind" => "https://northwind.example.com/", "Contoso" => "https://contoso.example.com/"'


@pytest.mark.usefixtures("_isolated_project")
class TestResolveCommand:
    def test_brand_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--brand", "Contoso", "resolve", CLAUSES])
        assert result.exit_code == 0, result.output
        assert "OK  resolve" in result.output
        assert "'https://contoso.example.com/'" in result.output

    def test_brand_from_environment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "resolve", CLAUSES], env={"WHITE_LABEL_BRAND": "Northwind"}
        )
        assert result.exit_code == 0, result.output
        assert result.output == "'https://northwind.example.com/'\n"

    def test_flag_overrides_environment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["-q", "--brand", "Contoso", "resolve", '"Northwind" => 1, "Contoso" => 2'],
            env={"WHITE_LABEL_BRAND": "Northwind"},
        )
        assert result.output == "2\n"

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--brand", "Development", "resolve", '"Development" => true, _ => false']
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["value"] is True
        assert data["data"]["rendered"] == "True"

    def test_json_format_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "--brand", "X", "resolve", "--format", "json", "_ => 'c'"]
        )
        assert result.output == '"c"\n'

    def test_reads_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "--brand", "Northwind", "resolve", "-"], input='"Northwind" => 1.5, _ => 2.0\n'
        )
        assert result.output == "1.5\n"

    def test_missing_brand_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "resolve", "_ => 1"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "CONFIG_MISSING"

    def test_no_match_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--brand", "Fabrikam", "resolve", CLAUSES])
        assert result.exit_code == 1
        assert "ERROR  resolve" in result.output
        assert "'Fabrikam'" in result.output

    def test_syntax_error_shows_caret(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--brand", "A", "resolve", '"A" 1'])
        assert result.exit_code == 1
        assert '1 | "A" 1' in result.output
        assert "^ expected `=>` after pattern" in result.output

    def test_unreachable_clause_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "--brand", "B", "resolve", '_ => 0, "B" => 1'])
        assert result.exit_code == 0
        assert "WARNING: clause \"B\" => 1 at line 1 is unreachable" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["resolve", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output
        assert "white-label --brand Contoso -q resolve" in result.output
