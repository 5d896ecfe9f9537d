"""Tests for the generate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from white_label.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestGenerateCommand:
    def test_default_output(self, cli_runner: CliRunner, manifest: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--brand", "Northwind", "generate"])
        assert result.exit_code == 0, result.output
        generated = (tmp_path / "generated" / "brand.py").read_text(encoding="utf-8")
        assert "PORT: Final[int] = 8080" in generated
        assert "DEBUG: Final[bool] = False" in generated

    def test_quiet_prints_path(self, cli_runner: CliRunner, manifest: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "--brand", "Contoso", "generate", "-o", "out.py"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == str((tmp_path / "out.py").resolve())

    def test_json_format(self, cli_runner: CliRunner, manifest: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--brand", "Contoso", "generate", "--format", "json", "-o", "brand.json"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads((tmp_path / "brand.json").read_text(encoding="utf-8"))
        assert payload["constants"]["PORT"] == 9090

    def test_environment_brand(self, cli_runner: CliRunner, manifest: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "generate"], env={"WHITE_LABEL_BRAND": "Northwind"}
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["brand"] == "Northwind"

    def test_missing_brand_fails_build(
        self, cli_runner: CliRunner, manifest: Path, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["generate"])
        assert result.exit_code == 1
        assert "WHITE_LABEL_BRAND must be set." in result.output
        assert not (tmp_path / "generated").exists()

    def test_unknown_brand_lists_failures(self, cli_runner: CliRunner, manifest: Path) -> None:
        result = cli_runner.invoke(cli, ["--brand", "Fabrikam", "generate"])
        assert result.exit_code == 1
        assert "ENDPOINT:" in result.output
        assert "PORT:" in result.output
