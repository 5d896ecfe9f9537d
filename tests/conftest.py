"""Shared pytest fixtures and test helpers for white-label tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from white_label.config.settings import WhiteLabelSettings

MANIFEST = """\
[build]
format = "python"
output = "generated/brand.py"

[constants]
ENDPOINT = '''
"Northwind" => "https://northwind.example.com/",
"Contoso"   => "https://contoso.example.com/",
'''
PORT = '"Northwind" => 8080, "Contoso" => 9090'
DEBUG = '"Development" => true, _ => false'
RATIO = '"Northwind" => 1.5, _ => 3.14'
INITIAL = "\\"Northwind\\" => 'N', \\"Contoso\\" => 'C'"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own brand configuration out of the tests."""
    for var in ("WHITE_LABEL_BRAND", "WHITE_LABEL_CONFIG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state and the bound brand after each test (the CLI reconfigures both)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    wl = logging.getLogger("white_label")
    wl_level = wl.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    wl.setLevel(wl_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    """A white-label.toml with one constant of every literal kind."""
    path = tmp_path / "white-label.toml"
    path.write_text(MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., WhiteLabelSettings]:
    """Build settings rooted at ``tmp_path``, discovering any manifest there."""

    def _make(**kwargs: Any) -> WhiteLabelSettings:
        return WhiteLabelSettings.from_cli(project_root=tmp_path, **kwargs)

    return _make


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to ``tmp_path`` so the CLI discovers only its manifest.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(tmp_path)
