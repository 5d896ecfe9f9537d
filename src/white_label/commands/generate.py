"""Command: bake every manifest constant into a generated module."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.commands._base import WlCommand, format_option, output_option

if TYPE_CHECKING:
    from white_label.commands._context import AppContext


@click.command(
    cls=WlCommand,
    examples="""\
  WHITE_LABEL_BRAND=Northwind white-label generate
  white-label --brand Contoso generate --output src/app/brand.py
  white-label --brand Contoso generate --format json --output dist/brand.json""",
)
@format_option("Generated file syntax (default: [build] format).")
@output_option("Output file (default: [build] output).")
@click.pass_obj
def generate(app: AppContext, fmt: str | None, output: str | None) -> None:
    """Resolve every constant in white-label.toml and write them to one file.

    Nothing is written unless every constant resolves.
    """
    app.emit(app.service.generate(target=fmt, output=output))
