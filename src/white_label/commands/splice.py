"""Command: expand brand! call sites in a source template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.commands._base import WlCommand, format_option, output_option

if TYPE_CHECKING:
    from white_label.commands._context import AppContext


@click.command(
    cls=WlCommand,
    examples="""\
  WHITE_LABEL_BRAND=Northwind white-label splice config.py.in -o config.py
  white-label --brand Contoso splice settings.json.in --format json > settings.json""",
)
@click.argument("template", type=click.Path(dir_okay=False, resolve_path=True))
@format_option("Literal syntax for spliced values (default: [build] format).")
@output_option("Write the expanded file here instead of stdout.")
@click.pass_obj
def splice(app: AppContext, template: str, fmt: str | None, output: str | None) -> None:
    """Replace each `brand! { ... }` call site in TEMPLATE with its value."""
    app.emit(app.service.splice(template, output=output, target=fmt))
