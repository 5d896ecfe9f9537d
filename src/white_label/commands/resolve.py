"""Command: resolve one clause list for the configured brand."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.commands._base import CLAUSE_TEXT, WlCommand, format_option

if TYPE_CHECKING:
    from white_label.commands._context import AppContext


@click.command(
    cls=WlCommand,
    examples="""\
  WHITE_LABEL_BRAND=Northwind white-label resolve '"Northwind" => 8080, "Contoso" => 9090'
  white-label --brand Contoso -q resolve '"Development" => true, _ => false'
  white-label --brand Contoso resolve --format json '"Contoso" => "https://contoso.example.com/"'
  echo '"Northwind" => 1.5, _ => 2.0' | white-label --brand Northwind resolve -""",
)
@click.argument("clauses", type=CLAUSE_TEXT)
@format_option("Literal syntax for the rendered value (default: [build] format).")
@click.pass_obj
def resolve(app: AppContext, clauses: str, fmt: str | None) -> None:
    """Select the value CLAUSES yields for the configured brand.

    CLAUSES is a list of `"Brand" => literal` rules, optionally ending in a
    `_ => literal` wildcard. Pass `-` to read it from stdin.
    """
    app.emit(app.service.resolve(clauses, target=fmt))
