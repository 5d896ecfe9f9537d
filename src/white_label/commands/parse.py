"""Command: parse a clause list without resolving it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.commands._base import CLAUSE_TEXT, WlCommand

if TYPE_CHECKING:
    from white_label.commands._context import AppContext


@click.command(
    cls=WlCommand,
    examples="""\
  white-label parse '"Northwind" => 8080, "Contoso" => 9090, _ => 80'
  white-label --json parse '"Development" => true, _ => false'""",
)
@click.argument("clauses", type=CLAUSE_TEXT)
@click.pass_obj
def parse(app: AppContext, clauses: str) -> None:
    """Validate CLAUSES and list the parsed rules. No brand is needed."""
    app.emit(app.service.parse(clauses))
