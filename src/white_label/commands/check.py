"""Command: syntax-check every constant in white-label.toml."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.commands._base import WlCommand

if TYPE_CHECKING:
    from white_label.commands._context import AppContext


@click.command(
    cls=WlCommand,
    examples="""\
  white-label check
  white-label --config build/white-label.toml check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Parse every manifest constant without resolving any of them."""
    app.emit(app.service.check())
