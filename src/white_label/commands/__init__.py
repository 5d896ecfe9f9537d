"""Subcommand modules for white-label.

Provides register_commands() which uses deferred imports to keep
``white-label --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from white_label.commands.check import check
    from white_label.commands.generate import generate
    from white_label.commands.parse import parse
    from white_label.commands.resolve import resolve
    from white_label.commands.splice import splice

    cli.add_command(resolve)
    cli.add_command(parse)
    cli.add_command(check)
    cli.add_command(generate)
    cli.add_command(splice)
