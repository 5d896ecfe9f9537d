"""Click building blocks shared by the white-label subcommands.

``WlCommand`` adds an eager ``--examples`` flag. ``CLAUSE_TEXT`` is the
argument type for inline clause lists (``-`` reads stdin), and
``format_option`` / ``output_option`` are the ``--format`` and ``--output``
flags the build commands have in common.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from white_label.domain.types import Target

F = TypeVar("F", bound=Callable[..., Any])


class WlCommand(click.Command):
    """Command whose ``examples`` text is printed by ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class WlGroup(click.Group):
    """Root group; subcommands are :class:`WlCommand` without an explicit ``cls=``."""

    command_class = WlCommand


class ClauseTextType(click.ParamType):
    """Inline clause list, or ``-`` to read the whole list from stdin."""

    name = "clauses"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        if value == "-":
            return click.get_text_stream("stdin").read()
        return str(value)


CLAUSE_TEXT = ClauseTextType()


def format_option(help_text: str) -> Callable[[F], F]:
    """``--format python|json``, passed to the command as ``fmt``.

    None means "use ``[build] format`` from the manifest".
    """
    return click.option(
        "--format",
        "fmt",
        type=click.Choice([t.value for t in Target]),
        default=None,
        help=help_text,
    )


def output_option(help_text: str) -> Callable[[F], F]:
    """``-o/--output`` resolved to an absolute file path."""
    return click.option(
        "-o",
        "--output",
        type=click.Path(dir_okay=False, resolve_path=True),
        default=None,
        help=help_text,
    )
