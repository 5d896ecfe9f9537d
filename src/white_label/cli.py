"""Root CLI group for white-label with global flags and command registration."""

from __future__ import annotations

import click

from white_label import __version__
from white_label.commands import register_commands
from white_label.commands._base import WlGroup
from white_label.commands._context import AppContext
from white_label.config.settings import WhiteLabelSettings


@click.group(cls=WlGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="white-label")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the value or path.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override manifest path.")
@click.option(
    "-b",
    "--brand",
    default=None,
    help="Brand to build for (overrides WHITE_LABEL_BRAND).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    brand: str | None,
) -> None:
    """white-label — bake brand-specific constants into a build."""
    ctx.ensure_object(dict)
    settings = WhiteLabelSettings.from_cli(
        config_path=config_path,
        brand=brand,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
