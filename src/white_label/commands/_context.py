"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the brand service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from white_label.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from white_label.config.settings import WhiteLabelSettings
    from white_label.services.brand import BrandService
    from white_label.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: WhiteLabelSettings) -> None:
        self.settings = settings
        self._service: BrandService | None = None

        from white_label.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, brand=settings.brand
        )

    @property
    def service(self) -> BrandService:
        """The brand service (created lazily on first access)."""
        if self._service is None:
            from white_label.services.brand import BrandService

            self._service = BrandService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with build-gate exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1 so the build stops.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
