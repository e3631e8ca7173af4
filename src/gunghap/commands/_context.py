"""AppContext, the object every gunghap subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gunghap.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gunghap.config.settings import GunghapSettings
    from gunghap.services.destiny import DestinyService
    from gunghap.services.result import ServiceResult


class AppContext:
    """Settings for this run plus the service and output wiring built from them.

    Creating it configures logging and switches telemetry to match
    ``--verbose``.
    """

    def __init__(self, settings: GunghapSettings) -> None:
        from gunghap.config.logging import configure_logging
        from gunghap.services.telemetry import enable_telemetry

        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            show_strokes=settings.display.show_strokes,
            show_process=settings.display.show_process,
        )
        self._destiny: DestinyService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        enable_telemetry(settings.verbose)

    @property
    def destiny(self) -> DestinyService:
        if self._destiny is None:
            from gunghap.services.destiny import DestinyService

            self._destiny = DestinyService(self.settings)
        return self._destiny

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits with code 1.

        Warnings go to stderr so ``gunghap -q destiny ...`` pipes only the
        score. JSON output already carries them in the payload.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
