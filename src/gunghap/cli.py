"""The ``gunghap`` entry point: global output and config flags, then subcommands."""

from __future__ import annotations

import click

from gunghap import __version__
from gunghap.commands import register_commands
from gunghap.commands._context import AppContext
from gunghap.config.settings import GunghapSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gunghap")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """gunghap: score two Hangul names (이름 궁합) by the strokes of their jamo."""
    ctx.obj = AppContext(
        GunghapSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
