"""Root CLI group for datespin with global flags and command registration."""

from __future__ import annotations

import click

from datespin import __version__
from datespin.commands import register_commands
from datespin.commands._context import AppContext
from datespin.config.settings import DatespinSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="datespin")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-p", "--pattern", default=None, help="Canonical pattern, e.g. 'MM/dd/yyyy HH:mm'.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    pattern: str | None,
) -> None:
    """datespin: bounded date-time stepping and text conversion."""
    ctx.ensure_object(dict)
    settings = DatespinSettings.from_cli(
        config_path=config_path,
        pattern=pattern,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
