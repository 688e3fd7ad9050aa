"""Root CLI group for penalcalc with global flags and command registration."""

from __future__ import annotations

import click

from penalcalc import __version__
from penalcalc.commands import register_commands
from penalcalc.commands._context import AppContext
from penalcalc.config.settings import PenalSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="penalcalc")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
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
    """penalcalc — sentence execution, dosimetry, and fine calculator."""
    settings = PenalSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
