"""Root CLI group for agegate with global flags and command registration."""

from __future__ import annotations

import click

from agegate import __version__
from agegate.commands import register_commands
from agegate.commands._base import AgeGroup
from agegate.commands._context import AppContext
from agegate.config.settings import AgegateSettings
from agegate.errors import ConfigError


@click.group(cls=AgeGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="agegate")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
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
    """agegate — validate ages with typed, recoverable errors."""
    try:
        settings = AgegateSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
