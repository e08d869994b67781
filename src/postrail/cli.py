"""Root CLI group for postrail with global flags and command registration."""

from __future__ import annotations

import click

from postrail import __version__
from postrail.commands import register_commands
from postrail.commands._context import AppContext
from postrail.config.settings import PostrailSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="postrail")
@click.option("--json", "json_output", is_flag=True, help="Print the response body as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug-level logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--database", "database_path", default=None, help="Override SQLite database path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    database_path: str | None,
) -> None:
    """postrail — create, list, and show posts."""
    ctx.ensure_object(dict)
    settings = PostrailSettings.from_cli(
        config_path=config_path,
        database_path=database_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
