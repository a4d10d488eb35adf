"""Root CLI group for quickstand with global flags and command registration."""

from __future__ import annotations

import click

from quickstand import __version__
from quickstand.commands import register_commands
from quickstand.commands._context import AppContext
from quickstand.config.settings import QuickstandSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="quickstand")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (IDs only for lists).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "--config-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Directory holding config.json (default: ~/.quickstand).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_dir: str | None,
) -> None:
    """quickstand — track groups of git repositories for standups."""
    settings = QuickstandSettings.from_cli(
        config_dir=config_dir,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
