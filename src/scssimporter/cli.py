"""Root CLI group for scssimporter with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from scssimporter import __version__
from scssimporter.commands import register_commands
from scssimporter.commands._context import AppContext
from scssimporter.config.settings import ImporterSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="scssimporter")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution steps to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--root",
    "project_root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Project root (node_modules lookup starts here).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    project_root: Path | None,
) -> None:
    """scssimporter — resolve SCSS imports to files, packages, and value manifests."""
    settings = ImporterSettings.from_cli(
        config_path=config_path,
        project_root=project_root,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
