"""Command: print the SCSS declarations generated from a value manifest."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scssimporter.commands._examples import with_examples

if TYPE_CHECKING:
    from scssimporter.commands._context import AppContext


@click.command()
@with_examples(
    """\
  scssimporter declarations tokens.json
  scssimporter declarations theme.yaml
  scssimporter --json declarations breakpoints.py"""
)
@click.argument("manifest", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_obj
def declarations(app: AppContext, manifest: Path) -> None:
    """Render MANIFEST (.json, .yaml, .yml, .py) as $variable declarations."""
    from scssimporter.services.operations import render_declarations

    app.emit(render_declarations(manifest))
