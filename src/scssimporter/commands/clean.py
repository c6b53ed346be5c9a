"""Command: remove the temp area holding generated declaration files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scssimporter.commands._examples import with_examples

if TYPE_CHECKING:
    from scssimporter.commands._context import AppContext


@click.command()
@with_examples("  scssimporter clean\n  scssimporter --json clean")
@click.pass_obj
def clean(app: AppContext) -> None:
    """Delete the temp area (node_modules/.tmp/scss-importer by default)."""
    from scssimporter.services.operations import clean_temp_area

    app.emit(clean_temp_area(app.temp_area))
