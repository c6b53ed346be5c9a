"""Command: resolve one import reference the way the compiler hook would."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scssimporter.commands._examples import with_examples

if TYPE_CHECKING:
    from scssimporter.commands._context import AppContext


@click.command()
@with_examples(
    """\
  scssimporter resolve variables --from src/styles/main.scss
  scssimporter resolve ~bootstrap --from src/styles/main.scss
  scssimporter resolve ~@scope/ui/buttons --from src/app.scss
  scssimporter --json resolve ./tokens.json --from src/app.scss
  scssimporter -v resolve ./theme.yaml --from src/app.scss --keep-tmp"""
)
@click.argument("reference")
@click.option(
    "--from",
    "previous_file",
    required=True,
    help="File containing the import statement.",
)
@click.option(
    "--keep-tmp",
    is_flag=True,
    help="Do not clear the temp area before resolving.",
)
@click.pass_obj
def resolve(app: AppContext, reference: str, previous_file: str, keep_tmp: bool) -> None:
    """Resolve REFERENCE as an @import inside --from."""
    from scssimporter.services.operations import resolve_reference

    importer = app.importer(reset_tmp=not keep_tmp)
    app.emit(resolve_reference(importer, reference, previous_file))
