"""Subcommand modules for scssimporter.

register_commands() uses deferred imports so ``scssimporter --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from scssimporter.commands.clean import clean
    from scssimporter.commands.declarations import declarations
    from scssimporter.commands.resolve import resolve

    cli.add_command(resolve)
    cli.add_command(declarations)
    cli.add_command(clean)
