"""Shared ``--examples`` flag for scssimporter commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def with_examples(text: str) -> Callable[[Any], Any]:
    """Give a command an eager ``--examples`` flag that prints *text* and exits.

    Eager, so ``scssimporter resolve --examples`` works without the
    required REFERENCE and ``--from``.
    """

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"{ctx.command_path}:")
        click.echo(text.rstrip("\n"))
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Print example invocations and exit.",
    )
