"""Rich Console factory and theme for scssimporter output.

Consoles render into a StringIO buffer so formatters keep a
``format_result() -> str`` contract. Rich drops color codes on its own
when the output is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

IMPORTER_THEME = Theme(
    {
        "imp.ok": "bold green",
        "imp.error": "bold red",
        "imp.op": "bold cyan",
        "imp.key": "dim",
        "imp.path": "blue",
        "imp.kind.stylesheet": "green",
        "imp.kind.manifest_data": "magenta",
        "imp.kind.raw_static": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=IMPORTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a target kind."""
    return f"imp.kind.{kind}"
