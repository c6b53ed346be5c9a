"""Human and JSON rendering of ServiceResult.

JSON mode dumps the result model as is. Human mode prints a status line
followed by the payload; declaration text and inline contents are written
raw, unstyled, so the output can be pasted into a style sheet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from scssimporter.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from scssimporter.services.result import ServiceResult

# Payload keys printed verbatim after the key-value block.
_RAW_KEYS = ("contents", "declarations")


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        _render_success(result, console, verbose=settings.verbose)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any) -> None:
    label = (f"  {key}: ", "imp.key")
    if key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    elif key.endswith(("path", "file", "dir")):
        v = Text(str(value), style="imp.path")
    else:
        v = Text(str(value))
    console.print(Text.assemble(label, v))


def _render_success(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="imp.ok"), Text(f"  {result.op}", style="imp.op"))
    for key, value in result.data.items():
        if key in _RAW_KEYS or value is None:
            continue
        _field(console, key, value)
    for key in _RAW_KEYS:
        raw = result.data.get(key)
        if raw is None:
            continue
        if key == "contents" and not verbose:
            # Style-sheet bodies can be long; show them on request only.
            continue
        console.print()
        console.out(raw, highlight=False)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="imp.error"),
        Text(f"  {result.op}", style="imp.op"),
        Text(": "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="imp.key"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
