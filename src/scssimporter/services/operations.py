"""CLI-facing operations returning ServiceResult.

These wrap the engine for one-shot use from the command line. Library
callers use :class:`~scssimporter.services.importer.ScssImporter` directly
and get ``ResolvedTarget | None`` instead.
"""

from __future__ import annotations

from pathlib import Path

from scssimporter.domain.declarations import to_declarations
from scssimporter.infrastructure.manifests import ManifestError, load_value_tree
from scssimporter.infrastructure.workspace import TempArea
from scssimporter.services.importer import ScssImporter
from scssimporter.services.result import ServiceResult


def resolve_reference(importer: ScssImporter, reference: str, previous_file: str) -> ServiceResult:
    """Resolve *reference* as if imported from *previous_file*."""
    op = "resolve"
    try:
        target = importer.resolve(reference, previous_file)
    except ManifestError as exc:
        return ServiceResult.failure(op, "INVALID_MANIFEST", str(exc), path=exc.path)

    if target is None:
        return ServiceResult.failure(
            op,
            "DEFERRED",
            f"No file found for {reference!r}; the compiler would use its own lookup",
            reference=reference,
            previous_file=previous_file,
        )

    data = {
        "reference": reference,
        "kind": target.kind.value,
        "file": target.file_path,
        "source_path": target.source_path,
        "contents": target.contents,
    }
    warnings: list[str] = []
    if target.is_inline:
        data["size"] = len(target.contents or "")
        if not target.contents:
            warnings.append(f"{target.source_path} produced no content")
    return ServiceResult.success(op, data, warnings=warnings)


def render_declarations(manifest: Path) -> ServiceResult:
    """Render the declaration text for one value manifest."""
    op = "declarations"
    try:
        tree = load_value_tree(manifest)
    except ManifestError as exc:
        return ServiceResult.failure(op, "INVALID_MANIFEST", str(exc), path=exc.path)
    except FileNotFoundError:
        return ServiceResult.failure(op, "NOT_FOUND", f"No such file: {manifest}")

    text = to_declarations(tree)
    return ServiceResult.success(
        op,
        {"manifest": str(manifest), "count": len(text.splitlines()), "declarations": text},
    )


def clean_temp_area(temp_area: TempArea) -> ServiceResult:
    removed = temp_area.clear()
    return ServiceResult.success("clean", {"tmp_dir": str(temp_area.root), "removed": removed})
