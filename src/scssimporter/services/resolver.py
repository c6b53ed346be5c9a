"""ResolutionEngine — turn one import reference into a ResolvedTarget.

INVARIANT: the engine never raises for an unresolvable reference. Anything
it cannot find is returned as ``None`` ("defer"), leaving the host
compiler's own resolver to report the final error. Only malformed
manifests (:class:`ManifestError`) propagate.

Flow per call::

    reference ─┬─ "~..."  -> PackageLocator ─┐
               └─ other   -> classic import ─┴─> classify by extension
                                                 ├─ .scss/.css -> stylesheet
                                                 ├─ manifest   -> declarations (persisted)
                                                 ├─ script     -> None (defer)
                                                 └─ other      -> raw static
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from scssimporter.domain.declarations import to_declarations
from scssimporter.domain.references import Reference
from scssimporter.domain.targets import ResolvedTarget
from scssimporter.domain.types import (
    INDEX_STEMS,
    SCRIPT_EXTENSIONS,
    TargetKind,
    classify_extension,
)
from scssimporter.infrastructure.manifests import load_value_tree
from scssimporter.infrastructure.packages import PackageLocator
from scssimporter.infrastructure.probe import PathProbe
from scssimporter.infrastructure.workspace import TempArea

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]+")


def normalize_path(path: str) -> str:
    """Resolve *path* to a real ``/``-separated path, textually if that fails."""
    try:
        resolved = str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        resolved = path
    return _SEPARATORS.sub("/", resolved)


def parent_directory(previous_file: str) -> str:
    """Directory of the importing file, normalized."""
    parts = _SEPARATORS.sub("/", previous_file).split("/")
    parent = "/".join(parts[:-1])
    if not parent and previous_file.startswith(("/", "\\")):
        parent = "/"
    return normalize_path(parent or ".")


class ResolutionEngine:
    """Resolve ``@import``/``@use`` references to files.

    Args:
        temp_area: Where declaration text generated from value manifests is
            persisted. The caller owns its lifecycle (see :meth:`TempArea.reset`).
        project_root: Start of the ``node_modules`` walk-up for ``~`` references.
        package_dirs: Extra package directories searched before the walk-up.
        probe: File-name probe; the default applies SCSS partial/extension rules.
    """

    def __init__(
        self,
        temp_area: TempArea,
        *,
        project_root: Path | None = None,
        package_dirs: tuple[Path, ...] = (),
        probe: PathProbe | None = None,
    ) -> None:
        self.temp_area = temp_area
        self.probe = probe or PathProbe()
        self.packages = PackageLocator(
            project_root or Path.cwd(),
            self.resolve_classic,
            package_dirs=package_dirs,
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve_classic(self, current_dir: Path | str, name: str) -> Path | None:
        """Find *name* next to *current_dir*, falling back to ``name/index``."""
        found = self.probe.find_existing(current_dir, name)
        if found is not None:
            return found

        index_dir = Path(current_dir) / name
        for stem in INDEX_STEMS:
            logger.debug("Looking for %s -> %s in %s", name, stem, index_dir)
            found = self.probe.find_existing(index_dir, stem)
            if found is not None:
                return found
        return None

    def find(self, reference_text: str, previous_file: str) -> Path | None:
        """Locate the file *reference_text* names, without classifying it."""
        reference = Reference(reference_text)
        if reference.is_dependency_style:
            return self.packages.resolve_dependency_reference(reference)
        return self.resolve_classic(parent_directory(previous_file), reference_text)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def resolve(self, reference_text: str, previous_file: str) -> ResolvedTarget | None:
        """Resolve one import. ``None`` means "defer to the host compiler"."""
        logger.debug("Trying to resolve %s", reference_text)
        found = self.find(reference_text, previous_file)
        if found is None:
            logger.debug("Not found, deferring %s to the compiler", reference_text)
            return None

        source_path = Path(os.path.normpath(found.absolute())).as_posix()
        if found.suffix in SCRIPT_EXTENSIONS:
            logger.debug("Resolved to a script, deferring: %s", source_path)
            return None

        kind = classify_extension(found.suffix)

        if kind is TargetKind.STYLESHEET:
            logger.debug("Resolved to style sheet: %s", source_path)
            return ResolvedTarget(file_path=source_path, kind=kind, source_path=source_path)

        if kind is TargetKind.MANIFEST_DATA:
            logger.debug("Resolved to value manifest: %s", source_path)
            contents = to_declarations(load_value_tree(found))
            persisted = self.temp_area.write(source_path, contents)
            return ResolvedTarget(
                file_path=persisted.absolute().as_posix(),
                kind=kind,
                contents=contents,
                source_path=source_path,
            )

        logger.debug("Resolved to static file: %s", source_path)
        return ResolvedTarget(
            file_path=source_path,
            kind=kind,
            contents=found.read_text(encoding="utf-8", errors="replace"),
            source_path=source_path,
        )
