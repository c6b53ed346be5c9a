"""PackageLocator — resolve ``~package`` references to files in node_modules.

Lookup walks up from the project root checking ``node_modules/<name>`` the
way node's own resolver does, after any explicitly configured package
directories. When the reference carries no sub-path the package's
``package.json`` is consulted for default entry points, in priority
order::

    main -> style -> sass -> eyeglass.sassDir -> "" (package-root index)

Each candidate is run through the classic-import algorithm (so
``_partial`` and ``index`` conventions apply inside packages too); the
first one that resolves wins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scssimporter.domain.references import Reference, parse_dependency_reference
from scssimporter.domain.types import SCRIPT_EXTENSIONS, STYLESHEET_EXTENSIONS
from scssimporter.infrastructure.manifests import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
PACKAGES_DIRNAME = "node_modules"

ClassicResolver = Callable[[Path, str], Path | None]


@dataclass(frozen=True)
class PackageManifest:
    """Entry-point fields of a ``package.json``, any of which may be absent."""

    main: str | None = None
    style: str | None = None
    sass: str | None = None
    eyeglass_sass_dir: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PackageManifest:
        eyeglass = data.get("eyeglass")
        sass_dir = eyeglass.get("sassDir") if isinstance(eyeglass, dict) else None
        return cls(
            main=_str_or_none(data.get("main")),
            style=_str_or_none(data.get("style")),
            sass=_str_or_none(data.get("sass")),
            eyeglass_sass_dir=_str_or_none(sass_dir),
        )

    @classmethod
    def read(cls, package_dir: Path) -> PackageManifest:
        """Read ``package.json`` from *package_dir*; absent file means no fields."""
        path = package_dir / MANIFEST_FILENAME
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        except UnicodeDecodeError as exc:
            raise ManifestError(path, str(exc)) from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ManifestError(path, str(exc)) from exc
        if not isinstance(data, dict):
            raise ManifestError(path, "expected a JSON object")
        return cls.from_dict(data)

    def entry_candidates(self) -> list[str]:
        """Present entry fields in priority order, then the root-index fallback."""
        fields = (self.main, self.style, self.sass, self.eyeglass_sass_dir)
        return [f for f in fields if f is not None] + [""]


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def is_style_candidate(candidate: str) -> bool:
    """Skip candidates that are obviously scripts.

    Style-sheet extensions always pass; so does anything that does not end
    in a known script extension (extensionless paths, directories, ``.mjs``).
    """
    return candidate.endswith(tuple(STYLESHEET_EXTENSIONS)) or not candidate.endswith(
        SCRIPT_EXTENSIONS
    )


def package_search_dirs(project_root: Path, extra_dirs: Sequence[Path] = ()) -> Iterator[Path]:
    """Yield directories that may hold installed packages, nearest first."""
    yield from extra_dirs
    current = project_root.resolve()
    while True:
        yield current / PACKAGES_DIRNAME
        parent = current.parent
        if parent == current:
            break
        current = parent


class PackageLocator:
    """Turns dependency-style references into concrete files."""

    def __init__(
        self,
        project_root: Path,
        resolve_classic: ClassicResolver,
        *,
        package_dirs: Sequence[Path] = (),
    ) -> None:
        self.project_root = project_root
        self.package_dirs = tuple(package_dirs)
        self._resolve_classic = resolve_classic

    def find_package_dir(self, package_name: str) -> Path | None:
        """Return the installed directory of *package_name*, or None."""
        for search_dir in package_search_dirs(self.project_root, self.package_dirs):
            candidate = search_dir / package_name
            if candidate.is_dir():
                return candidate
        return None

    def candidate_paths(self, package_dir: Path, subpath: str) -> list[str]:
        if subpath:
            return [subpath]
        return PackageManifest.read(package_dir).entry_candidates()

    def resolve_dependency_reference(self, reference: Reference | str) -> Path | None:
        """Resolve ``~name[/sub]`` or ``~@scope/name[/sub]`` to a file, or None."""
        if isinstance(reference, str):
            reference = Reference(reference)
        dep = parse_dependency_reference(reference)
        if dep is None:
            return None

        package_dir = self.find_package_dir(dep.package_name)
        if package_dir is None:
            logger.debug("Package %s is not installed", dep.package_name)
            return None

        for candidate in self.candidate_paths(package_dir, dep.subpath):
            if not is_style_candidate(candidate):
                logger.debug("Skipping script entry %s of %s", candidate, dep.package_name)
                continue
            found = self._resolve_classic(package_dir, candidate)
            if found is not None:
                return found
        return None
