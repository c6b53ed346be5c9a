"""ScssImporter — host-compiler adapters around the ResolutionEngine.

Two calling conventions are supported:

* Callback style, ``importer(url, prev, done)``: ``done`` is called exactly
  once with ``None`` (defer), ``{"file": path}``, or
  ``{"file": path, "contents": text}``.
* libsass-python style, passed as ``sass.compile(importers=[(0, imp)])``:
  returns ``None`` (defer) or a one-element list holding ``(path,)`` or
  ``(path, contents)``.

Usage::

    importer = ScssImporter.create(project_root=Path.cwd())
    css = sass.compile(filename="main.scss", importers=[(0, importer)])
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from scssimporter.domain.targets import ResolvedTarget
from scssimporter.infrastructure.workspace import DEFAULT_TMP_DIR, TempArea
from scssimporter.services.resolver import ResolutionEngine

DoneCallback = Callable[[dict[str, Any] | None], None]


class ScssImporter:
    """Binds a ResolutionEngine to the importer protocols of SCSS compilers."""

    def __init__(self, engine: ResolutionEngine) -> None:
        self.engine = engine

    @classmethod
    def create(
        cls,
        *,
        project_root: Path | None = None,
        tmp_dir: Path | None = None,
        package_dirs: tuple[Path, ...] = (),
    ) -> ScssImporter:
        """Build an importer and reset its temp area.

        Call once per process, before the first compilation: the temp area
        is wiped, so sharing it with a concurrently running process is not
        supported.
        """
        root = project_root or Path.cwd()
        temp_area = TempArea(root / (tmp_dir or DEFAULT_TMP_DIR))
        temp_area.reset()
        engine = ResolutionEngine(temp_area, project_root=root, package_dirs=package_dirs)
        return cls(engine)

    def resolve(self, reference: str, previous_file: str) -> ResolvedTarget | None:
        return self.engine.resolve(reference, previous_file)

    def callback(self, reference: str, previous_file: str, done: DoneCallback) -> None:
        """Callback-style importer. Calls *done* exactly once."""
        target = self.engine.resolve(reference, previous_file)
        done(None if target is None else target.to_host_payload())

    def __call__(self, path: str, prev: str) -> list[tuple[str, ...]] | None:
        """libsass-python importer signature."""
        target = self.engine.resolve(path, prev)
        if target is None:
            return None
        return [target.to_libsass()]
