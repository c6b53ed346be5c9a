"""Value-manifest loading — JSON, YAML, and Python modules.

Every call reads the file from disk again; nothing is cached, so edits
to a manifest are picked up by the next import that references it.

Python manifests are executed with :func:`runpy.run_path` (which never
touches ``sys.modules``) and must bind their value tree to a module-level
``exports`` name::

    exports = {"brand": "#0a84ff", "breakpoints": {"sm": "576px"}}

Malformed manifests raise :class:`ManifestError`. They are a project
misconfiguration and are not shielded from the caller.
"""

from __future__ import annotations

import json
import runpy
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

EXPORTS_NAME = "exports"


class ManifestError(ValueError):
    """A manifest file exists but cannot be read or evaluated."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid manifest {self.path}: {reason}")


def _new_yaml() -> YAML:
    """Create a fresh safe-mode YAML parser (the YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestError(path, str(exc)) from exc


def _load_yaml(path: Path) -> Any:
    try:
        return _new_yaml().load(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, YAMLError) as exc:
        raise ManifestError(path, str(exc)) from exc


def _load_python(path: Path) -> Any:
    try:
        namespace = runpy.run_path(str(path))
    except Exception as exc:
        raise ManifestError(path, f"{type(exc).__name__}: {exc}") from exc
    if EXPORTS_NAME not in namespace:
        raise ManifestError(path, f"module does not define {EXPORTS_NAME!r}")
    return namespace[EXPORTS_NAME]


_LOADERS: dict[str, Callable[[Path], Any]] = {
    ".json": _load_json,
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".py": _load_python,
}


def load_value_tree(path: Path | str) -> dict[str, Any]:
    """Read a value manifest and return its exported mapping.

    Raises:
        ManifestError: unknown extension, parse/evaluation failure, or an
            exported value that is not a mapping.
    """
    path = Path(path)
    loader = _LOADERS.get(path.suffix)
    if loader is None:
        raise ManifestError(path, f"unsupported manifest type {path.suffix!r}")
    tree = loader(path)
    if tree is None:
        # An empty YAML document exports nothing.
        return {}
    if not isinstance(tree, dict):
        raise ManifestError(path, f"expected a mapping, got {type(tree).__name__}")
    return tree
