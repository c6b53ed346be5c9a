"""Config file discovery.

Settings live either in a dedicated ``scssimporter.toml`` or in the
``[tool.scssimporter]`` table of a ``pyproject.toml``. The finder walks up
from the start directory and stops at the first directory holding either
one; a dedicated file beats ``pyproject.toml`` in the same directory.
The SCSSIMPORTER_CONFIG env var and the --config CLI flag bypass the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "scssimporter.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "SCSSIMPORTER_CONFIG"


def _pyproject_table(data: dict[str, Any]) -> dict[str, Any] | None:
    table = data.get("tool", {}).get("scssimporter")
    return table if isinstance(table, dict) else None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the scssimporter settings it holds.

    Raises:
        tomllib.TOMLDecodeError: the file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return _pyproject_table(data) or {}
    return data


def _has_pyproject_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        # Someone else's broken pyproject is not our config.
        return False
    return _pyproject_table(data) is not None


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config source.

    Returns the config file path, or None if nothing was found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_pyproject_section(pyproject):
            return pyproject
    return None
