"""Shared pytest fixtures and test helpers for scssimporter tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from scssimporter.infrastructure.workspace import TempArea
from scssimporter.services.resolver import ResolutionEngine


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SCSSIMPORTER_* environment out of the tests."""
    monkeypatch.delenv("SCSSIMPORTER_CONFIG", raising=False)
    monkeypatch.delenv("SCSSIMPORTER_PROJECT_ROOT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with a styles directory and an empty node_modules."""
    root = tmp_path.resolve()
    (root / "styles").mkdir()
    (root / "node_modules").mkdir()
    return root


@pytest.fixture
def temp_area(project_root: Path) -> TempArea:
    area = TempArea(project_root / "node_modules" / ".tmp" / "scss-importer")
    area.reset()
    return area


@pytest.fixture
def engine(project_root: Path, temp_area: TempArea) -> ResolutionEngine:
    return ResolutionEngine(temp_area, project_root=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI picks it up as its root."""
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def touch(path: Path, text: str = "") -> Path:
    """Create *path* (and parents) with *text*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def make_package(
    project_root: Path,
    name: str,
    manifest: dict[str, Any] | None = None,
    files: dict[str, str] | None = None,
) -> Path:
    """Install a fake npm package under ``node_modules``."""
    package_dir = project_root / "node_modules" / name
    package_dir.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        touch(package_dir / "package.json", json.dumps({"name": name, **manifest}))
    for rel, text in (files or {}).items():
        touch(package_dir / rel, text)
    return package_dir


@pytest.fixture(autouse=True)
def _restore_logging() -> Any:
    """CLI invocations reconfigure the root logger; undo that after each test."""
    import logging

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg = logging.getLogger("scssimporter")
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)
