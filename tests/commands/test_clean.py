"""Tests for the clean CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from scssimporter.cli import cli
from tests.conftest import touch


@pytest.mark.usefixtures("_isolated_project")
class TestCleanCommand:
    def test_removes_temp_area(self, cli_runner: CliRunner, project_root: Path) -> None:
        tmp_dir = project_root / "node_modules" / ".tmp" / "scss-importer"
        touch(tmp_dir / "x.scss")
        result = cli_runner.invoke(cli, ["--json", "clean"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["removed"] is True
        assert not tmp_dir.exists()

    def test_nothing_to_remove(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["clean"])
        assert result.exit_code == 0
        assert "removed: False" in result.output

    def test_configured_tmp_dir(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "scssimporter.toml").write_text('[resolver]\ntmp_dir = "build/tmp"\n')
        touch(project_root / "build" / "tmp" / "x.scss")
        result = cli_runner.invoke(cli, ["clean"])
        assert result.exit_code == 0
        assert not (project_root / "build" / "tmp").exists()
