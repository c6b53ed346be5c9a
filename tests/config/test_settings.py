"""Tests for ImporterSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from scssimporter.config.settings import ImporterSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ImporterSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.tmp_dir == tmp_path / "node_modules" / ".tmp" / "scss-importer"
        assert settings.package_dirs == ()

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ImporterSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_resolver_section(self, tmp_path: Path) -> None:
        (tmp_path / "scssimporter.toml").write_text(
            '[resolver]\ntmp_dir = "build/scss"\npackage_dirs = ["vendor"]\n'
        )
        settings = ImporterSettings.from_cli(project_root=tmp_path)
        assert settings.tmp_dir == tmp_path / "build" / "scss"
        assert settings.package_dirs == (tmp_path / "vendor",)

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "scssimporter.toml").write_text("")
        child = tmp_path / "src" / "styles"
        child.mkdir(parents=True)
        monkeypatch.chdir(child)
        settings = ImporterSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()

    def test_pyproject_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "site"\n\n[tool.scssimporter.resolver]\ntmp_dir = "out"\n'
        )
        settings = ImporterSettings.from_cli(project_root=tmp_path)
        assert settings.tmp_dir == tmp_path / "out"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "importer.toml"
        custom.parent.mkdir()
        custom.write_text('[resolver]\ntmp_dir = "custom"\n')
        settings = ImporterSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.config_path == custom
        assert settings.tmp_dir == tmp_path / "custom"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "scssimporter.toml").write_text("[resolver\n")
        with pytest.raises(click.ClickException):
            ImporterSettings.from_cli(project_root=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = ImporterSettings.from_cli(
            project_root=tmp_path, json_output=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "scssimporter.toml").write_text('[resolver]\ntmp_dir = "from-toml"\n')
        monkeypatch.setenv("SCSSIMPORTER_RESOLVER__TMP_DIR", "from-env")
        settings = ImporterSettings.from_cli(project_root=tmp_path)
        assert settings.tmp_dir == tmp_path / "from-env"

    def test_cli_flag_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "scssimporter.toml").write_text("verbose = true\n")
        settings = ImporterSettings.from_cli(project_root=tmp_path, verbose=False)
        assert settings.verbose is False
