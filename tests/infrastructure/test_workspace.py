"""Tests for the TempArea holding generated declaration files."""

from pathlib import Path

from scssimporter.infrastructure.workspace import TempArea, sanitize_filename


class TestSanitizeFilename:
    def test_replaces_every_unsafe_char(self) -> None:
        assert sanitize_filename("/a/b-c/tokens.json") == "_a_b_c_tokens_json.scss"

    def test_deterministic(self) -> None:
        assert sanitize_filename("/x/y.py") == sanitize_filename("/x/y.py")


class TestTempArea:
    def test_reset_creates_directory(self, tmp_path: Path) -> None:
        area = TempArea(tmp_path / ".tmp" / "scss-importer")
        area.reset()
        assert area.root.is_dir()

    def test_reset_clears_previous_run(self, tmp_path: Path) -> None:
        area = TempArea(tmp_path / "tmp")
        area.reset()
        stale = area.write("/old/file.json", "$a: 1;")
        area.reset()
        assert not stale.exists()
        assert list(area.root.iterdir()) == []

    def test_write_uses_sanitized_name(self, tmp_path: Path) -> None:
        area = TempArea(tmp_path / "tmp")
        area.reset()
        written = area.write("/p/tokens.json", "$a: 1;")
        assert written == area.root / "_p_tokens_json.scss"
        assert written.read_text(encoding="utf-8") == "$a: 1;"

    def test_write_overwrites_same_source(self, tmp_path: Path) -> None:
        area = TempArea(tmp_path / "tmp")
        area.write("/p/t.json", "$a: 1;")
        area.write("/p/t.json", "$a: 2;")
        assert area.path_for("/p/t.json").read_text(encoding="utf-8") == "$a: 2;"

    def test_clear(self, tmp_path: Path) -> None:
        area = TempArea(tmp_path / "tmp")
        area.reset()
        assert area.clear() is True
        assert not area.root.exists()
        assert area.clear() is False
