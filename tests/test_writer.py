"""Tests for create_effect_agent.scaffold.writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_effect_agent.errors import FileError, ValidationError
from create_effect_agent.fs import LocalFileSystem
from create_effect_agent.scaffold.writer import check_target, write_files

FILES = {
    "package.json": "{}\n",
    "src/index.ts": "export const x = 1\n",
    "docs/agents/Claude.md": "# Claude\n",
}


class FailingFileSystem(LocalFileSystem):
    """Local filesystem that refuses to write one particular file."""

    def __init__(self, fail_on: str) -> None:
        self.fail_on = fail_on
        self.written: list[Path] = []

    def write_text_file(self, path: Path, content: str) -> None:
        if path.name == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))
        super().write_text_file(path, content)
        self.written.append(path)


class TestCheckTarget:
    """Test check_target()."""

    def test_absent(self, tmp_path):
        assert check_target(tmp_path / "new") is False

    def test_empty_directory(self, tmp_path):
        assert check_target(tmp_path) is True

    def test_non_empty_directory(self, tmp_path):
        (tmp_path / "existing.txt").write_text("keep me")
        with pytest.raises(ValidationError, match="is not empty"):
            check_target(tmp_path)

    def test_hidden_file_counts(self, tmp_path):
        (tmp_path / ".git").mkdir()
        with pytest.raises(ValidationError, match="is not empty"):
            check_target(tmp_path)

    def test_file_target(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(ValidationError, match="not a directory"):
            check_target(target)


class TestWriteFiles:
    """Test write_files()."""

    def test_creates_absent_directory(self, tmp_path):
        target = tmp_path / "a" / "b" / "demo"
        written = write_files(target, FILES)

        assert written == sorted(FILES)
        assert (target / "src" / "index.ts").read_text() == "export const x = 1\n"
        assert (target / "docs" / "agents" / "Claude.md").exists()

    def test_into_empty_directory(self, tmp_path):
        write_files(tmp_path, FILES)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["docs", "package.json", "src"]

    def test_content_written_byte_for_byte(self, tmp_path):
        write_files(tmp_path, {"crlf.txt": "a\r\nb\n", "unicode.md": "✓ done\n"})
        assert (tmp_path / "crlf.txt").read_bytes() == b"a\r\nb\n"
        assert (tmp_path / "unicode.md").read_text(encoding="utf-8") == "✓ done\n"

    def test_non_empty_directory_untouched(self, tmp_path):
        existing = tmp_path / "existing.txt"
        existing.write_text("keep me")

        with pytest.raises(ValidationError):
            write_files(tmp_path, FILES)

        assert existing.read_text() == "keep me"
        assert [p.name for p in tmp_path.iterdir()] == ["existing.txt"]

    def test_write_failure_names_the_path(self, tmp_path):
        target = tmp_path / "demo"
        fs = FailingFileSystem(fail_on="index.ts")

        with pytest.raises(FileError) as exc_info:
            write_files(target, FILES, fs=fs)

        assert exc_info.value.path == str(target / "src" / "index.ts")
        assert "Failed to write file" in exc_info.value.message

    def test_no_rollback_after_failure(self, tmp_path):
        target = tmp_path / "demo"
        fs = FailingFileSystem(fail_on="index.ts")

        with pytest.raises(FileError):
            write_files(target, FILES, fs=fs)

        # docs/ and package.json sort before src/index.ts
        assert (target / "docs" / "agents" / "Claude.md").exists()
        assert (target / "package.json").exists()
        assert not (target / "src" / "index.ts").exists()

    @pytest.mark.parametrize("bad", ["../escape.txt", "/abs.txt"])
    def test_rejects_paths_outside_target(self, tmp_path, bad):
        with pytest.raises(ValidationError):
            write_files(tmp_path / "demo", {bad: "x"})
        assert not (tmp_path / "escape.txt").exists()
