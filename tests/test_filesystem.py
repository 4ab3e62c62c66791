"""Tests for filesystem abstraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from file_access.filesystem import RealFileSystem
from file_access.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem is a structural FileSystem."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_read_text(self, tmp_path: Path) -> None:
        """Test reading text content from a file."""
        fs = RealFileSystem()
        test_file = tmp_path / "test.txt"
        test_file.write_text("Hello, World!", encoding="utf-8")

        assert fs.read_text(test_file) == "Hello, World!"

    def test_read_text_not_found(self, tmp_path: Path) -> None:
        """Test reading a non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.read_text(tmp_path / "missing.txt")

    def test_read_text_verbatim(self, tmp_path: Path) -> None:
        """Test terminators are not translated by default."""
        fs = RealFileSystem()
        test_file = tmp_path / "crlf.txt"
        test_file.write_bytes(b"a\r\nb\rc\n")

        assert fs.read_text(test_file) == "a\r\nb\rc\n"

    def test_read_text_universal_newlines(self, tmp_path: Path) -> None:
        """Test newline=None translates every terminator."""
        fs = RealFileSystem()
        test_file = tmp_path / "crlf.txt"
        test_file.write_bytes(b"a\r\nb\r\n")

        assert fs.read_text(test_file, newline=None) == "a\nb\n"

    def test_write_text_verbatim(self, tmp_path: Path) -> None:
        """Test text is written byte for byte by default."""
        fs = RealFileSystem()
        test_file = tmp_path / "raw.txt"

        fs.write_text(test_file, "a\nb\r\nc\r")

        assert test_file.read_bytes() == b"a\nb\r\nc\r"

    def test_write_text_replaces(self, tmp_path: Path) -> None:
        """Test writing truncates existing content."""
        fs = RealFileSystem()
        test_file = tmp_path / "output.txt"
        test_file.write_text("much longer original content", encoding="utf-8")

        fs.write_text(test_file, "short")

        assert test_file.read_text(encoding="utf-8") == "short"

    def test_write_text_newline(self, tmp_path: Path) -> None:
        """Test newline argument controls the written terminator."""
        fs = RealFileSystem()
        test_file = tmp_path / "crlf.txt"

        fs.write_text(test_file, "a\nb\n", newline="\r\n")

        assert test_file.read_bytes() == b"a\r\nb\r\n"

    def test_append_text_creates(self, tmp_path: Path) -> None:
        """Test appending to a missing file creates it."""
        fs = RealFileSystem()
        test_file = tmp_path / "new.txt"

        fs.append_text(test_file, "first")
        fs.append_text(test_file, "second")

        assert test_file.read_text(encoding="utf-8") == "firstsecond"

    def test_exists(self, tmp_path: Path) -> None:
        """Test exists for present and missing paths."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True
        assert fs.exists(tmp_path / "missing.txt") is False

    def test_is_file_and_is_dir(self, tmp_path: Path) -> None:
        """Test file and directory checks."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_file(test_file) is True
        assert fs.is_dir(test_file) is False
        assert fs.is_file(tmp_path) is False
        assert fs.is_dir(tmp_path) is True
        assert fs.is_dir(tmp_path / "missing") is False

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(nested_dir, parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir, exist_ok=False)

    def test_unlink_missing_raises(self, tmp_path: Path) -> None:
        """Test unlinking non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.unlink(tmp_path / "missing.txt")

    def test_rmtree(self, tmp_path: Path) -> None:
        """Test removing a directory tree."""
        fs = RealFileSystem()
        tree_dir = tmp_path / "tree"
        (tree_dir / "subdir").mkdir(parents=True)
        (tree_dir / "file1.txt").touch()
        (tree_dir / "subdir" / "file2.txt").touch()

        fs.rmtree(tree_dir)

        assert not tree_dir.exists()

    def test_stat(self, tmp_path: Path) -> None:
        """Test stat reports the file size."""
        fs = RealFileSystem()
        test_file = tmp_path / "sized.txt"
        test_file.write_bytes(b"12345")

        assert fs.stat(test_file).st_size == 5

    def test_resolve_strict(self, tmp_path: Path) -> None:
        """Test resolve requires the path to exist."""
        fs = RealFileSystem()

        assert fs.resolve(tmp_path) == tmp_path.resolve()
        with pytest.raises(FileNotFoundError):
            fs.resolve(tmp_path / "missing")

    def test_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test cwd reports the current directory."""
        monkeypatch.chdir(tmp_path)

        assert RealFileSystem().cwd().resolve() == tmp_path.resolve()
