"""Filesystem abstraction for testability.

This module provides the primitive filesystem calls the operation set is
built from. The RealFileSystem implementation wraps standard library
operations.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_text(
        self,
        path: Path,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> str:
        """Read text content from a file."""
        with path.open("r", encoding=encoding, errors=errors, newline=newline) as f:
            return f.read()

    def write_text(
        self,
        path: Path,
        content: str,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> None:
        """Write text content to a file, replacing what was there."""
        with path.open("w", encoding=encoding, errors=errors, newline=newline) as f:
            f.write(content)

    def append_text(
        self,
        path: Path,
        content: str,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> None:
        """Append text content to a file."""
        with path.open("a", encoding=encoding, errors=errors, newline=newline) as f:
            f.write(content)

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def stat(self, path: Path) -> os.stat_result:
        """Query status of a path."""
        return path.stat()

    def resolve(self, path: Path) -> Path:
        """Resolve an existing path to an absolute path."""
        return path.resolve(strict=True)

    def cwd(self) -> Path:
        """Return the current working directory."""
        return Path.cwd()
