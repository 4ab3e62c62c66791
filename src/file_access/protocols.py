"""Protocol definitions for the file access abstractions.

This module defines the interfaces the operation set is written against:
- FileSystem: the primitive calls the operations are composed from
- AsFile: values that convert themselves into a FilePath handle

Concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from file_access.file_path import FilePath


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for primitive filesystem operations.

    Implementations wrap real or in-memory storage. Every text operation
    reads or writes a whole file.
    """

    def read_text(
        self,
        path: Path,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> str:
        """Read text content from a file.

        Args:
            path: Path to the file.
            encoding: Text encoding.
            errors: Codec error handler.
            newline: Newline translation mode ("" reads and writes verbatim).

        Returns:
            The whole file content.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        ...

    def write_text(
        self,
        path: Path,
        content: str,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> None:
        """Create or truncate a file and write content to it.

        Args:
            path: Path to the file.
            content: Text to write.
            encoding: Text encoding.
            errors: Codec error handler.
            newline: Newline translation mode ("" reads and writes verbatim).
        """
        ...

    def append_text(
        self,
        path: Path,
        content: str,
        encoding: str = "utf-8",
        errors: str = "strict",
        newline: str | None = "",
    ) -> None:
        """Append content to a file, creating it if absent.

        Args:
            path: Path to the file.
            content: Text to append.
            encoding: Text encoding.
            errors: Codec error handler.
            newline: Newline translation mode ("" reads and writes verbatim).
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a file, False otherwise.
        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to the file to remove.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to the directory to remove.
        """
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Query status of an existing path.

        Args:
            path: Path to query.

        Returns:
            The stat result.
        """
        ...

    def resolve(self, path: Path) -> Path:
        """Resolve an existing path to an absolute path.

        Args:
            path: Path to resolve.

        Returns:
            Absolute path with symlinks resolved.
        """
        ...

    def cwd(self) -> Path:
        """Return the current working directory."""
        ...


@runtime_checkable
class AsFile(Protocol):
    """Protocol for values that convert themselves into a FilePath."""

    def as_file(self) -> FilePath:
        """Return a FilePath handle for this value."""
        ...
