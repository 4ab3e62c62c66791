"""A path handle exposing the operation set as methods."""

from __future__ import annotations

from pathlib import Path

from file_access.operations import FileOperations, default_operations, to_path
from file_access.types import FileMetadata, Lines, PathLike

__all__ = ["FilePath"]


class FilePath:
    """A wrapper that acts as a file handle.

    Holds nothing but the path and the operation set it forwards to. Every
    method delegates to :class:`FileOperations` with this path as argument.

    Example:
        >>> FilePath("notes/today.txt").write_lines(["first", "second"])
    """

    __slots__ = ("_operations", "_path")

    def __init__(self, path: PathLike, operations: FileOperations | None = None) -> None:
        """Wrap a path.

        Args:
            path: String, ``os.PathLike`` or another FilePath.
            operations: Operation set to forward to. Defaults to the one bound
                to ``path`` when it is a FilePath, otherwise the shared
                module-level instance.

        Raises:
            InvalidInputError: If the path is empty or not a text path.
        """
        self._path = to_path(path)
        if operations is None:
            operations = path.operations if isinstance(path, FilePath) else default_operations()
        self._operations = operations

    @classmethod
    def access(cls, path: PathLike) -> FilePath:
        """Wrap a path."""
        return cls(path)

    @property
    def path(self) -> Path:
        """The wrapped path."""
        return self._path

    @property
    def operations(self) -> FileOperations:
        """The operation set this handle forwards to."""
        return self._operations

    def as_file(self) -> FilePath:
        """Return this handle unchanged."""
        return self

    def __fspath__(self) -> str:
        return str(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"FilePath({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePath):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def read_string(self) -> str:
        """Read the contents of the file."""
        return self._operations.read_string(self._path)

    def read_lines(self) -> list[str]:
        """Read the contents of the file as lines."""
        return self._operations.read_lines(self._path)

    def write_string(self, text: str) -> None:
        """Replace the file's contents, creating its directory path if needed."""
        self._operations.write_string(self._path, text)

    def write_lines(self, lines: Lines) -> None:
        """Replace the file's contents with lines, each on its own line."""
        self._operations.write_lines(self._path, lines)

    def append_string(self, text: str) -> None:
        """Append text to the file, creating it if needed."""
        self._operations.append_string(self._path, text)

    def append_lines(self, lines: Lines) -> None:
        """Append lines to the file, creating it if needed."""
        self._operations.append_lines(self._path, lines)

    def delete(self, missing_ok: bool | None = None) -> None:
        """Delete the file, or the directory recursively."""
        self._operations.delete(self._path, missing_ok=missing_ok)

    def copy_to(self, destination: PathLike) -> None:
        """Copy the file's contents to a destination, replacing it."""
        self._operations.copy(self._path, destination)

    def rename_to(self, destination: PathLike) -> None:
        """Copy the file's contents to a destination and delete this file."""
        self._operations.rename(self._path, destination)

    def exists(self) -> bool:
        """Check whether the file or directory exists."""
        return self._operations.exists(self._path)

    def get_full_path(self) -> str:
        """Absolute path of the existing file or directory."""
        return self._operations.get_full_path(self._path)

    def get_relative_path(self) -> str:
        """Path of the existing file or directory relative to the cwd."""
        return self._operations.get_relative_path(self._path)

    def get_metadata(self) -> FileMetadata:
        """Metadata about the existing file or directory."""
        return self._operations.get_metadata(self._path)
