"""Whole-file read, write, append, delete, copy and rename operations.

Every write-class operation creates the full parent directory chain of its
target before touching the file. Copy and rename are composed from
read, write and delete; they are not atomic.
"""

from __future__ import annotations

import errno
import logging
import os
import re
from pathlib import Path

from file_access.config import AccessConfig
from file_access.errors import InvalidInputError, NotFoundError, translate_errors
from file_access.filesystem import RealFileSystem
from file_access.protocols import FileSystem
from file_access.types import FileMetadata, Lines, PathLike

logger = logging.getLogger(__name__)

__all__ = [
    "FileOperations",
    "append_lines",
    "append_string",
    "copy",
    "delete",
    "exists",
    "get_full_path",
    "get_metadata",
    "get_relative_path",
    "read_lines",
    "read_string",
    "rename",
    "write_lines",
    "write_string",
]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def to_path(value: PathLike) -> Path:
    """Convert a path-like value into a Path.

    Args:
        value: A string or any ``os.PathLike`` producing a string.

    Returns:
        The corresponding Path.

    Raises:
        InvalidInputError: If the value is empty or not a text path.
    """
    if isinstance(value, Path):
        return value
    try:
        raw = os.fspath(value)
    except TypeError as e:
        raise InvalidInputError(f"Not a path: {value!r}") from e
    if not isinstance(raw, str):
        raise InvalidInputError(f"Only text paths are supported, got {type(raw).__name__}")
    if not raw:
        raise InvalidInputError("Path cannot be empty")
    return Path(raw)


def split_lines(text: str) -> list[str]:
    """Split whole-file text into lines with terminators removed.

    A single trailing terminator does not produce an empty last line.

    Example:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
    """
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: Lines, terminator: str = os.linesep) -> str:
    """Join lines into text, each followed by one terminator.

    Raises:
        InvalidInputError: If ``lines`` is a single string or holds non-strings.
    """
    if isinstance(lines, str):
        raise InvalidInputError("Expected a collection of lines, got a single string")
    parts = []
    for line in lines:
        if not isinstance(line, str):
            raise InvalidInputError(f"Line must be a string, got {type(line).__name__}")
        parts.append(line)
        parts.append(terminator)
    return "".join(parts)


class FileOperations:
    """The operation set, bound to a filesystem and a configuration.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, filesystem: FileSystem, config: AccessConfig) -> None:
        """Initialize the operation set with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            config: Encoding and policy settings (required).
        """
        self.fs = filesystem
        self.config = config

    @classmethod
    def create(
        cls,
        config: AccessConfig | None = None,
        filesystem: FileSystem | None = None,
    ) -> FileOperations:
        """Factory method for production instantiation.

        Args:
            config: Optional settings (defaults to ``AccessConfig()``).
            filesystem: Optional filesystem abstraction (defaults to RealFileSystem).

        Returns:
            Configured FileOperations instance.
        """
        return cls(
            filesystem=filesystem or RealFileSystem(),
            config=config or AccessConfig(),
        )

    def _text_options(self) -> dict[str, str]:
        return {
            "encoding": self.config.encoding,
            "errors": self.config.errors,
            "newline": "",
        }

    def _ensure_parent(self, path: Path) -> None:
        self.fs.mkdir(path.parent, parents=True, exist_ok=True)

    def read_string(self, path: PathLike) -> str:
        """Read the entire content of a file.

        Args:
            path: File to read.

        Returns:
            The whole file content.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If the file cannot be read.
        """
        target = to_path(path)
        with translate_errors(target, "read"):
            return self.fs.read_text(target, **self._text_options())

    def read_lines(self, path: PathLike) -> list[str]:
        """Read the entire content of a file as lines.

        Args:
            path: File to read.

        Returns:
            Lines in file order, terminators stripped.

        Raises:
            NotFoundError: If the file does not exist.
            FileIOError: If the file cannot be read.
        """
        return split_lines(self.read_string(path))

    def write_string(self, path: PathLike, text: str) -> None:
        """Write text to a file, entirely replacing its content.

        Creates the file and its full directory path if they don't exist.

        Args:
            path: File to write.
            text: New content.

        Raises:
            FileIOError: If a directory or the file cannot be written.
        """
        target = to_path(path)
        if not isinstance(text, str):
            raise InvalidInputError(f"Text must be a string, got {type(text).__name__}")
        with translate_errors(target, "write"):
            self._ensure_parent(target)
            self.fs.write_text(target, text, **self._text_options())
        logger.debug("Wrote %d characters to %s", len(text), target)

    def write_lines(self, path: PathLike, lines: Lines) -> None:
        """Write lines to a file, entirely replacing its content.

        Each line is followed by a line terminator.

        Args:
            path: File to write.
            lines: Lines in the order they should appear.

        Raises:
            FileIOError: If a directory or the file cannot be written.
            InvalidInputError: If ``lines`` is not a collection of strings.
        """
        self.write_string(path, join_lines(lines, self.config.line_terminator))

    def append_string(self, path: PathLike, text: str) -> None:
        """Append text to a file without adding a terminator.

        Creates the file and its full directory path if they don't exist.

        Args:
            path: File to append to.
            text: Text to append.

        Raises:
            FileIOError: If a directory or the file cannot be written.
        """
        target = to_path(path)
        if not isinstance(text, str):
            raise InvalidInputError(f"Text must be a string, got {type(text).__name__}")
        with translate_errors(target, "append to"):
            self._ensure_parent(target)
            self.fs.append_text(target, text, **self._text_options())
        logger.debug("Appended %d characters to %s", len(text), target)

    def append_lines(self, path: PathLike, lines: Lines) -> None:
        """Append lines to a file, each followed by a line terminator.

        Args:
            path: File to append to.
            lines: Lines in the order they should appear.

        Raises:
            FileIOError: If a directory or the file cannot be written.
            InvalidInputError: If ``lines`` is not a collection of strings.
        """
        self.append_string(path, join_lines(lines, self.config.line_terminator))

    def delete(self, path: PathLike, missing_ok: bool | None = None) -> None:
        """Delete a file, or a directory recursively.

        Args:
            path: File or directory to delete.
            missing_ok: Treat a missing path as success. Defaults to
                ``config.missing_ok``.

        Raises:
            NotFoundError: If the path does not exist and missing is not ok.
            FileIOError: If removal fails.
        """
        target = to_path(path)
        if missing_ok is None:
            missing_ok = self.config.missing_ok
        with translate_errors(target, "delete"):
            if self.fs.is_file(target):
                self.fs.unlink(target)
                logger.debug("Deleted file %s", target)
            elif self.fs.is_dir(target):
                self.fs.rmtree(target)
                logger.debug("Deleted directory tree %s", target)
            elif missing_ok:
                logger.debug("Nothing to delete at %s", target)
            else:
                raise NotFoundError(
                    errno.ENOENT, "Cannot delete: No such file or directory", str(target)
                )

    def copy(self, source: PathLike, destination: PathLike) -> None:
        """Copy the content of a file to a destination.

        The destination is created with its directory path if needed and
        otherwise entirely replaced. Nothing is written if the source
        cannot be read.

        Args:
            source: File to copy from.
            destination: File to copy to.
        """
        self.write_string(destination, self.read_string(source))
        logger.debug("Copied %s to %s", source, destination)

    def rename(self, source: PathLike, destination: PathLike) -> None:
        """Copy a file to a destination and then delete the source.

        Not atomic: if deleting the source fails, the destination keeps
        the copied content.

        Args:
            source: File to move.
            destination: New location.
        """
        src = to_path(source)
        dst = to_path(destination)
        self.copy(src, dst)
        with translate_errors(src, "rename"):
            if self.fs.resolve(src) == self.fs.resolve(dst):
                return
        self.delete(src, missing_ok=False)

    def exists(self, path: PathLike) -> bool:
        """Check whether a file or directory exists."""
        target = to_path(path)
        with translate_errors(target, "check"):
            return self.fs.exists(target)

    def get_full_path(self, path: PathLike) -> str:
        """Get the absolute path of an existing file or directory.

        Raises:
            NotFoundError: If the path does not exist.
        """
        target = to_path(path)
        with translate_errors(target, "resolve"):
            return str(self.fs.resolve(target))

    def get_relative_path(self, path: PathLike) -> str:
        """Get the path of an existing file or directory relative to the cwd.

        Raises:
            NotFoundError: If the path does not exist.
            InvalidInputError: If the path is not under the current directory.
        """
        target = to_path(path)
        with translate_errors(target, "relativize"):
            full = self.fs.resolve(target)
            cwd = self.fs.resolve(self.fs.cwd())
            return str(full.relative_to(cwd))

    def get_metadata(self, path: PathLike) -> FileMetadata:
        """Query metadata about an existing file or directory.

        Raises:
            NotFoundError: If the path does not exist.
        """
        target = to_path(path)
        with translate_errors(target, "stat"):
            return FileMetadata.from_stat(target, self.fs.stat(target))


_default = FileOperations.create()


def default_operations() -> FileOperations:
    """Return the operation set used by the module-level functions."""
    return _default


def read_string(path: PathLike) -> str:
    """Read the entire content of a file. See `FileOperations.read_string`."""
    return _default.read_string(path)


def read_lines(path: PathLike) -> list[str]:
    """Read a file as lines. See `FileOperations.read_lines`."""
    return _default.read_lines(path)


def write_string(path: PathLike, text: str) -> None:
    """Replace a file's content with text. See `FileOperations.write_string`."""
    _default.write_string(path, text)


def write_lines(path: PathLike, lines: Lines) -> None:
    """Replace a file's content with lines. See `FileOperations.write_lines`."""
    _default.write_lines(path, lines)


def append_string(path: PathLike, text: str) -> None:
    """Append text to a file. See `FileOperations.append_string`."""
    _default.append_string(path, text)


def append_lines(path: PathLike, lines: Lines) -> None:
    """Append lines to a file. See `FileOperations.append_lines`."""
    _default.append_lines(path, lines)


def delete(path: PathLike, missing_ok: bool | None = None) -> None:
    """Delete a file or directory tree. See `FileOperations.delete`."""
    _default.delete(path, missing_ok=missing_ok)


def copy(source: PathLike, destination: PathLike) -> None:
    """Copy a file's content. See `FileOperations.copy`."""
    _default.copy(source, destination)


def rename(source: PathLike, destination: PathLike) -> None:
    """Move a file's content. See `FileOperations.rename`."""
    _default.rename(source, destination)


def exists(path: PathLike) -> bool:
    """Check whether a path exists. See `FileOperations.exists`."""
    return _default.exists(path)


def get_full_path(path: PathLike) -> str:
    """Absolute path of an existing file. See `FileOperations.get_full_path`."""
    return _default.get_full_path(path)


def get_relative_path(path: PathLike) -> str:
    """Cwd-relative path of an existing file. See `FileOperations.get_relative_path`."""
    return _default.get_relative_path(path)


def get_metadata(path: PathLike) -> FileMetadata:
    """Metadata of an existing file. See `FileOperations.get_metadata`."""
    return _default.get_metadata(path)
