"""Convenience operations for reading and writing whole files."""

__version__ = "0.1.0"

from file_access.as_file import as_file
from file_access.config import AccessConfig
from file_access.errors import (
    FileAccessError,
    FileIOError,
    InvalidInputError,
    NotFoundError,
)
from file_access.file_path import FilePath
from file_access.operations import (
    FileOperations,
    append_lines,
    append_string,
    copy,
    delete,
    exists,
    get_full_path,
    get_metadata,
    get_relative_path,
    read_lines,
    read_string,
    rename,
    write_lines,
    write_string,
)
from file_access.protocols import AsFile, FileSystem
from file_access.types import FileMetadata

__all__ = [
    "__version__",
    "AccessConfig",
    "AsFile",
    "FileAccessError",
    "FileIOError",
    "FileMetadata",
    "FileOperations",
    "FilePath",
    "FileSystem",
    "InvalidInputError",
    "NotFoundError",
    "append_lines",
    "append_string",
    "as_file",
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
