"""Shared data types for file access."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict

__all__ = ["FileMetadata", "Lines", "PathLike"]

PathLike = Union[str, "os.PathLike[str]"]
Lines = Iterable[str]


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class FileMetadata(BaseModel):
    """Metadata about an existing file or directory.

    Attributes:
        path: Path the metadata was queried for.
        size: Size in bytes.
        is_file: True if the path is a regular file.
        is_dir: True if the path is a directory.
        modified: Last modification time (UTC).
        accessed: Last access time (UTC).
        created: Creation time where the platform reports it, otherwise
            the last metadata change time (UTC).
        readonly: True if the owner has no write permission.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    size: int
    is_file: bool
    is_dir: bool
    modified: datetime
    accessed: datetime
    created: datetime
    readonly: bool

    @classmethod
    def from_stat(cls, path: Path, st: os.stat_result) -> FileMetadata:
        """Build metadata from an ``os.stat_result``.

        Args:
            path: Path that was stat'ed.
            st: Result of ``os.stat``.

        Returns:
            FileMetadata for the path.
        """
        created = getattr(st, "st_birthtime", st.st_ctime)
        return cls(
            path=path,
            size=st.st_size,
            is_file=stat.S_ISREG(st.st_mode),
            is_dir=stat.S_ISDIR(st.st_mode),
            modified=_timestamp(st.st_mtime),
            accessed=_timestamp(st.st_atime),
            created=_timestamp(created),
            readonly=not st.st_mode & stat.S_IWUSR,
        )
