"""Conversion of path-like values into FilePath handles.

Python cannot attach methods to ``str``, so the capability is a single
function dispatching over a closed set of accepted types::

    as_file("notes/today.txt").append_string("done\n")
"""

from __future__ import annotations

import os
from functools import singledispatch
from pathlib import PurePath

from file_access.errors import InvalidInputError
from file_access.file_path import FilePath

__all__ = ["as_file"]


@singledispatch
def as_file(value: object) -> FilePath:
    """Convert a path-like value into a FilePath.

    Accepts ``str``, ``pathlib`` paths, other ``os.PathLike`` objects and
    FilePath itself (returned unchanged).

    Args:
        value: The value to convert.

    Returns:
        A FilePath for the value.

    Raises:
        InvalidInputError: If the value is empty or of an unsupported type.
    """
    if isinstance(value, os.PathLike):
        return FilePath(value)
    raise InvalidInputError(f"Cannot use {type(value).__name__} as a file path")


@as_file.register
def _(value: FilePath) -> FilePath:
    return value


@as_file.register
def _(value: str) -> FilePath:
    return FilePath(value)


@as_file.register
def _(value: PurePath) -> FilePath:
    return FilePath(value)
