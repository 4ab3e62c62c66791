"""Error taxonomy for file access operations.

Every failure surfaces as a subclass of :class:`FileAccessError`. The
subclasses also inherit from the matching builtin exception, so callers can
catch either ``NotFoundError`` or ``FileNotFoundError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

__all__ = [
    "FileAccessError",
    "FileIOError",
    "InvalidInputError",
    "NotFoundError",
    "translate_errors",
]


class FileAccessError(OSError):
    """Base class for all file access failures."""


class NotFoundError(FileAccessError, FileNotFoundError):
    """A file or directory required by the operation does not exist."""


class FileIOError(FileAccessError):
    """The underlying filesystem call failed for any other reason."""


class InvalidInputError(FileAccessError, ValueError):
    """The caller supplied a malformed path or an unsupported value."""


@contextmanager
def translate_errors(path: object, action: str) -> Iterator[None]:
    """Map builtin errors raised inside the block onto the taxonomy.

    Args:
        path: Path the operation acts on, used in the error message.
        action: Short verb describing the operation ("read", "write", ...).

    Raises:
        NotFoundError: If a ``FileNotFoundError`` was raised.
        FileIOError: If any other ``OSError`` was raised.
        InvalidInputError: If a ``ValueError`` was raised (e.g. NUL in path).
    """
    try:
        yield
    except FileAccessError:
        raise
    except FileNotFoundError as e:
        logger.debug("Cannot %s %s: not found", action, path)
        raise NotFoundError(e.errno, f"Cannot {action}: {e.strerror or e}", str(path)) from e
    except OSError as e:
        logger.debug("Cannot %s %s: %s", action, path, e)
        raise FileIOError(e.errno, f"Cannot {action}: {e.strerror or e}", str(path)) from e
    except UnicodeError as e:
        logger.debug("Cannot %s %s: %s", action, path, e)
        raise FileIOError(f"Cannot {action} {path}: {e}") from e
    except ValueError as e:
        logger.debug("Cannot %s %s: invalid input: %s", action, path, e)
        raise InvalidInputError(f"Cannot {action} {path!r}: {e}") from e
