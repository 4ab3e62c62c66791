"""Configuration for file access operations."""

from __future__ import annotations

import codecs
import os

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = ["AccessConfig"]

# Terminators accepted for line-oriented writes
LINE_TERMINATORS = (None, "\n", "\r", "\r\n")


class AccessConfig(BaseModel):
    """Text encoding and policy settings shared by all operations.

    Attributes:
        encoding: Codec used to read and write text.
        errors: Codec error handler ("strict", "replace", ...).
        newline: Terminator written after each line by ``write_lines`` and
            ``append_lines``. ``None`` uses the platform terminator. Whole-file
            text is always read and written verbatim.
        missing_ok: Default for ``delete`` when the path does not exist.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = "utf-8"
    errors: str = "strict"
    newline: str | None = None
    missing_ok: bool = False

    @property
    def line_terminator(self) -> str:
        """The terminator appended to every written line."""
        return self.newline if self.newline is not None else os.linesep

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value

    @field_validator("errors")
    @classmethod
    def _known_error_handler(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"Unknown error handler: {value!r}") from e
        return value

    @field_validator("newline")
    @classmethod
    def _valid_newline(cls, value: str | None) -> str | None:
        if value not in LINE_TERMINATORS:
            raise ValueError(f"Unsupported newline: {value!r}")
        return value
