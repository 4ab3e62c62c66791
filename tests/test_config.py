"""Tests for configuration."""

from __future__ import annotations

import os

import pytest
from pydantic import ValidationError

from file_access.config import AccessConfig


class TestAccessConfig:
    """Tests for AccessConfig model."""

    def test_default_values(self) -> None:
        """Test AccessConfig has correct defaults."""
        config = AccessConfig()
        assert config.encoding == "utf-8"
        assert config.errors == "strict"
        assert config.newline is None
        assert config.missing_ok is False

    @pytest.mark.parametrize("newline", [None, "\n", "\r", "\r\n"])
    def test_valid_newlines(self, newline: str | None) -> None:
        """Test every supported line terminator."""
        assert AccessConfig(newline=newline).newline == newline

    def test_invalid_newline(self) -> None:
        """Test unknown newline values are rejected."""
        with pytest.raises(ValidationError):
            AccessConfig(newline="\n\n")
        with pytest.raises(ValidationError):
            AccessConfig(newline="")

    def test_unknown_encoding(self) -> None:
        """Test unknown encodings are rejected."""
        with pytest.raises(ValidationError):
            AccessConfig(encoding="not-a-codec")

    def test_unknown_error_handler(self) -> None:
        """Test unknown codec error handlers are rejected."""
        with pytest.raises(ValidationError):
            AccessConfig(errors="explode")

    def test_frozen(self) -> None:
        """Test configs are immutable."""
        config = AccessConfig()
        with pytest.raises(ValidationError):
            config.missing_ok = True  # type: ignore[misc]

    def test_line_terminator_default(self) -> None:
        """Test the platform terminator is used when none is configured."""
        assert AccessConfig().line_terminator == os.linesep

    def test_line_terminator_configured(self) -> None:
        """Test a configured terminator overrides the platform default."""
        assert AccessConfig(newline="\r\n").line_terminator == "\r\n"
