"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from file_access.config import AccessConfig
from file_access.operations import FileOperations


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside a temporary current directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def ops() -> FileOperations:
    """Operation set backed by the real filesystem."""
    return FileOperations.create()


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_file.return_value = False
    fs.is_dir.return_value = False
    fs.read_text.return_value = ""
    return fs


@pytest.fixture
def mock_ops(mock_filesystem: MagicMock) -> FileOperations:
    """Operation set wired to the mock filesystem."""
    return FileOperations(filesystem=mock_filesystem, config=AccessConfig())
