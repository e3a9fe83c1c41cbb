"""Shared test fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

requires_posix_permissions = pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced for this user/platform",
)


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = tmp_path / ".fs-utils"
    config_dir.mkdir(parents=True)
    return config_dir


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small source tree with nested directories and binary data.

    Layout:
        project/
            README.md
            data.bin
            empty/
            src/
                main.py
                pkg/
                    __init__.py
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "README.md").write_text("# Project\n")
    (root / "data.bin").write_bytes(bytes(range(256)) * 4)
    (root / "empty").mkdir()
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "pkg").mkdir()
    (root / "src" / "pkg" / "__init__.py").write_bytes(b"")
    return root


@pytest.fixture
def destination_parent(tmp_path: Path) -> Path:
    """Create an empty directory to copy into."""
    parent = tmp_path / "backup"
    parent.mkdir()
    return parent


# ============================================================================
# Mock Context Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystemUtils for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    return MagicMock()


@pytest.fixture
def mock_app_context(mock_filesystem: MagicMock, temp_config_dir: Path) -> MagicMock:
    """Create a complete mock AppContext for CLI testing."""
    from fs_utils.config import ConfigManager, Settings
    from fs_utils.context import AppContext

    ctx = MagicMock(spec=AppContext)
    ctx.filesystem = mock_filesystem
    ctx.config = ConfigManager.create(temp_config_dir)
    ctx.settings = Settings()
    return ctx
