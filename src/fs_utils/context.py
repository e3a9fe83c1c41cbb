"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be exercised in tests with doubles in place of the real filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fs_utils.config import ConfigManager, Settings
from fs_utils.protocols import FileSystemUtils


@dataclass
class AppContext:
    """Container for the services used by CLI commands.

    The filesystem is typed by protocol, not concrete class.
    """

    filesystem: FileSystemUtils
    config: ConfigManager
    settings: Settings


def create_context(config_dir: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Loads settings once and configures the filesystem facade from them.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_dir: Override config directory (for testing).

    Returns:
        Configured AppContext.
    """
    from fs_utils.filesystem import RealFileSystem

    config = ConfigManager.create(config_dir) if config_dir else ConfigManager.create_default()
    settings = config.load()
    filesystem = RealFileSystem(max_depth=settings.max_depth)

    return AppContext(filesystem=filesystem, config=config, settings=settings)
