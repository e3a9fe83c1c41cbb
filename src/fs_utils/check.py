"""Directory state checks."""

from __future__ import annotations

import os

from fs_utils.errors import FsIOError
from fs_utils.paths import StrPath


def is_folder_empty(path: StrPath) -> bool:
    """Check whether a directory has no entries at its top level.

    Args:
        path: Directory to inspect.

    Returns:
        True if the directory contains no files or subdirectories.

    Raises:
        FsIOError: If the path is missing, not a directory, or unreadable.
    """
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError as e:
        raise FsIOError.from_os_error("read directory", e, path) from e
