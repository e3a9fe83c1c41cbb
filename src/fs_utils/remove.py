"""Removal of a directory's contents."""

from __future__ import annotations

import logging
import os
import shutil

from fs_utils.errors import FsIOError
from fs_utils.paths import StrPath

logger = logging.getLogger(__name__)


def cleanup_folder(path: StrPath) -> None:
    """Delete everything inside a directory while keeping the directory.

    Useful when the directory's own permissions must be preserved, or when
    the caller may modify the directory's contents but not the directory.

    Symlinks are unlinked, never followed. Deletion stops at the first
    failure; entries removed before it stay removed.

    Args:
        path: Directory to clear.

    Raises:
        FsIOError: If the directory cannot be listed or an entry cannot be
            deleted.
    """
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise FsIOError.from_os_error("read directory", e, path) from e

    for entry in entries:
        _remove_entry(entry)


def _remove_entry(entry: os.DirEntry[str]) -> None:
    try:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.unlink(entry.path)
    except OSError as e:
        raise FsIOError.from_os_error("remove", e, e.filename or entry.path) from e
    logger.debug("Removed '%s'", entry.path)
