"""Recursive directory copy into a derived destination.

The copy never merges into an existing target: the effective destination
``destination_parent / basename(source_dir)`` must not exist beforehand.

Copies are best effort. When an entry fails mid-walk the error is raised
and whatever was already copied stays in place. Callers that need an
all-or-nothing result should copy into a temporary parent and rename the
result themselves.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from pathlib import Path

from fs_utils.errors import DestinationExistsError, FsIOError, InvalidPathError
from fs_utils.paths import StrPath, basename, join

logger = logging.getLogger(__name__)

# Deepest subdirectory nesting below the source that will be copied
DEFAULT_MAX_DEPTH = 256

_DirKey = tuple[int, int]


def destination_directory(source_dir: StrPath, destination_parent: StrPath) -> Path:
    """Compute the effective destination of a copy.

    Pure path arithmetic; the filesystem is not consulted.

    Args:
        source_dir: Directory that would be copied.
        destination_parent: Directory the copy would be created in.

    Returns:
        ``destination_parent / basename(source_dir)``.

    Raises:
        InvalidPathError: If the basename of source_dir cannot be determined
            or destination_parent is empty.
    """
    return join(destination_parent, basename(source_dir))


compute_destination = destination_directory


def copy_directory(
    source_dir: StrPath,
    destination_parent: StrPath,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Path:
    """Copy a directory tree into a new subdirectory of destination_parent.

    Args:
        source_dir: Directory to copy.
        destination_parent: Existing directory that receives the copy.
        max_depth: Maximum subdirectory nesting below source_dir.

    Returns:
        Path of the newly created copy.

    Raises:
        InvalidPathError: If the destination cannot be derived, or lies
            inside the source tree.
        DestinationExistsError: If the effective destination already exists.
        FsIOError: If any filesystem call fails, a symlink cycle is found,
            or the tree is nested deeper than max_depth.
        ValueError: If max_depth is less than 1.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    destination = destination_directory(source_dir, destination_parent)
    source = Path(os.fspath(source_dir))

    try:
        source_stat = source.stat()
    except OSError as e:
        raise FsIOError.from_os_error("read source directory", e, source) from e
    if not stat.S_ISDIR(source_stat.st_mode):
        raise FsIOError(
            f"Source is not a directory: '{source}'",
            path=source,
            errno=errno.ENOTDIR,
            strerror=os.strerror(errno.ENOTDIR),
        )

    if os.path.lexists(destination):
        raise DestinationExistsError(
            f"Destination already exists: '{destination}'", path=destination
        )

    _ensure_not_nested(source, destination)
    _make_dir(destination)
    _copy_tree(source, destination, (source_stat.st_dev, source_stat.st_ino), max_depth)

    logger.debug("Copied '%s' to '%s'", source, destination)
    return destination


def _ensure_not_nested(source: Path, destination: Path) -> None:
    """Reject a destination located inside the source tree."""
    resolved_source = source.resolve()
    resolved_destination = destination.resolve()
    if resolved_source in resolved_destination.parents:
        raise InvalidPathError(
            f"Cannot copy '{source}' into its own subtree '{destination}'",
            path=destination,
        )


def _make_dir(path: Path) -> None:
    try:
        path.mkdir()
    except OSError as e:
        raise FsIOError.from_os_error("create directory", e, path) from e
    logger.debug("Created directory '%s'", path)


def _copy_tree(source: Path, destination: Path, root_key: _DirKey, max_depth: int) -> None:
    """Walk source with an explicit stack, mirroring it under destination.

    Each stack frame carries the inode keys of its ancestors so a directory
    reached again through a symlink is reported instead of copied forever.
    """
    stack: list[tuple[Path, Path, int, frozenset[_DirKey]]] = [
        (source, destination, 0, frozenset({root_key}))
    ]

    while stack:
        src_dir, dst_dir, depth, ancestry = stack.pop()
        try:
            with os.scandir(src_dir) as entries:
                for entry in entries:
                    child = _copy_entry(entry, dst_dir, depth, ancestry, max_depth)
                    if child is not None:
                        stack.append(child)
        except FsIOError:
            raise
        except OSError as e:
            raise FsIOError.from_os_error("read directory", e, src_dir) from e


def _copy_entry(
    entry: os.DirEntry[str],
    dst_dir: Path,
    depth: int,
    ancestry: frozenset[_DirKey],
    max_depth: int,
) -> tuple[Path, Path, int, frozenset[_DirKey]] | None:
    """Copy a single entry.

    Files are copied immediately. Directories are created and returned as a
    new stack frame for the caller to walk.
    """
    target = dst_dir / entry.name
    try:
        entry_stat = entry.stat()
    except OSError as e:
        raise FsIOError.from_os_error("stat", e, entry.path) from e

    if stat.S_ISDIR(entry_stat.st_mode):
        key = (entry_stat.st_dev, entry_stat.st_ino)
        if key in ancestry:
            raise FsIOError(
                f"Directory cycle detected at '{entry.path}'",
                path=entry.path,
                errno=errno.ELOOP,
                strerror=os.strerror(errno.ELOOP),
            )
        if depth + 1 > max_depth:
            raise FsIOError(
                f"Maximum directory depth {max_depth} exceeded at '{entry.path}'",
                path=entry.path,
            )
        _make_dir(target)
        return Path(entry.path), target, depth + 1, ancestry | {key}

    if stat.S_ISREG(entry_stat.st_mode):
        try:
            shutil.copy(entry.path, target)
        except OSError as e:
            raise FsIOError.from_os_error("copy file", e, entry.path) from e
        logger.debug("Copied file '%s'", target)
        return None

    raise FsIOError(f"Unsupported file type: '{entry.path}'", path=entry.path)
