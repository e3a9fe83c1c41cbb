"""Path helpers shared by the copy and read operations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from fs_utils.errors import InvalidPathError

StrPath = Union[str, "os.PathLike[str]"]

_SEPARATORS = os.sep + (os.altsep or "")


def basename(path: StrPath) -> str:
    """Return the final component of a path, ignoring trailing separators.

    Args:
        path: Path to inspect.

    Returns:
        The last path component.

    Raises:
        InvalidPathError: If the path is empty, a filesystem root, or ends
            in a relative marker ("." or "..") that has no name of its own.
    """
    raw = os.fspath(path)
    if not raw:
        raise InvalidPathError("Path is empty", path=raw)

    name = os.path.basename(raw.rstrip(_SEPARATORS))
    if name in ("", os.curdir, os.pardir):
        raise InvalidPathError(f"Cannot determine the final component of '{raw}'", path=raw)
    return name


def join(parent: StrPath, name: str) -> Path:
    """Join a parent directory and a single child name.

    Raises:
        InvalidPathError: If the parent is empty or the name is not a single
            plain component.
    """
    raw_parent = os.fspath(parent)
    if not raw_parent:
        raise InvalidPathError("Destination parent is empty", path=raw_parent)
    if not name or any(sep in name for sep in _SEPARATORS) or "\x00" in name:
        raise InvalidPathError(f"Invalid path component '{name}'", path=name)
    return Path(raw_parent) / name
