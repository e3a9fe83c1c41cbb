"""Result-returning facade over the filesystem operations.

The module-level functions in ``fs_utils`` raise on failure. RealFileSystem
wraps them so every call returns an OperationResult instead, which suits
callers that check status rather than catch exceptions.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from fs_utils import check, copy, read, remove
from fs_utils.errors import FsUtilsError
from fs_utils.paths import StrPath
from fs_utils.types import OperationResult

T = TypeVar("T")


def _capture(func: Callable[[], T]) -> OperationResult[T]:
    try:
        return OperationResult.ok(func())
    except (FsUtilsError, ValueError) as e:
        return OperationResult.from_exception(e)


class RealFileSystem:
    """Production implementation of the FileSystemUtils protocol.

    Satisfies the protocol structurally.
    """

    def __init__(self, max_depth: int = copy.DEFAULT_MAX_DEPTH) -> None:
        """Initialize the facade.

        Args:
            max_depth: Subdirectory nesting limit used by copy_directory.
        """
        self.max_depth = max_depth

    def is_folder_empty(self, path: StrPath) -> OperationResult[bool]:
        """Check whether a directory has no entries."""
        return _capture(lambda: check.is_folder_empty(path))

    def destination_directory(
        self, source_dir: StrPath, destination_parent: StrPath
    ) -> OperationResult[Path]:
        """Compute the effective destination of a copy."""
        return _capture(lambda: copy.destination_directory(source_dir, destination_parent))

    def copy_directory(
        self,
        source_dir: StrPath,
        destination_parent: StrPath,
        max_depth: int | None = None,
    ) -> OperationResult[Path]:
        """Copy a directory tree into a new subdirectory of destination_parent.

        Args:
            source_dir: Directory to copy.
            destination_parent: Directory that receives the copy.
            max_depth: Nesting limit for this call. Defaults to the instance limit.
        """
        depth = self.max_depth if max_depth is None else max_depth
        return _capture(
            lambda: copy.copy_directory(source_dir, destination_parent, max_depth=depth)
        )

    def head(self, path: StrPath, limit: int) -> OperationResult[bytes]:
        """Read the first bytes of a file."""
        return _capture(lambda: read.head(path, limit))

    def head_to_string(self, path: StrPath, limit: int) -> OperationResult[str]:
        """Read the first bytes of a file as UTF-8 text."""
        return _capture(lambda: read.head_to_string(path, limit))

    def head_to_string_with_message(
        self, path: StrPath, limit: int, message: str
    ) -> OperationResult[str]:
        """Read the first bytes of a file as text, marking truncation."""
        return _capture(lambda: read.head_to_string_with_message(path, limit, message))

    def cleanup_folder(self, path: StrPath) -> OperationResult[None]:
        """Delete the contents of a directory, keeping the directory."""
        return _capture(lambda: remove.cleanup_folder(path))
