"""Protocol definitions for core abstractions.

Designing to an interface lets the CLI accept any object with the same
shape, so tests can substitute doubles without touching real files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from fs_utils.paths import StrPath
from fs_utils.types import OperationResult


@runtime_checkable
class FileSystemUtils(Protocol):
    """Protocol for result-returning filesystem operations.

    Implementations never raise for filesystem failures; every outcome is
    reported through an OperationResult.
    """

    def is_folder_empty(self, path: StrPath) -> OperationResult[bool]:
        """Check whether a directory has no entries.

        Args:
            path: Directory to inspect.

        Returns:
            Result holding True if the directory is empty.
        """
        ...

    def destination_directory(
        self, source_dir: StrPath, destination_parent: StrPath
    ) -> OperationResult[Path]:
        """Compute the effective destination of a copy.

        Args:
            source_dir: Directory that would be copied.
            destination_parent: Directory the copy would be created in.

        Returns:
            Result holding ``destination_parent / basename(source_dir)``.
        """
        ...

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
            max_depth: Maximum subdirectory nesting, or None for the
                implementation default.

        Returns:
            Result holding the path of the copy.
        """
        ...

    def head(self, path: StrPath, limit: int) -> OperationResult[bytes]:
        """Read the first bytes of a file.

        Args:
            path: File to read.
            limit: Maximum number of bytes.

        Returns:
            Result holding at most limit bytes.
        """
        ...

    def head_to_string(self, path: StrPath, limit: int) -> OperationResult[str]:
        """Read the first bytes of a file as UTF-8 text.

        Args:
            path: File to read.
            limit: Maximum number of bytes.

        Returns:
            Result holding the decoded text.
        """
        ...

    def head_to_string_with_message(
        self, path: StrPath, limit: int, message: str
    ) -> OperationResult[str]:
        """Read the first bytes of a file as text, marking truncation.

        Args:
            path: File to read.
            limit: Maximum number of bytes.
            message: Appended when the file is longer than limit.

        Returns:
            Result holding the decoded text.
        """
        ...

    def cleanup_folder(self, path: StrPath) -> OperationResult[None]:
        """Delete the contents of a directory, keeping the directory.

        Args:
            path: Directory to clear.

        Returns:
            Result with no value on success.
        """
        ...
