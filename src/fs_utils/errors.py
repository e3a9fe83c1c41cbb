"""Error taxonomy for filesystem operations."""

from __future__ import annotations

import os
from enum import Enum

__all__ = [
    "DestinationExistsError",
    "ErrorKind",
    "FsIOError",
    "FsUtilsError",
    "InvalidPathError",
]


class ErrorKind(str, Enum):
    """Category of a failed operation."""

    INVALID_PATH = "invalid_path"
    DESTINATION_EXISTS = "destination_exists"
    IO = "io"
    INVALID_ARGUMENT = "invalid_argument"


class FsUtilsError(Exception):
    """Base error for filesystem operations.

    Attributes:
        message: Human-readable description.
        path: Path the failure relates to, if known.
    """

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = os.fspath(path) if path is not None else None


class InvalidPathError(FsUtilsError):
    """A path is malformed or an effective destination cannot be derived."""

    kind = ErrorKind.INVALID_PATH


class DestinationExistsError(FsUtilsError):
    """The effective copy destination already exists."""

    kind = ErrorKind.DESTINATION_EXISTS


class FsIOError(FsUtilsError, OSError):
    """An underlying filesystem call failed.

    An OSError itself, so ``except OSError`` handlers see it. Carries the
    errno, OS message and filename of the original OSError, which is also
    chained as ``__cause__`` when raised through ``from_os_error``.
    """

    kind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        path: str | os.PathLike[str] | None = None,
        errno: int | None = None,
        strerror: str | None = None,
    ) -> None:
        super().__init__(message, path)
        self.errno = errno
        self.strerror = strerror
        self.filename = self.path

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_os_error(
        cls, action: str, exc: OSError, path: str | os.PathLike[str] | None = None
    ) -> FsIOError:
        """Wrap an OSError raised while performing ``action``.

        Args:
            action: Short verb phrase, e.g. "read directory".
            exc: The original error.
            path: Path to report. Defaults to the error's filename.

        Returns:
            FsIOError describing the failure.
        """
        target = path if path is not None else exc.filename
        detail = exc.strerror or str(exc)
        if target is not None:
            message = f"Failed to {action} '{os.fspath(target)}': {detail}"
        else:
            message = f"Failed to {action}: {detail}"
        return cls(message, path=target, errno=exc.errno, strerror=exc.strerror)
