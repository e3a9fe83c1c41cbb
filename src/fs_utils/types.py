"""Shared data types for fs-utils."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, cast

from fs_utils.errors import (
    DestinationExistsError,
    ErrorKind,
    FsIOError,
    FsUtilsError,
    InvalidPathError,
)

__all__ = ["OperationResult"]

T = TypeVar("T")

_ERROR_TYPES: dict[ErrorKind, type[FsUtilsError]] = {
    ErrorKind.INVALID_PATH: InvalidPathError,
    ErrorKind.DESTINATION_EXISTS: DestinationExistsError,
    ErrorKind.IO: FsIOError,
}


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Result of a filesystem operation.

    Exactly one of ``value`` or ``error`` is meaningful: a successful result
    carries the operation's output, a failed one carries a message and the
    error kind.

    Attributes:
        success: True if the operation succeeded.
        value: Output of the operation (None on failure, and for operations
            with no output).
        error: Error message (None on success).
        kind: Error category (None on success).
    """

    success: bool
    value: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.success and (self.error is not None or self.kind is not None):
            raise ValueError("success=True but error is set")
        if not self.success:
            if not self.error:
                raise ValueError("success=False requires error message")
            if self.kind is None:
                raise ValueError("success=False requires error kind")
            if self.value is not None:
                raise ValueError("success=False but value is set")

    @classmethod
    def ok(cls, value: T | None = None) -> OperationResult[T]:
        """Build a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, kind: ErrorKind) -> OperationResult[T]:
        """Build a failed result."""
        return cls(success=False, error=error, kind=kind)

    @classmethod
    def from_exception(cls, exc: Exception) -> OperationResult[T]:
        """Build a failed result from a raised error.

        FsUtilsError keeps its own kind; ValueError is an invalid argument.
        """
        if isinstance(exc, FsUtilsError):
            return cls.fail(exc.message, exc.kind)
        if isinstance(exc, ValueError):
            return cls.fail(str(exc), ErrorKind.INVALID_ARGUMENT)
        raise TypeError(f"Unsupported error type: {type(exc).__name__}") from exc

    def unwrap(self) -> T | None:
        """Return the value, or raise the error this result describes.

        Raises:
            FsUtilsError: Subclass matching ``kind`` on failure.
            ValueError: If the failure was an invalid argument.
        """
        if self.success:
            return self.value
        error = cast(str, self.error)
        kind = cast(ErrorKind, self.kind)
        if kind is ErrorKind.INVALID_ARGUMENT:
            raise ValueError(error)
        raise _ERROR_TYPES[kind](error)
