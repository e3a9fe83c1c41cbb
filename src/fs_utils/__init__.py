"""Filesystem primitives: emptiness checks, safe directory copies, bounded reads."""

__version__ = "0.1.0"

from fs_utils.check import is_folder_empty
from fs_utils.copy import compute_destination, copy_directory, destination_directory
from fs_utils.errors import (
    DestinationExistsError,
    ErrorKind,
    FsIOError,
    FsUtilsError,
    InvalidPathError,
)
from fs_utils.read import (
    ByteWindow,
    head,
    head_to_string,
    head_to_string_with_message,
    read_head_bytes,
)
from fs_utils.remove import cleanup_folder
from fs_utils.types import OperationResult

__all__ = [
    "__version__",
    "ByteWindow",
    "DestinationExistsError",
    "ErrorKind",
    "FsIOError",
    "FsUtilsError",
    "InvalidPathError",
    "OperationResult",
    "cleanup_folder",
    "compute_destination",
    "copy_directory",
    "destination_directory",
    "head",
    "head_to_string",
    "head_to_string_with_message",
    "is_folder_empty",
    "read_head_bytes",
]
