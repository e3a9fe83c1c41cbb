"""Bounded reads of a file's leading bytes.

``head`` mirrors ``head -c N``. The string variants decode the bytes as
UTF-8, replacing each maximal invalid subsequence with a single U+FFFD
REPLACEMENT CHARACTER. A multi-byte character cut in half by the limit is
replaced the same way rather than dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fs_utils.errors import FsIOError
from fs_utils.paths import StrPath

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class ByteWindow:
    """Leading bytes of a file.

    Attributes:
        data: At most ``limit`` bytes from the start of the file.
        was_truncated: True if the file holds more than ``limit`` bytes.
    """

    data: bytes
    was_truncated: bool

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def decode(self) -> str:
        """Decode the window as UTF-8 with replacement of invalid sequences."""
        return self.data.decode("utf-8", errors="replace")


def read_head_bytes(path: StrPath, limit: int) -> ByteWindow:
    """Read up to ``limit`` bytes from the start of a file.

    One byte past the limit is requested so truncation is detected from the
    stream itself, which also works for files whose size is not reported
    by stat (pipes, procfs entries).

    Args:
        path: File to read.
        limit: Maximum number of bytes to return. Zero is allowed.

    Returns:
        ByteWindow with the bytes read and the truncation flag.

    Raises:
        ValueError: If limit is negative.
        FsIOError: If the file cannot be opened or read.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")

    budget = limit + 1
    chunks: list[bytes] = []
    try:
        with open(path, "rb") as f:
            while budget > 0:
                chunk = f.read(min(budget, _CHUNK_SIZE))
                if not chunk:
                    break
                chunks.append(chunk)
                budget -= len(chunk)
    except OSError as e:
        raise FsIOError.from_os_error("read file", e, path) from e

    data = b"".join(chunks)
    was_truncated = len(data) > limit
    if was_truncated:
        data = data[:limit]
    logger.debug("Read %d bytes from '%s' (truncated=%s)", len(data), path, was_truncated)
    return ByteWindow(data=data, was_truncated=was_truncated)


def head(path: StrPath, limit: int) -> bytes:
    """Return the first ``limit`` bytes of a file.

    The length of the result is ``min(limit, file size)``.
    """
    return read_head_bytes(path, limit).data


def head_to_string(path: StrPath, limit: int) -> str:
    """Return the first ``limit`` bytes of a file decoded as UTF-8."""
    return head_to_string_with_message(path, limit, "")


def head_to_string_with_message(path: StrPath, limit: int, message: str) -> str:
    """Return the first ``limit`` bytes of a file decoded as UTF-8.

    Args:
        path: File to read.
        limit: Maximum number of bytes to decode.
        message: Appended verbatim when the file is longer than limit.

    Returns:
        Decoded text, followed by message if the read was truncated.

    Raises:
        FsIOError: If the file cannot be opened or read.

    Example:
        A file containing ``hello world``, read with limit 5 and message
        ``" [cut]"``, yields ``"hello [cut]"``.
    """
    window = read_head_bytes(path, limit)
    text = window.decode()
    if window.was_truncated and message:
        text += message
    return text
