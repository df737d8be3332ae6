from __future__ import annotations

"""Open file handles and whole-file reads.

CONTRACT
- Inputs: FilesystemCapability + raw descriptor from a successful open/create
- Outputs (required):
  - FileHandle usable as a context manager
  - read_all() -> bytes, read_to_string() -> str
- Invariants:
  - A FileHandle always wraps a descriptor that was opened successfully
  - close() is idempotent; leaving a `with` block always closes
  - read_all() never returns partial content
- Failure:
  - ValueError on I/O against a closed handle
  - ReadFailure (kind classified) when a read or decode fails
"""

import errno
from pathlib import Path
from types import TracebackType

from loguru import logger

from .capability import FilesystemCapability
from .errors import ReadFailure, classify

DEFAULT_CHUNK_SIZE = 8192


class FileHandle:
    def __init__(self, fs: FilesystemCapability, raw: int, path: Path, *, created: bool = False) -> None:
        self._fs = fs
        self._raw: int | None = raw
        self.path = path
        self.created = created

    @property
    def closed(self) -> bool:
        return self._raw is None

    def fileno(self) -> int:
        return self._checked()

    def _checked(self) -> int:
        if self._raw is None:
            raise ValueError(f"I/O operation on closed handle: {self.path}")
        return self._raw

    def read(self, size: int = DEFAULT_CHUNK_SIZE) -> bytes:
        return self._fs.read(self._checked(), size)

    def write(self, data: bytes) -> int:
        raw = self._checked()
        view = memoryview(data)
        total = 0
        while total < len(view):
            n = self._fs.write(raw, view[total:].tobytes())
            if n <= 0:
                raise OSError(errno.EIO, "write made no progress", str(self.path))
            total += n
        return total

    def close(self) -> None:
        if self._raw is None:
            return
        raw, self._raw = self._raw, None
        self._fs.close(raw)

    def __enter__(self) -> FileHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"fd={self._raw}"
        return f"FileHandle({str(self.path)!r}, {state}, created={self.created})"


def read_all(handle: FileHandle, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Read from the current position to end of file.

    A failing read discards whatever was already buffered, so callers never
    mistake truncated data for the complete content.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    buf = bytearray()
    try:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            buf.extend(chunk)
    except OSError as exc:
        logger.debug(f"Read of {handle.path} failed after {len(buf)} bytes; discarding")
        buf.clear()
        raise ReadFailure(kind=classify(exc), path=handle.path, detail=exc) from exc
    return bytes(buf)


def read_to_string(
    handle: FileHandle, encoding: str = "utf-8", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> str:
    return decode_content(read_all(handle, chunk_size), handle.path, encoding)


def decode_content(data: bytes, path: Path, encoding: str = "utf-8") -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ReadFailure(kind=classify(exc), path=path, detail=exc) from exc
