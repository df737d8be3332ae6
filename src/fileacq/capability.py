from __future__ import annotations

"""Filesystem capability.

CONTRACT
- Inputs: Path, raw descriptor (int), byte counts/data
- Outputs (required):
  - open()/create() return a raw descriptor that is genuinely open
  - read() returns b"" at end of file
- Invariants:
  - open() never creates and never truncates
  - create() only succeeds on a path that did not exist (file starts empty)
- Failure:
  - Raises OSError; its subclass and errno carry the structured kind
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class FilesystemCapability(Protocol):
    def open(self, path: Path, writable: bool) -> int: ...

    def create(self, path: Path) -> int: ...

    def read(self, raw: int, size: int) -> bytes: ...

    def write(self, raw: int, data: bytes) -> int: ...

    def close(self, raw: int) -> None: ...


_CLOEXEC = getattr(os, "O_CLOEXEC", 0)
_BINARY = getattr(os, "O_BINARY", 0)


@dataclass(frozen=True)
class LocalFilesystem:
    create_mode: int = 0o666

    def open(self, path: Path, writable: bool) -> int:
        flags = (os.O_RDWR if writable else os.O_RDONLY) | _CLOEXEC | _BINARY
        return os.open(path, flags)

    def create(self, path: Path) -> int:
        # O_EXCL: a file that appeared after the failed open is reported, not clobbered.
        flags = os.O_RDWR | os.O_CREAT | os.O_EXCL | _CLOEXEC | _BINARY
        return os.open(path, flags, self.create_mode)

    def read(self, raw: int, size: int) -> bytes:
        return os.read(raw, size)

    def write(self, raw: int, data: bytes) -> int:
        return os.write(raw, data)

    def close(self, raw: int) -> None:
        os.close(raw)
