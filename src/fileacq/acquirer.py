from __future__ import annotations

"""Idempotent file acquisition with typed-failure recovery.

CONTRACT
- Inputs: path (non-empty), create_if_missing flag
- Outputs (required):
  - acquire() -> FileHandle, or raises AcquisitionError
  - try_acquire() -> AcquisitionOutcome (handle or classified error)
- Invariants:
  - At most one open attempt and at most one create attempt per call
  - Every open failure is classified before the create decision is made
  - Create is only attempted for NOT_FOUND with create_if_missing=True
- Failure:
  - ValueError on an empty path
  - NotFoundFailure / PermissionFailure / OtherIoFailure for open failures
  - CreateFailure when the fallback create fails
"""

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Callable

from loguru import logger

from .capability import FilesystemCapability, LocalFilesystem
from .errors import (
    AcquisitionError,
    FailureKind,
    UnrecoveredError,
    classify,
    create_failure,
    open_failure,
)
from .handle import FileHandle

PathArg = str | PathLike[str]


def _as_path(path: PathArg) -> Path:
    if not str(path):
        raise ValueError("path must be non-empty")
    return Path(path)


@dataclass(frozen=True)
class AcquisitionOutcome:
    """Either an open FileHandle or the error explaining why there is none."""

    path: Path
    handle: FileHandle | None = None
    error: AcquisitionError | None = None

    def __post_init__(self) -> None:
        if (self.handle is None) == (self.error is None):
            raise ValueError("AcquisitionOutcome needs exactly one of handle or error")

    @property
    def ok(self) -> bool:
        return self.handle is not None

    @property
    def kind(self) -> FailureKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> FileHandle:
        if self.error is not None:
            raise self.error
        assert self.handle is not None
        return self.handle

    def expect(self, message: str) -> FileHandle:
        if self.error is not None:
            raise UnrecoveredError(message, self.error) from self.error
        assert self.handle is not None
        return self.handle

    def unwrap_or_else(self, fallback: Callable[[AcquisitionError], FileHandle]) -> FileHandle:
        if self.error is not None:
            return fallback(self.error)
        assert self.handle is not None
        return self.handle


@dataclass(frozen=True)
class FileAcquirer:
    fs: FilesystemCapability = field(default_factory=LocalFilesystem)

    def open(self, path: PathArg, writable: bool = False) -> FileHandle:
        p = _as_path(path)
        try:
            raw = self.fs.open(p, writable)
        except OSError as exc:
            kind = classify(exc)
            logger.debug(f"Open of {p} failed: {kind.value}")
            raise open_failure(kind, p, exc) from exc
        return FileHandle(self.fs, raw, p)

    def create(self, path: PathArg) -> FileHandle:
        p = _as_path(path)
        try:
            raw = self.fs.create(p)
        except OSError as exc:
            logger.debug(f"Create of {p} failed: {classify(exc).value}")
            raise create_failure(p, exc) from exc
        logger.info(f"Created {p}")
        return FileHandle(self.fs, raw, p, created=True)

    def acquire(self, path: PathArg, create_if_missing: bool = False) -> FileHandle:
        p = _as_path(path)
        try:
            return self.open(p, writable=create_if_missing)
        except AcquisitionError as err:
            if err.kind is FailureKind.NOT_FOUND and create_if_missing:
                return self.create(p)
            raise

    def try_open(self, path: PathArg, writable: bool = False) -> AcquisitionOutcome:
        p = _as_path(path)
        try:
            return AcquisitionOutcome(p, handle=self.open(p, writable))
        except AcquisitionError as err:
            return AcquisitionOutcome(p, error=err)

    def try_acquire(self, path: PathArg, create_if_missing: bool = False) -> AcquisitionOutcome:
        p = _as_path(path)
        try:
            return AcquisitionOutcome(p, handle=self.acquire(p, create_if_missing))
        except AcquisitionError as err:
            return AcquisitionOutcome(p, error=err)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Open (or create) a file and report the outcome")
    parser.add_argument("path", help="File to acquire")
    parser.add_argument("--create", action="store_true", help="Create the file if it is missing")
    args = parser.parse_args()

    outcome = FileAcquirer().try_acquire(args.path, create_if_missing=args.create)
    if outcome.ok:
        with outcome.unwrap() as h:
            print(f"Acquired {h.path} (created={h.created})")
    else:
        print(f"Error: {outcome.error}", file=sys.stderr)
        sys.exit(1)
