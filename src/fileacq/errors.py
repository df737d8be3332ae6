from __future__ import annotations

"""Failure classification and error taxonomy.

CONTRACT
- Inputs: OSError (or UnicodeDecodeError) raised by a filesystem operation
- Outputs:
  - classify() returns exactly one FailureKind
  - Typed errors carrying kind, path, operation and the chained root cause
- Invariants:
  - Classification uses the exception type and errno, never message text
  - Every error keeps the original exception as __cause__ when raised `from`
- Failure:
  - classify() never raises; unknown failures map to FailureKind.OTHER
"""

import errno
from enum import Enum
from pathlib import Path


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    INVALID_DATA = "invalid_data"
    OTHER = "other"


_ERRNO_KINDS = {
    errno.ENOENT: FailureKind.NOT_FOUND,
    errno.EACCES: FailureKind.PERMISSION_DENIED,
    errno.EPERM: FailureKind.PERMISSION_DENIED,
    errno.EEXIST: FailureKind.ALREADY_EXISTS,
}


def classify(exc: BaseException) -> FailureKind:
    if isinstance(exc, UnicodeDecodeError):
        return FailureKind.INVALID_DATA
    if isinstance(exc, FileNotFoundError):
        return FailureKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return FailureKind.PERMISSION_DENIED
    if isinstance(exc, FileExistsError):
        return FailureKind.ALREADY_EXISTS
    if isinstance(exc, OSError) and exc.errno is not None:
        return _ERRNO_KINDS.get(exc.errno, FailureKind.OTHER)
    return FailureKind.OTHER


class FileAcqError(Exception):
    """Base type for every error raised by fileacq."""


class AcquisitionError(FileAcqError):
    """An open or create attempt failed.

    `detail` is the underlying exception; it is also chained as __cause__
    by the code that raises this error.
    """

    def __init__(
        self,
        *,
        kind: FailureKind,
        path: Path,
        operation: str,
        detail: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.path = path
        self.operation = operation
        self.detail = detail
        cause = detail if detail is not None else kind.value
        super().__init__(f"Problem {operation} the file '{path}': {cause}")

    @property
    def errno(self) -> int | None:
        return getattr(self.detail, "errno", None)


class NotFoundFailure(AcquisitionError):
    pass


class PermissionFailure(AcquisitionError):
    pass


class OtherIoFailure(AcquisitionError):
    pass


class CreateFailure(AcquisitionError):
    pass


class ReadFailure(FileAcqError):
    """Reading an open handle failed; no partial content is kept."""

    def __init__(self, *, kind: FailureKind, path: Path, detail: BaseException) -> None:
        self.kind = kind
        self.path = path
        self.operation = "reading"
        self.detail = detail
        super().__init__(f"Problem reading the file '{path}': {detail}")


class UnrecoveredError(FileAcqError):
    """Raised by AcquisitionOutcome.expect() with a caller-chosen message."""

    def __init__(self, message: str, error: AcquisitionError) -> None:
        self.error = error
        self.kind = error.kind
        super().__init__(f"{message}: {error}")


_OPEN_ERRORS: dict[FailureKind, type[AcquisitionError]] = {
    FailureKind.NOT_FOUND: NotFoundFailure,
    FailureKind.PERMISSION_DENIED: PermissionFailure,
}


def open_failure(kind: FailureKind, path: Path, detail: BaseException) -> AcquisitionError:
    cls = _OPEN_ERRORS.get(kind, OtherIoFailure)
    return cls(kind=kind, path=path, operation="opening", detail=detail)


def create_failure(path: Path, detail: BaseException) -> CreateFailure:
    return CreateFailure(kind=classify(detail), path=path, operation="creating", detail=detail)
