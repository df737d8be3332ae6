from __future__ import annotations

"""Open-or-create, written two ways.

CONTRACT
- Inputs: FileAcquirer, path
- Outputs (required):
  - An open FileHandle (existing file, or a freshly created empty one)
- Invariants:
  - open_or_create() and open_or_create_fallback() agree on every input
  - Create is attempted only when the open failed with NOT_FOUND
- Failure:
  - Raises the classified AcquisitionError (CreateFailure if the create failed)
"""

from .acquirer import FileAcquirer, PathArg
from .errors import AcquisitionError, FailureKind
from .handle import FileHandle


def open_or_create(acquirer: FileAcquirer, path: PathArg) -> FileHandle:
    """Branch-based recovery: the open/classify/create tree in one call."""
    return acquirer.acquire(path, create_if_missing=True)


def open_or_create_fallback(acquirer: FileAcquirer, path: PathArg) -> FileHandle:
    """Closure-based recovery over an AcquisitionOutcome."""

    def recover(err: AcquisitionError) -> FileHandle:
        if err.kind is FailureKind.NOT_FOUND:
            return acquirer.create(path)
        raise err

    return acquirer.try_open(path, writable=True).unwrap_or_else(recover)
