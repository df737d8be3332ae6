from __future__ import annotations

"""Read a whole file, handing every failure back to the caller.

CONTRACT
- Inputs: path, optional FileAcquirer, encoding (None for raw bytes)
- Outputs (required):
  - File content (str, or bytes when encoding is None)
- Invariants:
  - Never creates the file (acquire with create_if_missing=False)
  - The handle is closed before returning or raising
  - Both variants give identical results for identical inputs
- Failure:
  - AcquisitionError from the open, ReadFailure from the read, unchanged
"""

from .acquirer import FileAcquirer, PathArg
from .handle import DEFAULT_CHUNK_SIZE, read_all, read_to_string


def read_file_or_fail(
    path: PathArg,
    acquirer: FileAcquirer | None = None,
    *,
    encoding: str | None = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str | bytes:
    acquirer = acquirer or FileAcquirer()
    with acquirer.acquire(path, create_if_missing=False) as handle:
        if encoding is None:
            return read_all(handle, chunk_size)
        return read_to_string(handle, encoding, chunk_size)


def read_file_or_fail_explicit(
    path: PathArg,
    acquirer: FileAcquirer | None = None,
    *,
    encoding: str | None = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str | bytes:
    """Same as read_file_or_fail, with each step's outcome checked by hand."""
    acquirer = acquirer or FileAcquirer()
    outcome = acquirer.try_acquire(path, create_if_missing=False)
    if not outcome.ok:
        # Hand the failure back instead of dealing with it here.
        raise outcome.error

    handle = outcome.unwrap()
    try:
        if encoding is None:
            content = read_all(handle, chunk_size)
        else:
            content = read_to_string(handle, encoding, chunk_size)
    finally:
        handle.close()
    return content
