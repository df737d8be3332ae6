"""fileacq package.

Simple API:

    import fileacq

    # Open a file, creating it (empty) if it does not exist
    with fileacq.acquire("hello.txt", create_if_missing=True) as handle:
        data = fileacq.read_all(handle)

    # Read a whole file; any failure is raised to the caller
    text = fileacq.read_file_or_fail("hello.txt")
"""

__version__ = "0.1.0"

from loguru import logger

from .acquirer import AcquisitionOutcome, FileAcquirer, PathArg
from .capability import FilesystemCapability, LocalFilesystem
from .errors import (
    AcquisitionError,
    CreateFailure,
    FailureKind,
    FileAcqError,
    NotFoundFailure,
    OtherIoFailure,
    PermissionFailure,
    ReadFailure,
    UnrecoveredError,
    classify,
)
from .handle import FileHandle, read_all, read_to_string
from .propagate import read_file_or_fail, read_file_or_fail_explicit
from .recovery import open_or_create, open_or_create_fallback

# Library logging stays silent until an application enables it.
logger.disable("fileacq")


def acquire(path: PathArg, create_if_missing: bool = False) -> FileHandle:
    """Open `path` with the local filesystem. See FileAcquirer.acquire."""
    return FileAcquirer().acquire(path, create_if_missing=create_if_missing)


__all__ = [
    "acquire",
    "read_all",
    "read_to_string",
    "read_file_or_fail",
    "read_file_or_fail_explicit",
    "open_or_create",
    "open_or_create_fallback",
    "AcquisitionOutcome",
    "FileAcquirer",
    "FileHandle",
    "FilesystemCapability",
    "LocalFilesystem",
    "FailureKind",
    "classify",
    "FileAcqError",
    "AcquisitionError",
    "NotFoundFailure",
    "PermissionFailure",
    "OtherIoFailure",
    "CreateFailure",
    "ReadFailure",
    "UnrecoveredError",
]
