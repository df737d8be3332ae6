import errno
from pathlib import Path

import pytest

from fileacq.acquirer import FileAcquirer
from fileacq.errors import FailureKind, FileAcqError, NotFoundFailure, PermissionFailure, ReadFailure
from fileacq.propagate import read_file_or_fail, read_file_or_fail_explicit

from conftest import FakeFilesystem

VARIANTS = [read_file_or_fail, read_file_or_fail_explicit]


@pytest.mark.parametrize("read", VARIANTS)
def test_existing_file(read):
    fs = FakeFilesystem()
    fs.add("hello.txt", b"hello")
    assert read("hello.txt", FileAcquirer(fs)) == "hello"
    assert read("hello.txt", FileAcquirer(fs), encoding=None) == b"hello"
    assert fs.open_fds == {}


@pytest.mark.parametrize("read", VARIANTS)
def test_missing_file_propagates_not_found(read):
    fs = FakeFilesystem()
    with pytest.raises(NotFoundFailure) as ei:
        read("hello.txt", FileAcquirer(fs))
    assert ei.value.kind is FailureKind.NOT_FOUND
    # never creates
    assert fs.calls_of("create") == []
    assert fs.files == {}


@pytest.mark.parametrize("read", VARIANTS)
def test_permission_denied_propagates(read):
    fs = FakeFilesystem()
    fs.add("secret.txt", b"x")
    fs.open_errors[Path("secret.txt")] = PermissionError(errno.EACCES, "Permission denied")
    with pytest.raises(PermissionFailure) as ei:
        read("secret.txt", FileAcquirer(fs))
    assert ei.value.kind is FailureKind.PERMISSION_DENIED


@pytest.mark.parametrize("read", VARIANTS)
def test_read_failure_closes_handle(read):
    fs = FakeFilesystem()
    p = fs.add("flaky.txt", b"abcdef")
    fs.read_fail_after[p] = 1
    with pytest.raises(ReadFailure):
        read(p, FileAcquirer(fs), chunk_size=2)
    assert fs.open_fds == {}


def test_variants_are_equivalent():
    def run(read, path):
        fs = FakeFilesystem()
        fs.add("hello.txt", b"hello")
        fs.add("bad.txt", b"\xff")
        fs.add("secret.txt")
        fs.open_errors[Path("secret.txt")] = PermissionError(errno.EACCES, "Permission denied")
        try:
            return ("ok", read(path, FileAcquirer(fs)))
        except FileAcqError as e:
            return (type(e).__name__, e.kind)

    for path in ["hello.txt", "missing.txt", "secret.txt", "bad.txt"]:
        assert run(read_file_or_fail, path) == run(read_file_or_fail_explicit, path)
