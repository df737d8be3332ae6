import errno
from pathlib import Path

import pytest

from fileacq.acquirer import FileAcquirer
from fileacq.errors import AcquisitionError, CreateFailure, PermissionFailure
from fileacq.recovery import open_or_create, open_or_create_fallback

from conftest import FakeFilesystem

RECOVERIES = [open_or_create, open_or_create_fallback]


def _outcome(fn, fs, path):
    try:
        with fn(FileAcquirer(fs), path) as h:
            return ("ok", h.created)
    except AcquisitionError as e:
        return (type(e).__name__, e.kind)


@pytest.mark.parametrize("fn", RECOVERIES)
def test_creates_missing_file_once(fn):
    fs = FakeFilesystem()
    assert _outcome(fn, fs, Path("hello2.txt")) == ("ok", True)
    assert _outcome(fn, fs, Path("hello2.txt")) == ("ok", False)
    assert len(fs.calls_of("create")) == 1


@pytest.mark.parametrize("fn", RECOVERIES)
def test_permission_denied_is_not_recovered(fn):
    fs = FakeFilesystem()
    fs.open_errors[Path("p.txt")] = PermissionError(errno.EACCES, "Permission denied")
    with pytest.raises(PermissionFailure):
        fn(FileAcquirer(fs), Path("p.txt"))
    assert fs.calls_of("create") == []


@pytest.mark.parametrize("fn", RECOVERIES)
def test_create_failure_surfaces(fn):
    fs = FakeFilesystem()
    fs.create_errors[Path("n.txt")] = OSError(errno.ENOSPC, "No space left on device")
    with pytest.raises(CreateFailure):
        fn(FileAcquirer(fs), Path("n.txt"))


def test_both_forms_agree():
    def scenario(fs):
        fs.add("exists.txt", b"x")
        fs.open_errors[Path("denied.txt")] = PermissionError(errno.EACCES, "Permission denied")
        fs.create_errors[Path("nospace.txt")] = OSError(errno.ENOSPC, "No space left on device")

    paths = ["exists.txt", "missing.txt", "denied.txt", "nospace.txt"]
    results = []
    for fn in RECOVERIES:
        fs = FakeFilesystem()
        scenario(fs)
        results.append([_outcome(fn, fs, Path(p)) for p in paths])
        assert fs.open_fds == {}
    assert results[0] == results[1]
