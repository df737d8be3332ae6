import errno
from pathlib import Path

import pytest

from fileacq.acquirer import FileAcquirer


class FakeFilesystem:
    """In-memory capability that records calls and can inject failures."""

    def __init__(self):
        self.files: dict[Path, bytearray] = {}
        self.calls: list[tuple] = []
        self.open_errors: dict[Path, OSError] = {}
        self.create_errors: dict[Path, OSError] = {}
        self.read_fail_after: dict[Path, int] = {}
        self.open_fds: dict[int, list] = {}
        self._next_fd = 3

    def add(self, path, content: bytes = b"") -> Path:
        p = Path(path)
        self.files[p] = bytearray(content)
        return p

    def calls_of(self, op: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == op]

    def _new_fd(self, path: Path) -> int:
        fd = self._next_fd
        self._next_fd += 1
        # [path, position, reads so far]
        self.open_fds[fd] = [path, 0, 0]
        return fd

    def open(self, path, writable):
        self.calls.append(("open", path, writable))
        if path in self.open_errors:
            raise self.open_errors[path]
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        return self._new_fd(path)

    def create(self, path):
        self.calls.append(("create", path))
        if path in self.create_errors:
            raise self.create_errors[path]
        if path in self.files:
            raise FileExistsError(errno.EEXIST, "File exists", str(path))
        self.files[path] = bytearray()
        return self._new_fd(path)

    def read(self, raw, size):
        state = self.open_fds[raw]
        path, pos, reads = state
        limit = self.read_fail_after.get(path)
        if limit is not None and reads >= limit:
            raise OSError(errno.EIO, "Input/output error", str(path))
        data = bytes(self.files[path][pos : pos + size])
        state[1] = pos + len(data)
        state[2] = reads + 1
        return data

    def write(self, raw, data):
        state = self.open_fds[raw]
        path, pos = state[0], state[1]
        self.files[path][pos : pos + len(data)] = data
        state[1] = pos + len(data)
        return len(data)

    def close(self, raw):
        self.calls.append(("close", raw))
        del self.open_fds[raw]


@pytest.fixture
def fake_fs():
    return FakeFilesystem()


@pytest.fixture
def acquirer(fake_fs):
    return FileAcquirer(fake_fs)
