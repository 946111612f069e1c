"""Storage backends the comparator reads and writes golden files through."""

import abc
import errno
import os
import stat
import tempfile

from golden.path_style import PathStyle


class FileSystem(abc.ABC):
    """Minimal file access needed to compare and update golden files."""

    @abc.abstractmethod
    def is_file(self, path):
        pass

    @abc.abstractmethod
    def is_dir(self, path):
        pass

    @abc.abstractmethod
    def read_bytes(self, path):
        pass

    @abc.abstractmethod
    def write_bytes(self, path, data):
        """Replaces the full content of ``path`` with ``data``."""

    @abc.abstractmethod
    def makedirs(self, path):
        """Creates ``path`` and any missing parents; existing dirs are fine."""


class LocalFileSystem(FileSystem):
    """The real filesystem. Writes go through a temporary file and a rename."""

    def is_file(self, path):
        return os.path.isfile(path)

    def is_dir(self, path):
        return os.path.isdir(path)

    def read_bytes(self, path):
        with open(path, "rb") as handle:
            return handle.read()

    def write_bytes(self, path, data):
        path = os.fspath(path)
        parent = os.path.dirname(path) or os.curdir
        fd, tmp = tempfile.mkstemp(prefix=os.path.basename(path) + ".", dir=parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            _set_golden_mode(tmp)
            os.replace(tmp, path)
        finally:
            try:
                os.unlink(tmp)
            except FileNotFoundError:
                pass

    def makedirs(self, path):
        os.makedirs(path, exist_ok=True)


def _set_golden_mode(path):
    mode = os.stat(path).st_mode
    os.chmod(path, (mode & ~0o111) | stat.S_IWUSR | stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)


class MemoryFileSystem(FileSystem):
    """In-memory filesystem for hermetic tests.

    Paths follow ``style``; relative paths are taken relative to ``cwd``.
    Failures raise the same ``OSError`` subclasses the OS would.
    """

    def __init__(self, style=None, cwd=None):
        self.style = style or PathStyle.native()
        self.cwd = self.style.parse(cwd) if cwd is not None else self._default_root()
        self._files = {}
        self._dirs = set()

    def _default_root(self):
        if self.style is PathStyle.WINDOWS:
            return self.style.parse("C:\\")
        return self.style.parse("/")

    def _absolute(self, path):
        return self.style.join(self.cwd, path)

    def _is_root(self, path):
        return path == path.parent

    def is_file(self, path):
        return self._absolute(path) in self._files

    def is_dir(self, path):
        path = self._absolute(path)
        return self._is_root(path) or path in self._dirs

    def read_bytes(self, path):
        path = self._absolute(path)
        if path in self._files:
            return self._files[path]
        if self.is_dir(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))

    def write_bytes(self, path, data):
        path = self._absolute(path)
        if self.is_dir(path):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
        parent = path.parent
        if parent in self._files:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(parent))
        if not self.is_dir(parent):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(parent))
        self._files[path] = bytes(data)

    def makedirs(self, path):
        path = self._absolute(path)
        missing = []
        while not self.is_dir(path):
            if path in self._files:
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(path))
            missing.append(path)
            path = path.parent
        self._dirs.update(missing)

    def listdir(self, path):
        path = self._absolute(path)
        if not self.is_dir(path):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
        children = [p for p in list(self._files) + list(self._dirs) if p.parent == path and p != path]
        return sorted(p.name for p in children)
