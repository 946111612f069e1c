import pytest

from golden.comparator import LocalFileComparator
from golden.filesystem import MemoryFileSystem
from golden.path_style import PathStyle


@pytest.fixture(params=[PathStyle.POSIX, PathStyle.WINDOWS], ids=["posix", "windows"])
def style(request):
    return request.param


@pytest.fixture
def fs(style):
    return MemoryFileSystem(style)


@pytest.fixture
def fix(style):
    """Converts posix-style paths to the style under test.

    Lets tests spell paths as "/foo/bar" regardless of the style.
    """

    def _fix(path):
        if style is PathStyle.WINDOWS:
            if path.startswith("/"):
                path = "C:" + path
            path = path.replace("/", style.separator)
        return path

    return _fix


@pytest.fixture
def put(fs, style):
    """Writes a file into the in-memory filesystem, creating its parents."""

    def _put(path, data):
        fs.makedirs(style.parent(path))
        fs.write_bytes(path, bytes(data))

    return _put


@pytest.fixture
def comparator(fs, style, fix):
    return LocalFileComparator(fix("/golden_test.py"), path_style=style, filesystem=fs)
