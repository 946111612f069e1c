import os
import stat

import pytest

from golden.filesystem import LocalFileSystem, MemoryFileSystem
from golden.path_style import PathStyle


# =============================================================================
# LOCAL FILESYSTEM
# =============================================================================


def test_local_write_and_read(tmp_path):
    fs = LocalFileSystem()
    target = tmp_path / "golden.png"
    fs.write_bytes(target, b"\x01\x02\x03")
    assert fs.is_file(target)
    assert fs.read_bytes(target) == b"\x01\x02\x03"


def test_local_write_replaces_content(tmp_path):
    fs = LocalFileSystem()
    target = tmp_path / "golden.png"
    target.write_bytes(b"old content that is longer")
    fs.write_bytes(target, b"new")
    assert target.read_bytes() == b"new"


def test_local_write_sets_readable_non_executable_mode(tmp_path):
    fs = LocalFileSystem()
    target = tmp_path / "golden.png"
    fs.write_bytes(target, b"\x00")
    mode = os.stat(target).st_mode
    assert mode & 0o111 == 0
    assert mode & stat.S_IRUSR
    assert mode & stat.S_IWUSR
    assert mode & stat.S_IROTH


def test_local_failed_write_keeps_previous_content(tmp_path, monkeypatch):
    fs = LocalFileSystem()
    target = tmp_path / "golden.png"
    target.write_bytes(b"approved")

    def fail_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("golden.filesystem.os.replace", fail_replace)
    with pytest.raises(OSError):
        fs.write_bytes(target, b"half-written")
    monkeypatch.undo()

    assert target.read_bytes() == b"approved"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["golden.png"]


def test_local_write_into_missing_directory_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        LocalFileSystem().write_bytes(tmp_path / "missing" / "golden.png", b"")


def test_local_makedirs_is_recursive_and_idempotent(tmp_path):
    fs = LocalFileSystem()
    target = tmp_path / "a" / "b" / "c"
    fs.makedirs(target)
    fs.makedirs(target)
    assert fs.is_dir(target)
    assert not fs.is_file(target)


# =============================================================================
# MEMORY FILESYSTEM
# =============================================================================


def test_memory_root_exists(fs, fix):
    assert fs.is_dir(fix("/"))
    assert not fs.is_file(fix("/"))


def test_memory_write_requires_parent(fs, fix):
    with pytest.raises(FileNotFoundError):
        fs.write_bytes(fix("/missing/golden.png"), b"")


def test_memory_makedirs_then_write(fs, fix):
    fs.makedirs(fix("/a/b"))
    fs.makedirs(fix("/a/b"))
    fs.write_bytes(fix("/a/b/golden.png"), bytearray(b"\x01"))
    assert fs.is_dir(fix("/a"))
    assert fs.read_bytes(fix("/a/b/golden.png")) == b"\x01"
    assert fs.listdir(fix("/a")) == ["b"]


def test_memory_read_missing_file(fs, fix):
    with pytest.raises(FileNotFoundError):
        fs.read_bytes(fix("/golden.png"))


def test_memory_directory_is_not_a_file(fs, fix):
    fs.makedirs(fix("/golden.png"))
    with pytest.raises(IsADirectoryError):
        fs.read_bytes(fix("/golden.png"))
    with pytest.raises(IsADirectoryError):
        fs.write_bytes(fix("/golden.png"), b"")


def test_memory_file_blocks_directories(fs, fix):
    fs.write_bytes(fix("/blocker"), b"")
    with pytest.raises(FileExistsError):
        fs.makedirs(fix("/blocker/sub"))
    with pytest.raises(NotADirectoryError):
        fs.write_bytes(fix("/blocker/golden.png"), b"")


def test_memory_relative_paths_use_cwd(style, fix):
    fs = MemoryFileSystem(style, cwd=fix("/work"))
    fs.makedirs("goldens")
    fs.write_bytes("goldens/a.png", b"\x07")
    assert fs.read_bytes(fix("/work/goldens/a.png")) == b"\x07"


def test_memory_listdir_missing_directory(fs, fix):
    with pytest.raises(FileNotFoundError):
        fs.listdir(fix("/nowhere"))


def test_memory_windows_paths_ignore_case():
    fs = MemoryFileSystem(PathStyle.WINDOWS)
    fs.makedirs("C:\\Goldens")
    fs.write_bytes("C:\\Goldens\\A.png", b"\x01")
    assert fs.is_dir("c:\\goldens")
    assert fs.read_bytes("c:/goldens/a.PNG") == b"\x01"


def test_memory_windows_other_drive_root_exists():
    fs = MemoryFileSystem(PathStyle.WINDOWS)
    fs.write_bytes("D:\\golden.png", b"\x01")
    assert fs.is_file("D:\\golden.png")
