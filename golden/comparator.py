"""Compares produced bytes against golden files stored next to a test."""

import logging

from golden.errors import GoldenFileMissing, GoldenIOError, GoldenMismatch
from golden.filesystem import LocalFileSystem
from golden.path_style import PathStyle


logger = logging.getLogger(__name__)


def first_mismatch(expected, actual):
    """Returns the offset of the first differing byte.

    When one sequence is a prefix of the other, the offset is the length of
    the shorter one.
    """
    max_len = min(len(expected), len(actual))
    for index in range(max_len):
        if expected[index] != actual[index]:
            return index
    return max_len


def describe_mismatch(expected, actual):
    return "mismatch at byte {} (golden size={}, actual size={})".format(
        first_mismatch(expected, actual),
        len(expected),
        len(actual),
    )


class LocalFileComparator(object):
    """Golden-file comparator rooted at the directory of a test file.

    ``test_file`` is the path or ``file:`` URI of the test that owns the
    goldens. Relative golden locators resolve against its directory, absolute
    ones are used as given. All storage access goes through ``filesystem``.
    """

    def __init__(self, test_file, path_style=None, filesystem=None):
        self._style = path_style or PathStyle.native()
        self._basedir = self._style.parent(test_file)
        self._fs = filesystem if filesystem is not None else LocalFileSystem()

    def __repr__(self):
        return "LocalFileComparator(basedir={!r}, path_style={!r})".format(
            self.basedir_locator,
            self._style,
        )

    @property
    def basedir(self):
        return self._basedir

    @property
    def basedir_locator(self):
        return self._style.directory_locator(self._basedir)

    @property
    def path_style(self):
        return self._style

    def resolve(self, golden):
        return self._style.join(self._basedir, golden)

    def compare(self, actual, golden):
        """Returns True if ``actual`` equals the golden file byte for byte.

        Raises GoldenFileMissing when there is no golden file to compare
        against, and GoldenIOError when it cannot be read.
        """
        path = self.resolve(golden)
        expected = self._read_golden(path)
        matched = bytes(actual) == expected
        logger.debug("compared %d bytes against %s: %s", len(actual), path, "match" if matched else "mismatch")
        return matched

    def update(self, golden, data):
        """Replaces the golden file content with ``data``, creating it if needed."""
        path = self.resolve(golden)
        try:
            self._fs.makedirs(path.parent)
            self._fs.write_bytes(path, bytes(data))
        except OSError as exc:
            raise GoldenIOError("Failed to update golden file {}: {}".format(path, exc), path=path) from exc
        logger.debug("updated golden file %s (%d bytes)", path, len(data))

    def assert_matches(self, actual, golden, update=False):
        if update:
            self.update(golden, actual)
            return
        if self.compare(actual, golden):
            return
        path = self.resolve(golden)
        expected = self._read_golden(path)
        raise GoldenMismatch(
            "Golden file {} does not match: {}".format(path, describe_mismatch(expected, bytes(actual))),
            path=path,
        )

    def _read_golden(self, path):
        if not self._fs.is_file(path):
            raise GoldenFileMissing("Golden file {} does not exist".format(path), path=path)
        try:
            return self._fs.read_bytes(path)
        except FileNotFoundError as exc:
            raise GoldenFileMissing("Golden file {} does not exist".format(path), path=path) from exc
        except OSError as exc:
            raise GoldenIOError("Failed to read golden file {}: {}".format(path, exc), path=path) from exc
