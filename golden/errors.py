"""Errors raised by the golden-file comparator."""


class ComparatorError(Exception):
    """Base class for comparator failures."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class GoldenFileMissing(ComparatorError, AssertionError):
    """The resolved golden file does not exist.

    Raised as an assertion so that test runners report it as a failed test,
    separately from a content mismatch.
    """


class GoldenMismatch(ComparatorError, AssertionError):
    """The actual bytes differ from the golden file."""


class GoldenIOError(ComparatorError, OSError):
    """Reading or writing a golden file failed at the storage layer."""
