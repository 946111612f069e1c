"""Path-style strategies used to parse and join golden-file locators."""

import os
import pathlib
import re
from urllib.parse import unquote, urlsplit


_URI_DRIVE = re.compile(r"^/[A-Za-z]:")


class PathStyle(object):
    """Separator and drive convention for one family of paths.

    All operations are pure: nothing here touches the filesystem or reads the
    current working directory.
    """

    POSIX = None
    WINDOWS = None

    def __init__(self, name, flavor):
        self.name = name
        self._flavor = flavor

    def __repr__(self):
        return "PathStyle.{}".format(self.name.upper())

    @property
    def separator(self):
        return "\\" if self._flavor is pathlib.PureWindowsPath else "/"

    @classmethod
    def native(cls):
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def from_name(cls, name):
        value = name.lower()
        if value == "native":
            return cls.native()
        if value == "posix":
            return cls.POSIX
        if value == "windows":
            return cls.WINDOWS
        raise ValueError("Unknown path style: {}".format(name))

    def parse(self, locator):
        """Turns a path, path-like object or ``file:`` URI into a pure path."""
        if isinstance(locator, self._flavor):
            return locator
        if isinstance(locator, pathlib.PurePath):
            return self._flavor(locator.as_posix())
        value = os.fspath(locator)
        if isinstance(value, bytes):
            value = os.fsdecode(value)
        if value[:5].lower() == "file:":
            return self._flavor(self._uri_path(value))
        if _looks_like_uri(value):
            raise ValueError("Unsupported locator scheme: {}".format(value))
        return self._flavor(value)

    def _uri_path(self, uri):
        parts = urlsplit(uri)
        path = unquote(parts.path)
        if parts.netloc and parts.netloc != "localhost":
            return "//" + parts.netloc + path
        if self._flavor is pathlib.PureWindowsPath and _URI_DRIVE.match(path):
            return path[1:]
        return path

    def is_absolute(self, locator):
        return self.parse(locator).is_absolute()

    def parent(self, locator):
        return self.parse(locator).parent

    def join(self, base, locator):
        path = self.parse(locator)
        if path.is_absolute():
            return path
        return self.parse(base) / path

    def directory_locator(self, locator):
        text = str(self.parse(locator))
        if text.endswith(self.separator):
            return text
        return text + self.separator

    def to_uri(self, locator, directory=False):
        path = self.parse(locator)
        if not path.is_absolute():
            raise ValueError("Cannot express relative path {} as a URI".format(path))
        uri = path.as_uri()
        if directory and not uri.endswith("/"):
            uri += "/"
        return uri


def _looks_like_uri(value):
    # Single-letter schemes are drive letters ("C:\\x"), not URIs.
    match = re.match(r"^([A-Za-z][A-Za-z0-9+.-]+):", value)
    return match is not None and "://" in value


PathStyle.POSIX = PathStyle("posix", pathlib.PurePosixPath)
PathStyle.WINDOWS = PathStyle("windows", pathlib.PureWindowsPath)
