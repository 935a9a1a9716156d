"""File handles: creation policy, path derivations, content, and metadata."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from . import content, pathinfo, primitives
from .entry import Entry, fspath
from .errors import FILE, already_exists, could_not_create, does_not_exist
from .policies import IfExists

logger = logging.getLogger(__name__)


class File(Entry):
    """Handle for one existing regular file.

    Example::

        if File.exists("/tmp/test.txt"):
            handle = File("/tmp/test.txt")
        else:
            handle = File.make("/tmp/test.txt")
        handle.write("Hello ")
        handle.append("world!")
    """

    entry_type = FILE

    def __init__(self, path: str | os.PathLike[str]) -> None:
        path = pathinfo.normalize(fspath(path))
        if not File.exists(path):
            raise does_not_exist(path, FILE)
        super().__init__(path)

    @staticmethod
    def exists(path: str | os.PathLike[str]) -> bool:
        """Return whether ``path`` exists and is a file (directories give ``False``)."""
        return primitives.is_file(fspath(path))

    @classmethod
    def make(cls, path: str | os.PathLike[str], if_exists: IfExists = IfExists.THROW) -> File:
        """Create a file at ``path`` and return a handle to it.

        ``if_exists`` decides what happens when ``path`` is already a file:
        ``THROW`` raises ``ALREADY_EXISTS``, ``OVERWRITE`` removes and
        recreates it empty, ``OPEN`` returns a handle to it untouched. Any
        failed create raises ``COULD_NOT_CREATE``.
        """
        path = pathinfo.normalize(fspath(path))
        if File.exists(path):
            if if_exists is IfExists.THROW:
                raise already_exists(path, FILE)
            if if_exists is IfExists.OPEN:
                return cls(path)
            try:
                primitives.remove_file(path)
            except OSError as exc:
                raise could_not_create(path, FILE) from exc

        try:
            primitives.create_file(path)
        except OSError as exc:
            raise could_not_create(path, FILE) from exc
        return cls(path)

    @staticmethod
    def extension_of(path: str) -> str:
        return pathinfo.extension_of(path)

    @staticmethod
    def name_of(path: str) -> str:
        """File name without the extension."""
        return pathinfo.name_of(path)

    @staticmethod
    def basename_of(path: str) -> str:
        return pathinfo.basename_of(path)

    @staticmethod
    def location_of(path: str) -> str:
        return pathinfo.location_of(path)

    @property
    def extension(self) -> str:
        return self._info.extension

    @property
    def stem(self) -> str:
        return self._info.name

    @property
    def size(self) -> int:
        return os.stat(self.path).st_size

    @property
    def modified_time(self) -> float:
        return os.stat(self.path).st_mtime

    def is_readable(self) -> bool:
        return os.access(self.path, os.R_OK)

    def is_writable(self) -> bool:
        return os.access(self.path, os.W_OK)

    def is_executable(self) -> bool:
        return os.access(self.path, os.X_OK)

    def read(self) -> str:
        return content.read_text(self.path)

    def read_lines(self) -> list[str]:
        return list(content.iter_lines(self.path))

    def iter_lines(self) -> Iterator[str]:
        return content.iter_lines(self.path)

    def write(self, text: str) -> int:
        """Replace the file contents with ``text``."""
        return content.write_text(self.path, text)

    def append(self, text: str) -> int:
        return content.append_text(self.path, text)

    def delete(self) -> None:
        """Remove the file from disk; the handle is unusable afterwards."""
        primitives.remove_file(self.path)
        logger.debug("deleted %r", self)


__all__ = ["File"]
