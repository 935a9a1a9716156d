"""Shared identity and rename/move behavior for file and directory handles.

A handle's identity is one immutable ``PathInfo`` replaced wholesale after a
rename succeeds on disk, so a failed rename leaves ``location``/``name``
exactly as they were.
"""

from __future__ import annotations

import os
from abc import ABC
from typing import ClassVar

from . import primitives
from .pathinfo import PathInfo, compose, current_separator, decompose, split_extension
from .policies import IfExists


class Entry(ABC):
    """A named, located filesystem object (file or directory)."""

    entry_type: ClassVar[str]

    def __init__(self, path: str) -> None:
        self._info = decompose(path)

    @property
    def location(self) -> str:
        return self._info.location

    @property
    def name(self) -> str:
        """Final path component, extension included."""
        return self._info.basename

    @property
    def path(self) -> str:
        return compose(self._info.location, self._info.basename)

    def _commit(self, location: str, basename: str) -> None:
        name, extension = split_extension(basename)
        self._info = PathInfo(location=location, basename=basename, name=name, extension=extension)

    def set_name(self, name: str) -> bool:
        """Rename within the current location.

        Returns ``False`` (and keeps the old name) when the rename fails.
        """
        check_name(name, self.entry_type)
        source = self.path
        target = compose(self.location, name)
        if not primitives.rename(source, target):
            return False
        self._commit(self.location, name)
        return True

    def set_location(self, location: str) -> bool:
        """Move into ``location``, creating that directory when missing.

        Raises ``EntryError`` when the target directory cannot be created;
        returns ``False`` when the move itself fails.
        """
        from .directory import Directory

        target_directory = Directory.make(location, IfExists.OPEN)
        source = self.path
        target = compose(target_directory.path, self.name)
        if not primitives.rename(source, target):
            return False
        self._commit(target_directory.path, self.name)
        return True

    def set_path(self, path: str) -> bool:
        """Move and/or rename so the handle ends up at ``path``.

        An empty location component keeps the current location. When the move
        fails the rename is not attempted.
        """
        info = decompose(path)
        if info.location and info.location != self.location:
            if not self.set_location(info.location):
                return False
        if info.basename and info.basename != self.name:
            return self.set_name(info.basename)
        return True

    def __fspath__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


_RESERVED_NAMES = frozenset({".", ".."})


def check_name(name: str, entry_type: str) -> None:
    """Reject names that are empty, reserved, or would leave the parent directory."""
    separators = {current_separator(), os.sep, os.altsep} - {None}
    if not name or name in _RESERVED_NAMES or any(sep in name for sep in separators):
        raise ValueError(f"invalid {entry_type} name: {name!r}")


def fspath(path: str | os.PathLike[str]) -> str:
    """Coerce ``path`` to ``str`` for the string-based path helpers."""
    return os.fspath(path)


__all__ = ["Entry", "check_name", "fspath"]
