"""Directory handles with a lazily loaded, never-refreshed child cache.

A handle starts Unloaded. The first query (``file_exists``,
``directory_exists``, ``get_files``, ``get_directories``, child lookups) or an
explicit ``load()`` scans the directory once and moves it to Loaded. There is
no transition back: later on-disk changes are not observed by that handle, and
two handles for the same path keep independent caches.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from . import pathinfo, primitives
from .entry import Entry, check_name, fspath
from .errors import DIRECTORY, FILE, already_exists, could_not_create, does_not_exist
from .file import File
from .pathinfo import compose
from .policies import IfExists, IfNotExists

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryListing:
    """Child names partitioned by kind, in load-time enumeration order."""

    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()
    file_set: frozenset[str] = field(init=False, repr=False, compare=False)
    directory_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_set", frozenset(self.files))
        object.__setattr__(self, "directory_set", frozenset(self.directories))


class Directory(Entry):
    """Handle for one existing directory."""

    entry_type = DIRECTORY

    def __init__(self, path: str | os.PathLike[str]) -> None:
        path = pathinfo.normalize(fspath(path))
        if not Directory.exists(path):
            raise does_not_exist(path, DIRECTORY)
        super().__init__(path)
        self._listing: DirectoryListing | None = None

    @staticmethod
    def exists(path: str | os.PathLike[str]) -> bool:
        return primitives.is_dir(fspath(path))

    @classmethod
    def make(cls, path: str | os.PathLike[str], if_exists: IfExists = IfExists.THROW) -> Directory:
        """Create a directory at ``path`` and return a handle to it.

        ``OVERWRITE`` removes the existing directory first and only works when
        it is empty; otherwise ``COULD_NOT_CREATE`` is raised.
        """
        path = pathinfo.normalize(fspath(path))
        if Directory.exists(path):
            if if_exists is IfExists.THROW:
                raise already_exists(path, DIRECTORY)
            if if_exists is IfExists.OPEN:
                return cls(path)
            try:
                primitives.remove_directory(path)
            except OSError as exc:
                raise could_not_create(path, DIRECTORY) from exc

        try:
            primitives.create_directory(path)
        except OSError as exc:
            raise could_not_create(path, DIRECTORY) from exc
        return cls(path)

    @staticmethod
    def name_of(path: str) -> str:
        return pathinfo.basename_of(path)

    @staticmethod
    def location_of(path: str) -> str:
        return pathinfo.location_of(path)

    @property
    def is_loaded(self) -> bool:
        return self._listing is not None

    def load(self) -> None:
        """Scan children once; later calls are no-ops.

        ``OSError`` from the listing propagates and the handle stays Unloaded.
        """
        self._loaded_listing()

    def _scan(self) -> DirectoryListing:
        files: list[str] = []
        directories: list[str] = []
        for name in primitives.list_names(self.path):
            child_path = compose(self.path, name)
            if primitives.is_file(child_path):
                files.append(name)
            elif primitives.is_dir(child_path):
                directories.append(name)

        logger.debug("loaded %r: %d files, %d directories", self, len(files), len(directories))
        return DirectoryListing(files=tuple(files), directories=tuple(directories))

    def _loaded_listing(self) -> DirectoryListing:
        if self._listing is None:
            self._listing = self._scan()
        return self._listing

    def file_exists(self, name: str) -> bool:
        return name in self._loaded_listing().file_set

    def directory_exists(self, name: str) -> bool:
        return name in self._loaded_listing().directory_set

    def get_file(self, name: str, if_not_exists: IfNotExists = IfNotExists.THROW) -> File:
        """Return a handle for child file ``name``.

        Misses raise ``DOES_NOT_EXIST`` unless ``if_not_exists`` is ``CREATE``,
        in which case the file is created (or opened if it appeared on disk
        after this handle loaded).

        Names that are empty, ``.``/``..``, or contain a separator raise
        ``ValueError``.
        """
        check_name(name, FILE)
        path = compose(self.path, name)
        if self.file_exists(name):
            return File(path)
        if if_not_exists is IfNotExists.CREATE:
            return File.make(path, IfExists.OPEN)
        raise does_not_exist(path, FILE)

    def get_directory(self, name: str, if_not_exists: IfNotExists = IfNotExists.THROW) -> Directory:
        check_name(name, DIRECTORY)
        path = compose(self.path, name)
        if self.directory_exists(name):
            return Directory(path)
        if if_not_exists is IfNotExists.CREATE:
            return Directory.make(path, IfExists.OPEN)
        raise does_not_exist(path, DIRECTORY)

    def get_files(self) -> list[File]:
        """Fresh ``File`` handles for every cached child file.

        Order follows filesystem enumeration and is not sorted.
        """
        return [File(compose(self.path, name)) for name in self._loaded_listing().files]

    def get_directories(self) -> list[Directory]:
        return [Directory(compose(self.path, name)) for name in self._loaded_listing().directories]

    def delete(self) -> None:
        """Remove the directory; it must be empty on disk."""
        primitives.remove_directory(self.path)
        logger.debug("deleted %r", self)


__all__ = ["Directory", "DirectoryListing"]
