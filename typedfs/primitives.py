"""Thin wrappers over native filesystem calls used by entry handles.

Create/remove helpers raise ``OSError`` unchanged so callers can tag it.
``rename`` reports success as a bool instead.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

_SKIPPED_NAMES = frozenset({".", ".."})


def is_file(path: str) -> bool:
    """Return whether ``path`` exists and is a regular file."""
    return os.path.isfile(path)


def is_dir(path: str) -> bool:
    """Return whether ``path`` exists and is a directory."""
    return os.path.isdir(path)


def list_names(path: str) -> list[str]:
    """Return child names of ``path`` in enumeration order, without ``.``/``..``."""
    with os.scandir(path) as entries:
        return [entry.name for entry in entries if entry.name not in _SKIPPED_NAMES]


def create_file(path: str) -> None:
    """Create an empty file; fails when anything already exists at ``path``."""
    with open(path, "xb"):
        pass
    logger.debug("created file %s", path)


def create_directory(path: str) -> None:
    os.mkdir(path)
    logger.debug("created directory %s", path)


def remove_file(path: str) -> None:
    os.remove(path)
    logger.debug("removed file %s", path)


def remove_directory(path: str) -> None:
    """Remove an empty directory; non-empty directories raise ``OSError``."""
    os.rmdir(path)
    logger.debug("removed directory %s", path)


def rename(source: str, target: str) -> bool:
    """Rename ``source`` to ``target`` and report whether it succeeded."""
    try:
        os.rename(source, target)
    except OSError as exc:
        logger.warning("rename %s -> %s failed: %s", source, target, exc)
        return False
    logger.debug("renamed %s -> %s", source, target)
    return True


__all__ = [
    "is_file",
    "is_dir",
    "list_names",
    "create_file",
    "create_directory",
    "remove_file",
    "remove_directory",
    "rename",
]
