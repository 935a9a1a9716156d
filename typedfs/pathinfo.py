"""Pure path decomposition into location, basename, name, and extension.

Nothing here touches the filesystem. Paths are plain strings split on a
single configurable separator so results stay stable across handles.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

SEPARATOR = os.sep
EXTENSION_DELIMITER = "."

_separator = SEPARATOR


def current_separator() -> str:
    """Return the process-wide separator used when ``sep`` is omitted."""
    return _separator


def set_separator(sep: str) -> None:
    """Override the process-wide separator."""
    global _separator
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character: {sep!r}")
    _separator = sep


def reset_separator() -> None:
    """Restore the platform separator."""
    global _separator
    _separator = SEPARATOR


@dataclass(frozen=True)
class PathInfo:
    """Decomposed view of one path string.

    ``basename`` is ``name`` plus the extension (with its delimiter) exactly
    as it appeared, so ``compose(location, basename)`` rebuilds the path.
    """

    location: str
    basename: str
    name: str
    extension: str

    def path(self, sep: str | None = None) -> str:
        return compose(self.location, self.basename, sep=sep)


def normalize(path: str, sep: str | None = None) -> str:
    """Collapse repeated separators and drop a trailing one (root excepted)."""
    sep = sep or _separator
    if not path:
        return ""
    collapsed = re.sub(f"{re.escape(sep)}+", lambda _match: sep, path)
    if collapsed != sep and collapsed.endswith(sep):
        collapsed = collapsed[:-1]
    return collapsed


def split_extension(basename: str) -> tuple[str, str]:
    """Split ``basename`` on its final extension delimiter."""
    idx = basename.rfind(EXTENSION_DELIMITER)
    if idx < 0:
        return basename, ""
    return basename[:idx], basename[idx + 1 :]


def decompose(path: str, sep: str | None = None) -> PathInfo:
    """Split ``path`` into location, basename, name, and extension.

    Never fails: missing components come back as empty strings. A path
    rooted directly under the separator keeps the separator as location.
    """
    sep = sep or _separator
    normalized = normalize(path, sep=sep)
    if normalized == sep:
        return PathInfo(location=sep, basename="", name="", extension="")

    idx = normalized.rfind(sep)
    if idx < 0:
        location, basename = "", normalized
    elif idx == 0:
        location, basename = sep, normalized[1:]
    else:
        location, basename = normalized[:idx], normalized[idx + 1 :]

    name, extension = split_extension(basename)
    return PathInfo(location=location, basename=basename, name=name, extension=extension)


def compose(location: str, name: str, sep: str | None = None) -> str:
    """Join ``location`` and ``name`` with exactly one separator."""
    sep = sep or _separator
    if not location:
        return name
    if location.endswith(sep):
        return location + name
    return location + sep + name


def location_of(path: str, sep: str | None = None) -> str:
    return decompose(path, sep=sep).location


def basename_of(path: str, sep: str | None = None) -> str:
    return decompose(path, sep=sep).basename


def name_of(path: str, sep: str | None = None) -> str:
    """Return the basename without its final extension."""
    return decompose(path, sep=sep).name


def extension_of(path: str, sep: str | None = None) -> str:
    """Return only the last extension (``x.tar.gz`` gives ``gz``)."""
    return decompose(path, sep=sep).extension


__all__ = [
    "SEPARATOR",
    "EXTENSION_DELIMITER",
    "PathInfo",
    "current_separator",
    "set_separator",
    "reset_separator",
    "normalize",
    "split_extension",
    "decompose",
    "compose",
    "location_of",
    "basename_of",
    "name_of",
    "extension_of",
]
