"""Typed file and directory handles over native filesystem calls.

``File`` and ``Directory`` wrap existing paths; ``make`` factories create
them under an ``IfExists`` policy, and directory lookups take an
``IfNotExists`` policy. Failures raise ``EntryError`` tagged with an
``ErrorKind``.
"""

from __future__ import annotations

from .directory import Directory, DirectoryListing
from .entry import Entry
from .errors import EntryError, ErrorKind, describe_error
from .file import File
from .pathinfo import PathInfo, compose, decompose, normalize
from .policies import IfExists, IfNotExists

__all__ = [
    "Entry",
    "File",
    "Directory",
    "DirectoryListing",
    "EntryError",
    "ErrorKind",
    "describe_error",
    "IfExists",
    "IfNotExists",
    "PathInfo",
    "compose",
    "decompose",
    "normalize",
]
