"""Single tagged error type for entry lookups and creation.

Callers branch on ``EntryError.kind``; message text is produced separately by
``describe_error`` for presentation layers such as the CLI.
"""

from __future__ import annotations

from enum import Enum

FILE = "file"
DIRECTORY = "directory"


class ErrorKind(Enum):
    DOES_NOT_EXIST = "does_not_exist"
    ALREADY_EXISTS = "already_exists"
    COULD_NOT_CREATE = "could_not_create"


class EntryError(Exception):
    """A file or directory operation failed for ``path``."""

    def __init__(self, kind: ErrorKind, path: str, entry_type: str) -> None:
        super().__init__(kind, path, entry_type)
        self.kind = kind
        self.path = path
        self.entry_type = entry_type

    def __str__(self) -> str:
        return describe_error(self)


def does_not_exist(path: str, entry_type: str) -> EntryError:
    return EntryError(ErrorKind.DOES_NOT_EXIST, path, entry_type)


def already_exists(path: str, entry_type: str) -> EntryError:
    return EntryError(ErrorKind.ALREADY_EXISTS, path, entry_type)


def could_not_create(path: str, entry_type: str) -> EntryError:
    return EntryError(ErrorKind.COULD_NOT_CREATE, path, entry_type)


_MESSAGES = {
    ErrorKind.DOES_NOT_EXIST: "{entry} '{path}' doesn't exist",
    ErrorKind.ALREADY_EXISTS: "{entry} '{path}' already exists",
    ErrorKind.COULD_NOT_CREATE: "couldn't create {entry} '{path}'",
}


def describe_error(error: EntryError) -> str:
    """Format ``error`` as one human-readable line."""
    template = _MESSAGES[error.kind]
    message = template.format(entry=error.entry_type, path=error.path)
    return message[0].upper() + message[1:]


__all__ = [
    "FILE",
    "DIRECTORY",
    "ErrorKind",
    "EntryError",
    "does_not_exist",
    "already_exists",
    "could_not_create",
    "describe_error",
]
