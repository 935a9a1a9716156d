"""Text I/O for file handles.

Every call opens and closes its own file object, so no handle outlives the
operation that needed it.
"""

from __future__ import annotations

from collections.abc import Iterator

ENCODING = "utf-8"
_READ_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def resolve_encoding(path: str) -> str:
    """Return the first encoding in the fallback order that decodes ``path``."""
    with open(path, "rb") as handle:
        data = handle.read()
    for encoding in _READ_ENCODINGS:
        try:
            data.decode(encoding)
        except UnicodeDecodeError:
            continue
        return encoding
    return ENCODING


def read_text(path: str) -> str:
    """Read ``path`` as text, falling back through common encodings."""
    with open(path, "r", encoding=resolve_encoding(path), errors="replace") as handle:
        return handle.read()


def iter_lines(path: str) -> Iterator[str]:
    """Yield lines without their trailing newline, decoded like ``read_text``."""
    with open(path, "r", encoding=resolve_encoding(path), errors="replace") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def write_text(path: str, text: str) -> int:
    """Replace the contents of ``path``; returns characters written."""
    with open(path, "w", encoding=ENCODING) as handle:
        return handle.write(text)


def append_text(path: str, text: str) -> int:
    with open(path, "a", encoding=ENCODING) as handle:
        return handle.write(text)


__all__ = ["ENCODING", "resolve_encoding", "read_text", "iter_lines", "write_text", "append_text"]
