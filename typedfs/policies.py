"""Dispositions for create and lookup operations that hit a conflict or miss."""

from __future__ import annotations

from enum import Enum


class IfExists(Enum):
    """What ``make`` does when the target already exists as the same kind."""

    THROW = "throw"
    OVERWRITE = "overwrite"
    OPEN = "open"


class IfNotExists(Enum):
    """What a child lookup does when the named child is missing."""

    THROW = "throw"
    CREATE = "create"


def parse_if_exists(value: str) -> IfExists:
    """Map a config/CLI token onto ``IfExists``; raises ``ValueError`` when unknown."""
    return IfExists(value.strip().lower())


__all__ = ["IfExists", "IfNotExists", "parse_if_exists"]
