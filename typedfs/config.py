"""Persistent JSON config helpers.

Stores the path separator, log level, and default make policy used by the
command line. Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .policies import IfExists, parse_if_exists

APP_NAME = "typedfs"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a
    command.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_separator() -> str | None:
    """Return a configured single-character separator, or ``None``."""
    value = load_config().get("separator")
    if isinstance(value, str) and len(value) == 1:
        return value
    return None


def save_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        return
    config = load_config()
    config["separator"] = sep
    save_config(config)


def load_log_level() -> int:
    """Return the configured logging level as a ``logging`` constant."""
    value = load_config().get("log_level")
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return logging.getLevelName(value.strip().upper())
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def load_default_if_exists() -> IfExists:
    """Return the default make policy, ``THROW`` when unset or invalid."""
    value = load_config().get("if_exists")
    if not isinstance(value, str):
        return IfExists.THROW
    try:
        return parse_if_exists(value)
    except ValueError:
        return IfExists.THROW


def save_default_if_exists(policy: IfExists) -> None:
    config = load_config()
    config["if_exists"] = policy.value
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_separator",
    "save_separator",
    "load_log_level",
    "load_default_if_exists",
    "save_default_if_exists",
]
