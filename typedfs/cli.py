"""Command-line front door for typedfs.

Parses a subcommand, applies persisted config (separator, log level, default
make policy), and dispatches into the File/Directory handles.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .directory import Directory
from .entry import Entry
from .errors import EntryError, describe_error
from .file import File
from .pathinfo import current_separator, decompose, set_separator
from .policies import IfExists, parse_if_exists

logger = logging.getLogger(__name__)


def _policy(value: str) -> IfExists:
    """argparse type for ``--if-exists`` values."""
    try:
        return parse_if_exists(value)
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in IfExists)
        raise argparse.ArgumentTypeError(f"invalid policy {value!r} (choose from {choices})") from exc


def _open_entry(path: str) -> Entry:
    """Open ``path`` as a file when it is one, otherwise as a directory."""
    if File.exists(path):
        return File(path)
    return Directory(path)


def _cmd_info(args: argparse.Namespace) -> None:
    info = decompose(args.path)
    sys.stdout.write(
        f"location: {info.location}\n"
        f"basename: {info.basename}\n"
        f"name: {info.name}\n"
        f"extension: {info.extension}\n"
    )


def _cmd_ls(args: argparse.Namespace) -> None:
    directory = Directory(args.path)
    sep = current_separator()
    out: list[str] = []
    for child in sorted(directory.get_directories(), key=lambda item: item.name.lower()):
        out.append(child.name + sep + "\n")
    for child in sorted(directory.get_files(), key=lambda item: item.name.lower()):
        out.append(child.name + "\n")
    sys.stdout.write("".join(out))


def _cmd_mkdir(args: argparse.Namespace) -> None:
    directory = Directory.make(args.path, args.if_exists or config.load_default_if_exists())
    sys.stdout.write(directory.path + "\n")


def _cmd_touch(args: argparse.Namespace) -> None:
    handle = File.make(args.path, args.if_exists or config.load_default_if_exists())
    sys.stdout.write(handle.path + "\n")


def _cmd_mv(args: argparse.Namespace) -> None:
    entry = _open_entry(args.source)
    if not entry.set_path(args.target):
        raise SystemExit(f"Could not move {args.source} to {args.target}")
    sys.stdout.write(entry.path + "\n")


def _cmd_cat(args: argparse.Namespace) -> None:
    sys.stdout.write(File(args.path).read())


def _cmd_config(args: argparse.Namespace) -> None:
    if args.separator is not None:
        if len(args.separator) != 1:
            raise SystemExit("Separator must be a single character.")
        config.save_separator(args.separator)
    if args.if_exists is not None:
        config.save_default_if_exists(args.if_exists)
    for key, value in sorted(config.load_config().items()):
        sys.stdout.write(f"{key}: {value}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typedfs",
        description="Inspect and manage files and directories through typed handles.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    info = commands.add_parser("info", help="Show location, name, and extension of PATH.")
    info.add_argument("path")
    info.set_defaults(handler=_cmd_info)

    ls = commands.add_parser("ls", help="List sub-directories and files of a directory.")
    ls.add_argument("path", nargs="?", default=".")
    ls.set_defaults(handler=_cmd_ls)

    for name, handler, help_text in (
        ("mkdir", _cmd_mkdir, "Create a directory."),
        ("touch", _cmd_touch, "Create an empty file."),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("path")
        sub.add_argument(
            "--if-exists",
            type=_policy,
            default=None,
            help="throw, overwrite, or open (default from config, else throw).",
        )
        sub.set_defaults(handler=handler)

    mv = commands.add_parser("mv", help="Move or rename a file or directory.")
    mv.add_argument("source")
    mv.add_argument("target")
    mv.set_defaults(handler=_cmd_mv)

    cat = commands.add_parser("cat", help="Print a file.")
    cat.add_argument("path")
    cat.set_defaults(handler=_cmd_cat)

    cfg = commands.add_parser("config", help="Show or update persisted settings.")
    cfg.add_argument("--separator", default=None)
    cfg.add_argument("--if-exists", type=_policy, default=None)
    cfg.set_defaults(handler=_cmd_config)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one subcommand.

    ``EntryError``, invalid names (``ValueError``) and OS failures such as
    permission errors are reported as one-line messages through ``SystemExit``.
    """
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else config.load_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    separator = config.load_separator()
    if separator is not None:
        set_separator(separator)

    try:
        args.handler(args)
    except EntryError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        raise SystemExit(describe_error(exc)) from exc
    except (ValueError, OSError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
