"""Minimal command line surface over kettle apps and config files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from kettle import App, Config, DirKind, KettleError, UserDirs, __version__, app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kettle",
        description="Inspect and edit per-application directories and config files.",
    )
    parser.add_argument("--version", action="version", version=f"kettle v{__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = False

    get_cmd = subparsers.add_parser("get", help="print a config value")
    _add_config_arguments(get_cmd)
    get_cmd.add_argument("key", help="config key")
    get_cmd.set_defaults(func=_handle_get)

    set_cmd = subparsers.add_parser("set", help="store a config value")
    _add_config_arguments(set_cmd)
    set_cmd.add_argument("key", help="config key")
    set_cmd.add_argument("value", help="value to store (may be empty)")
    set_cmd.set_defaults(func=_handle_set)

    unset_cmd = subparsers.add_parser("unset", help="remove a config value")
    _add_config_arguments(unset_cmd)
    unset_cmd.add_argument("key", help="config key")
    unset_cmd.set_defaults(func=_handle_unset)

    show_cmd = subparsers.add_parser("show", help="list every value in a scope")
    _add_config_arguments(show_cmd)
    show_cmd.set_defaults(func=_handle_show)

    dirs_cmd = subparsers.add_parser("dirs", help="show the resolved application directories")
    dirs_cmd.add_argument("app", help="application name")
    dirs_cmd.set_defaults(func=_handle_dirs)

    return parser


def _add_config_arguments(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("app", help="application name")
    cmd.add_argument("--file", dest="filename", help="config file name (default: config)")
    cmd.add_argument("--section", help="INI section (default: unsectioned keys)")
    cmd.add_argument(
        "--config-dir",
        dest="config_dir",
        help="use this directory instead of the platform config directory",
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    result = func(args)
    return 0 if result is None else result


def _app(args: argparse.Namespace) -> App:
    config_dir = getattr(args, "config_dir", None)
    user_dirs = UserDirs(
        app_name=args.app,
        config_dir_override=Path(config_dir) if config_dir else None,
    )
    return app(args.app, user_dirs=user_dirs)


def _config(args: argparse.Namespace) -> Config:
    application = _app(args)
    config = application.config_file(args.filename) if args.filename else application.config()
    if args.section:
        config = config.with_section(args.section)
    return config


def _handle_get(args: argparse.Namespace) -> int:
    value = _config(args).get(args.key)
    if value is None:
        logger.debug("%s is not set", args.key)
        return 1
    print(value)
    return 0


def _handle_set(args: argparse.Namespace) -> int:
    config = _config(args)
    try:
        config.set(args.key, args.value)
    except (KettleError, ValueError) as exc:
        print(f"[kettle] error: {exc}", file=sys.stderr)
        return 1
    print(f"[kettle] {args.key} saved to {config.path}")
    return 0


def _handle_unset(args: argparse.Namespace) -> int:
    config = _config(args)
    try:
        config.set(args.key, None)
    except (KettleError, ValueError) as exc:
        print(f"[kettle] error: {exc}", file=sys.stderr)
        return 1
    print(f"[kettle] {args.key} removed from {config.path}")
    return 0


def _handle_show(args: argparse.Namespace) -> None:
    values = _config(args).items()
    if not values:
        print("[kettle] nothing configured")
        return
    for key, value in values.items():
        print(f"{key} = {value}")


def _handle_dirs(args: argparse.Namespace) -> None:
    application = _app(args)
    for kind in DirKind:
        print(f"{kind.value:<12} {application.user_dirs.dir_for(kind)}")
