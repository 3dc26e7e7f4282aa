"""Command-line interface entry point for picotags."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from picotags import __version__, pipelines
from picotags.errors import PicoTagsError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picotags", description="picotags command-line interface"
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command")

    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--config-path", dest="config_path", help="Override path to config file"
    )
    shared.add_argument(
        "--content-dir",
        dest="content_dir",
        help="Directory containing the Markdown pages",
    )
    shared.add_argument(
        "--verbose",
        dest="verbose_logging",
        action="store_const",
        const=True,
        help="Enable debug logging",
    )

    pages = subparsers.add_parser(
        "pages", parents=[shared], help="List the pages visible from a page"
    )
    pages.add_argument(
        "--page", dest="page", default="index", help="Id of the page being served"
    )

    subparsers.add_parser("init", parents=[shared], help="Write a default config file")

    return parser


def _normalize_cli_options(namespace: argparse.Namespace) -> dict[str, Any]:
    cli_options = {
        key: value for key, value in vars(namespace).items() if key != "command"
    }
    return {key: value for key, value in cli_options.items() if value is not None}


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help()
        return

    handlers: dict[str, Any] = {
        "pages": pipelines.run_pages,
        "init": pipelines.run_init,
    }

    cli_options = _normalize_cli_options(args)
    try:
        handlers[args.command](cli_options)
    except PicoTagsError as exc:
        print(f"picotags: error: {exc}", file=sys.stderr)
        if exc.hint:
            print(f"picotags: hint: {exc.hint}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
