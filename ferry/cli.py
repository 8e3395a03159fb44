"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ferry.config import FerryError, Output
from ferry.operations import copy_selection, list_selection, move_selection
from ferry.select import handle_select
from ferry.store import SelectionStore

VERSION = "0.2.0"


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ferry command."""
    parser = argparse.ArgumentParser(prog="ferry", description="A ferry for your files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    noise = parser.add_mutually_exclusive_group()
    noise.add_argument(
        "--silent",
        action="store_true",
        help="Suppress all output to stdout. Only errors will be printed to stderr.",
    )
    noise.add_argument(
        "--verbose",
        action="store_true",
        help="Print all available information, including file names during selection.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    select = commands.add_parser("select", help="Select files for copying or moving")
    select.add_argument(
        "items",
        nargs="*",
        help="Paths to items to select directly. Ignored with --regex or --interactive.",
    )
    mode = select.add_mutually_exclusive_group()
    mode.add_argument("--regex", help="Select items by regular expression.")
    mode.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Launch an interactive terminal interface for selection.",
    )
    select.add_argument(
        "-P",
        "--path",
        help="Starting directory for the regex search or interactive selection.",
    )
    select.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be selected without saving it.",
    )

    for name, text in (
        ("copy", "Copy previously selected items to the current directory"),
        ("move", "Move previously selected items to the current directory"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument(
            "-f", "--force", action="store_true", help="Overwrite existing files."
        )

    listing = commands.add_parser("list", help="List currently selected files")
    form = listing.add_mutually_exclusive_group()
    form.add_argument(
        "--absolute", action="store_true", help="Display paths as absolute paths (default)."
    )
    form.add_argument(
        "--relative",
        action="store_true",
        help="Display paths relative to the current working directory.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ferry command and return its exit status."""
    args = build_parser().parse_args(argv)
    output = Output(silent=args.silent, verbose=args.verbose)
    store = SelectionStore()
    try:
        if args.command == "select":
            handle_select(
                args.items, args.regex, args.interactive, args.path, args.dry_run, store, output
            )
        elif args.command == "copy":
            copy_selection(store, args.force, output)
        elif args.command == "move":
            move_selection(store, args.force, output)
        else:
            list_selection(store, args.relative, output)
    except FerryError as exc:
        output.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())