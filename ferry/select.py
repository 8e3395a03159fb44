"""The select command: gather paths and store them for a later drop."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import NoReturn

from ferry.config import FerryError, Output
from ferry.explicit import resolve_items, select_by_regex
from ferry.interactive import run_picker
from ferry.store import SelectionStore


def _fail(output: Output, message: str) -> NoReturn:
    output.error(message)
    raise FerryError(message)


def handle_select(
    items: Iterable[str],
    regex: str | None,
    interactive: bool,
    path: str | None,
    dry_run: bool,
    store: SelectionStore,
    output: Output,
) -> list[Path]:
    """Select paths by the chosen mode and save them unless ``dry_run``."""
    items = list(items)
    start_text = path if path is not None else "."
    start = Path(start_text)

    if path is not None and not start.is_dir():
        _fail(output, f"The specified --path '{start_text}' is not a valid directory.")

    if interactive:
        if items:
            _fail(
                output,
                "Do not provide item paths directly when using --interactive. "
                "Use --path to specify a starting directory.",
            )
        output.info(f"Launching interactive TUI selection from {start_text})")
        selected = run_picker(start_text, output)
    elif regex is not None:
        if items:
            _fail(
                output,
                "Do not provide item paths directly when using --regex. "
                "Use --path to specify a starting directory for the search.",
            )
        output.info(f"Running REGEX selection for '{regex}' in {start_text})")
        selected = select_by_regex(start_text, regex, output)
    else:
        if path is not None:
            _fail(
                output,
                "The --path flag is not applicable when directly providing item paths. "
                "It is used with --regex or --interactive.",
            )
        if not items:
            selected = run_picker(".", output)
        else:
            output.info(f"Selected {len(items)} items directly)")
            selected = resolve_items(items, output)

    if not selected:
        output.info("No valid items found to select. Nothing saved.")
    elif dry_run:
        output.info("Dry run: would select the following:")
        for selected_path in selected:
            output.info(f"  {selected_path}")
    else:
        store.add(selected)
        output.info(f"Selected {len(selected)} items and saved to selection file.")
    return selected