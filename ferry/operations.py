"""Copy, move and list the current selection."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from pathlib import Path

from ferry.config import FerryError, Output
from ferry.store import SelectionStore


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as exc:
        raise FerryError(f"Failed to get current directory: {exc}") from exc


def _copy_file(source: Path, destination: Path) -> None:
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)


def _remove_existing(destination: Path) -> None:
    if destination.is_file():
        try:
            destination.unlink()
        except OSError as exc:
            raise FerryError(
                f"Failed to remove existing file '{destination}' before move: {exc}"
            ) from exc
    elif destination.is_dir():
        try:
            shutil.rmtree(destination)
        except OSError as exc:
            raise FerryError(
                f"Failed to remove existing directory '{destination}' before move: {exc}"
            ) from exc


def _transfer(
    store: SelectionStore,
    force: bool,
    output: Output,
    destination: str | Path | None,
    *,
    progressive: str,
    infinitive: str,
    past: str,
    noun: str,
    action: Callable[[Path, Path], None],
    replace_existing: bool,
) -> None:
    paths = store.read()
    if not paths:
        output.info("No items selected. Run 'ferry select' first.")
        return

    output.info(f"{progressive} {len(paths)} selected items")
    target_dir = Path(destination) if destination is not None else _current_dir()

    for source in paths:
        if not source.name:
            raise FerryError(f"Invalid source path: {source}")
        target = target_dir / source.name

        if target.exists():
            if not force:
                raise FerryError(
                    f"Destination file '{target}' already exists. Use --force to overwrite."
                )
            output.info(f"Overwriting existing file: {target}")
            if replace_existing:
                _remove_existing(target)

        try:
            action(source, target)
        except OSError as exc:
            raise FerryError(
                f"Failed to {infinitive} '{source}' to '{target}': {exc}"
            ) from exc

        output.info(f"{past} '{source}' to '{target}'")

    store.clear()
    output.info(f"{noun} complete. Selection cleared.")


def copy_selection(
    store: SelectionStore,
    force: bool,
    output: Output,
    destination: str | Path | None = None,
) -> None:
    """Copy every selected file into ``destination`` (default: the current directory)."""
    _transfer(
        store,
        force,
        output,
        destination,
        progressive="Copying",
        infinitive="copy",
        past="Copied",
        noun="Copy",
        action=_copy_file,
        replace_existing=False,
    )


def move_selection(
    store: SelectionStore,
    force: bool,
    output: Output,
    destination: str | Path | None = None,
) -> None:
    """Move every selected item into ``destination`` (default: the current directory)."""
    _transfer(
        store,
        force,
        output,
        destination,
        progressive="Moving",
        infinitive="move",
        past="Moved",
        noun="Move",
        action=os.rename,
        replace_existing=True,
    )


def list_selection(
    store: SelectionStore,
    relative: bool,
    output: Output,
    cwd: str | Path | None = None,
) -> None:
    """Print the selected paths, absolute or relative to ``cwd``."""
    paths = store.read()
    if not paths:
        output.info("No files currently selected.")
        return

    output.info("Currently selected files:")
    base = Path(cwd) if cwd is not None else _current_dir()
    for path in paths:
        shown = str(path)
        if relative:
            try:
                rel = path.relative_to(base)
            except ValueError:
                pass
            else:
                shown = "" if rel == Path(".") else str(rel)
        output.info(f"  {shown}")