"""Selection of paths given on the command line or matched by a pattern."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from ferry.config import FerryError, Output
from ferry.paths import canonicalize_path


def _walk_dir(directory: str, root: str) -> Iterator[str]:
    try:
        with os.scandir(directory) as entries:
            children = sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise FerryError(f"Error traversing directory {root}: {exc}") from exc
    for entry in children:
        yield entry.path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_dir(entry.path, root)


def _walk(start: str) -> Iterator[str]:
    """Yield ``start`` and everything below it, depth first."""
    try:
        os.stat(start)
    except OSError as exc:
        raise FerryError(f"Error traversing directory {start}: {exc}") from exc
    yield start
    if os.path.isdir(start):
        yield from _walk_dir(start, start)


def select_by_regex(start: str | Path, pattern: str, output: Output) -> list[Path]:
    """Return canonical paths under ``start`` whose path text matches ``pattern``."""
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise FerryError(f"Invalid regex pattern: {exc}") from exc

    selected: list[Path] = []
    for path in _walk(str(start)):
        if regex.search(path):
            resolved = canonicalize_path(path, output)
            if resolved is not None:
                output.detail(f"Selected by regex: {resolved}")
                selected.append(resolved)
    return selected


def resolve_items(items: Iterable[str | Path], output: Output) -> list[Path]:
    """Canonicalize each given item, skipping those that do not exist."""
    selected: list[Path] = []
    for item in items:
        path = Path(item)
        output.detail(f"Attempting to canonicalize: '{path}'")
        resolved = canonicalize_path(path, output)
        if resolved is not None:
            output.detail(f"Successfully canonicalized to: '{resolved}'")
            selected.append(resolved)
    return selected