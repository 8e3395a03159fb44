"""Path resolution helpers."""

from __future__ import annotations

from pathlib import Path

from ferry.config import FerryError, Output


def canonicalize_path(path: str | Path, output: Output) -> Path | None:
    """Return the canonical absolute form of ``path``.

    Relative paths are taken from the current directory. A path that does not
    exist produces a warning and ``None``.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        try:
            cwd = Path.cwd()
        except OSError as exc:
            raise FerryError(f"Failed to get current working directory: {exc}") from exc
        candidate = cwd / candidate

    if not candidate.exists():
        output.warning(f"Path '{candidate}' does not exist or is inaccessible. Skipping.")
        return None

    try:
        return candidate.resolve(strict=True)
    except OSError as exc:
        raise FerryError(f"Failed to canonicalize path {candidate}: {exc}") from exc