"""Persistent storage of the selected paths in the user cache directory."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import platformdirs

from ferry.config import FerryError

APP_NAME = "ferry"
APP_AUTHOR = "ferry-cli"
SELECTION_FILE_NAME = "selection"


def default_cache_dir() -> Path:
    """Return the per-user cache directory used by ferry."""
    return Path(platformdirs.user_cache_dir(appname=APP_NAME, appauthor=APP_AUTHOR))


class SelectionStore:
    """A newline-separated list of selected paths kept in a file."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else default_cache_dir()

    def path(self) -> Path:
        """Return the selection file's path, creating its directory if needed."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FerryError(
                f"Failed to create cache directory {self.directory}: {exc}"
            ) from exc
        return self.directory / SELECTION_FILE_NAME

    def read(self) -> list[Path]:
        """Return the stored paths in the order they were selected."""
        file_path = self.path()
        if not file_path.exists():
            return []
        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FerryError(f"Failed to read selection from {file_path}: {exc}") from exc
        return [Path(line) for line in content.splitlines()]

    def add(self, paths: Iterable[str | Path]) -> None:
        """Append paths that are not yet stored, keeping existing order."""
        file_path = self.path()
        stored = self.read()
        for new_path in map(Path, paths):
            if new_path not in stored:
                stored.append(new_path)
        try:
            file_path.write_text("\n".join(str(p) for p in stored), encoding="utf-8")
        except OSError as exc:
            raise FerryError(f"Failed to write selection to {file_path}: {exc}") from exc

    def clear(self) -> None:
        """Remove the selection file if it exists."""
        file_path = self.path()
        if file_path.exists():
            try:
                file_path.unlink()
            except OSError as exc:
                raise FerryError(
                    f"Failed to clear selection file {file_path}: {exc}"
                ) from exc