"""Terminal picker for choosing files from a directory."""

from __future__ import annotations

import curses
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ferry.config import FerryError, Output

TITLE = "Select Files (Space: toggle, Enter: confirm, q: quit)"
_ESCAPE = 27
_ENTER_KEYS = {curses.KEY_ENTER, 10, 13}


def list_files(start: str | Path) -> list[Path]:
    """Return the regular files directly inside ``start``, sorted by name."""
    start_path = Path(start)
    try:
        with os.scandir(start_path) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError:
        return []
    files = []
    for name in names:
        candidate = start_path / name
        if candidate != start_path and candidate.is_file():
            files.append(candidate)
    return files


def _label(path: Path, base: Path) -> str:
    try:
        relative = path.relative_to(base)
    except ValueError:
        relative = None
    if relative is not None and str(relative) not in ("", "."):
        return str(relative)
    return path.name or str(path)


class Picker:
    """Cursor, scroll and selection state of the file picker."""

    def __init__(self, items: Iterable[str | Path], height: int) -> None:
        self.items = [Path(item) for item in items]
        self.selected: list[int] = []
        self.cursor = 0
        self.offset = 0
        self.height = height

    @property
    def visible_height(self) -> int:
        """Number of list rows inside the border."""
        return max(self.height - 2, 0)

    def toggle(self) -> None:
        """Select or deselect the item under the cursor."""
        if not self.items:
            return
        if self.cursor in self.selected:
            self.selected.remove(self.cursor)
        else:
            self.selected.append(self.cursor)
            self.selected.sort()

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            if self.cursor < self.offset:
                self.offset -= 1

    def move_down(self) -> None:
        if self.cursor < max(len(self.items) - 1, 0):
            self.cursor += 1
            if self.cursor >= self.offset + self.visible_height:
                self.offset += 1

    def selected_paths(self) -> list[Path]:
        """Return the selected items in list order."""
        return [self.items[i] for i in self.selected if i < len(self.items)]

    def visible_lines(self) -> list[str]:
        """Return the rendered rows currently in view."""
        if not self.items:
            return []
        base = self.items[0].parent
        end = min(self.offset + self.visible_height, len(self.items))
        lines = []
        for index in range(self.offset, end):
            mark = "[x]" if index in self.selected else "[ ]"
            pointer = ">" if index == self.cursor else " "
            lines.append(f"{pointer} {mark} {_label(self.items[index], base)}")
        return lines


def _draw(screen, picker: Picker) -> None:
    height, width = screen.getmaxyx()
    picker.height = height
    screen.erase()
    try:
        screen.box()
        screen.addnstr(0, 1, TITLE, max(width - 2, 0))
        for row, line in enumerate(picker.visible_lines(), start=1):
            screen.addnstr(row, 1, line, max(width - 2, 0))
    except curses.error:
        pass
    screen.refresh()


def _event_loop(screen, picker: Picker) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.keypad(True)
    while True:
        _draw(screen, picker)
        key = screen.getch()
        if key in (ord("q"), _ESCAPE) or key in _ENTER_KEYS:
            return
        if key == curses.KEY_UP:
            picker.move_up()
        elif key == curses.KEY_DOWN:
            picker.move_down()
        elif key == ord(" "):
            picker.toggle()


def run_picker(start: str | Path, output: Output) -> list[Path]:
    """Let the user pick files in ``start`` and return the chosen paths."""
    files = list_files(start)
    if not files:
        output.info(f"No files found in '{start}' for TUI selection.")
        return []

    picker = Picker(files, shutil.get_terminal_size().lines)
    try:
        curses.wrapper(_event_loop, picker)
    except curses.error as exc:
        raise FerryError(f"Failed to run terminal interface: {exc}") from exc
    return picker.selected_paths()