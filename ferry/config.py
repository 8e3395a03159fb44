"""Console output settings and the error type used across the package."""

from __future__ import annotations

import sys


class FerryError(Exception):
    """Raised when a ferry command cannot complete."""


class Output:
    """Routes messages to stdout or stderr according to the verbosity flags."""

    def __init__(self, silent: bool = False, verbose: bool = False) -> None:
        self.silent = silent
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print a normal message unless output is silenced."""
        if not self.silent:
            print(message)

    def detail(self, message: str) -> None:
        """Print a message only in verbose mode."""
        if self.verbose:
            print(message)

    def warning(self, message: str) -> None:
        """Print a warning to stderr unless output is silenced."""
        if not self.silent:
            print(f"Warning: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        """Print an error to stderr; errors are never silenced."""
        print(f"Error: {message}", file=sys.stderr)

    def __repr__(self) -> str:
        return f"Output(silent={self.silent!r}, verbose={self.verbose!r})"