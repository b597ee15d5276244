"""
Diagnostics side channel for the expander and the merger.

Both components take a `Reporter` rather than printing directly, so callers
decide where warnings and progress go. Library calls default to `NullReporter`.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class Reporter(Protocol):
    """Receives warnings, status messages and progress counts."""

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def progress(self, lines_written: int) -> None: ...


class NullReporter:
    """Discards all diagnostics."""

    def warning(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def progress(self, lines_written: int) -> None:
        pass


class StderrReporter:
    """
    Prints diagnostics to stderr (or another text stream).

    Warnings are always printed. With `quiet=True`, status messages and the
    progress line are suppressed.
    """

    def __init__(self, quiet: bool = False, stream: TextIO | None = None) -> None:
        self.quiet: bool = quiet
        self._stream: TextIO | None = stream
        self._progress_shown: bool = False

    @property
    def stream(self) -> TextIO:
        # Looked up lazily so pytest's capsys sees the replaced sys.stderr.
        return self._stream if self._stream is not None else sys.stderr

    def _end_progress(self) -> None:
        if self._progress_shown:
            print(file=self.stream)
            self._progress_shown = False

    def warning(self, message: str) -> None:
        self._end_progress()
        print(f"Warning: {message}", file=self.stream)

    def info(self, message: str) -> None:
        if self.quiet:
            return
        self._end_progress()
        print(message, file=self.stream)

    def progress(self, lines_written: int) -> None:
        if self.quiet:
            return
        print(f"Progress: {lines_written} unique lines written...", end="\r", file=self.stream)
        self.stream.flush()
        self._progress_shown = True
