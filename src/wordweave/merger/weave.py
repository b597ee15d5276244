"""
Weave merge: round-robin reading of many files with line deduplication.

Every input file is opened at once. Each round reads one line from every file
that still has lines, in input order, and writes the line unless an identical
line was already written. A file's own line order is always preserved.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from wordweave.errors import NoFilesOpenedError
from wordweave.merger.fingerprint import DEFAULT_FINGERPRINT, FingerprintScheme, SeenSet
from wordweave.reporting import NullReporter, Reporter

DEFAULT_PROGRESS_INTERVAL = 10_000


@dataclass
class MergeStats:
    """Counts from one merge run."""

    files_opened: int = 0
    rounds: int = 0
    lines_read: int = 0
    lines_written: int = 0
    seen_set_bytes: int = 0

    @property
    def duplicates_dropped(self) -> int:
        return self.lines_read - self.lines_written


class FileCursor:
    """Read position and liveness of one input file during a merge."""

    def __init__(self, path: Path, handle: BinaryIO, reporter: Reporter) -> None:
        self.path: Path = path
        self.alive: bool = True
        self._handle: BinaryIO = handle
        self._reporter: Reporter = reporter

    def read_line(self) -> bytes | None:
        """
        Next line without its trailing newline, or `None` once the file is
        exhausted. A read error ends the file early instead of the whole merge.
        """
        if not self.alive:
            return None
        try:
            line = self._handle.readline()
        except OSError as e:
            self._reporter.warning(f"Error reading {self.path}, skipping rest of file: {e}")
            line = b""
        if not line:
            self.close()
            return None
        if line.endswith(b"\n"):
            line = line[:-1]
        return line

    def close(self) -> None:
        self.alive = False
        self._handle.close()


def _open_cursors(
    paths: Sequence[Path], stack: ExitStack, reporter: Reporter
) -> list[FileCursor]:
    cursors: list[FileCursor] = []
    for path in paths:
        try:
            handle = stack.enter_context(open(path, "rb"))
        except OSError as e:
            reporter.warning(f"Could not open file: {path} ({e})")
            continue
        cursors.append(FileCursor(Path(path), handle, reporter))
    return cursors


def weave_merge(
    paths: Sequence[str | Path],
    sink: BinaryIO,
    *,
    fingerprint: FingerprintScheme | str = DEFAULT_FINGERPRINT,
    reporter: Reporter | None = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
) -> MergeStats:
    """
    Weave-merge `paths` into `sink`, writing each distinct line once.

    Files that cannot be opened are skipped with a warning. Raises
    `NoFilesOpenedError` if none can be opened, before anything is written.
    `progress_interval` is in rounds; 0 disables progress reports.
    """
    reporter = reporter if reporter is not None else NullReporter()
    seen = SeenSet(fingerprint)
    stats = MergeStats()

    with ExitStack() as stack:
        cursors = _open_cursors([Path(p) for p in paths], stack, reporter)
        if not cursors:
            raise NoFilesOpenedError("No files could be opened for weave-merge")

        stats.files_opened = len(cursors)
        reporter.info(f"Weave-merging {len(cursors)} files...")

        while cursors:
            read_this_round = 0
            for cursor in cursors:
                line = cursor.read_line()
                if line is None:
                    continue
                read_this_round += 1
                if seen.add(line):
                    sink.write(line + b"\n")
                    stats.lines_written += 1

            if not read_this_round:
                break

            stats.rounds += 1
            stats.lines_read += read_this_round
            cursors = [c for c in cursors if c.alive]

            if progress_interval and stats.rounds % progress_interval == 0:
                reporter.progress(stats.lines_written)

    stats.seen_set_bytes = seen.approx_bytes()
    return stats
