"""
High-level merge entry point: expand patterns, open the output, weave-merge.
"""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from strif import atomic_output_file

from wordweave.errors import OutputUnavailableError
from wordweave.expander import ExpanderConfig, expand_patterns
from wordweave.merger import DEFAULT_FINGERPRINT, FingerprintScheme, MergeStats, weave_merge
from wordweave.merger.weave import DEFAULT_PROGRESS_INTERVAL
from wordweave.reporting import NullReporter, Reporter

# Above this many inputs, warn that all of them are held open at once.
DEFAULT_MAX_OPEN_WARNING = 100


def merge_files(
    patterns: Sequence[str],
    output: str | Path,
    *,
    config: ExpanderConfig | None = None,
    fingerprint: FingerprintScheme | str = DEFAULT_FINGERPRINT,
    reporter: Reporter | None = None,
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    max_open_warning: int = DEFAULT_MAX_OPEN_WARNING,
) -> MergeStats:
    """
    Expand `patterns` and weave-merge the resulting files into `output`.

    `output` is a file path, or `-` for stdout. A file is written atomically:
    it only appears (or is replaced) once the merge has completed.

    Raises:
        NoFilesResolvedError: No pattern produced a usable file.
        OutputUnavailableError: The output could not be opened or moved into place.
        NoFilesOpenedError: None of the resolved files could be opened.
    """
    reporter = reporter if reporter is not None else NullReporter()

    reporter.info("Expanding file patterns...")
    files = expand_patterns(patterns, config, reporter)
    reporter.info(f"Processing {len(files)} files...")

    if max_open_warning and len(files) > max_open_warning:
        reporter.warning(
            f"Opening {len(files)} files simultaneously. "
            "If you encounter errors, your OS may have file descriptor limits."
        )

    if str(output) == "-":
        sink = sys.stdout.buffer
        stats = weave_merge(
            files,
            sink,
            fingerprint=fingerprint,
            reporter=reporter,
            progress_interval=progress_interval,
        )
        sink.flush()
        return stats

    output = Path(output)
    reporter.info(f"Output file: {output}")
    with atomic_output(output) as sink:
        stats = weave_merge(
            files,
            sink,
            fingerprint=fingerprint,
            reporter=reporter,
            progress_interval=progress_interval,
        )
    reporter.info(f"Output written to: {output}")
    return stats


def _check_writable(path: Path) -> None:
    """Refuse a directory or an existing read-only file as the output."""
    if path.is_dir():
        raise OutputUnavailableError(f"Could not open output file: {path} (is a directory)")
    if path.exists():
        writable_bits = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
        if not path.stat().st_mode & writable_bits or not os.access(path, os.W_OK):
            raise OutputUnavailableError(f"Could not open output file: {path} (read-only)")


@contextmanager
def atomic_output(path: Path) -> Iterator[BinaryIO]:
    """
    Binary sink for `path` that only replaces it once the block completes.
    On error the partial output is discarded and `path` is left untouched.
    Parent directories are created as needed.
    """
    _check_writable(path)
    opened = False
    try:
        with atomic_output_file(path, make_parents=True) as tmp_path:
            sink = open(tmp_path, "wb")
            opened = True
            try:
                with sink:
                    yield sink
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
    except OSError as e:
        if opened:
            raise
        raise OutputUnavailableError(f"Could not open output file: {path} ({e})") from e
