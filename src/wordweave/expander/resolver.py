"""
PatternExpander: turns input patterns into a concrete list of files.

Each pattern is either a literal path or a single-directory wildcard pattern
such as `lists/rockyou*.txt`. Problems with one pattern are reported as
warnings and never stop the remaining patterns from being expanded.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

import pathspec

from wordweave.errors import NoFilesResolvedError
from wordweave.expander.excludes import compile_excludes
from wordweave.expander.types import ExpanderConfig
from wordweave.expander.wildcard import has_wildcard, wildcard_match
from wordweave.reporting import NullReporter, Reporter


class PatternExpander:
    """
    Expands literal paths and wildcard patterns into existing regular files.

    Output keeps pattern order. A file matched by more than one pattern appears
    once per match; line-level deduplication in the merger absorbs the repeats.
    """

    def __init__(
        self, config: ExpanderConfig | None = None, reporter: Reporter | None = None
    ) -> None:
        self._config: ExpanderConfig = config if config is not None else ExpanderConfig()
        self._reporter: Reporter = reporter if reporter is not None else NullReporter()
        self._exclude_spec: pathspec.PathSpec | None = compile_excludes(self._config.exclude)

    def expand(self, patterns: Sequence[str]) -> list[Path]:
        """
        Expand patterns in order:
        - No wildcard → kept as-is if it is an existing regular file, else warned about
        - Wildcard → direct entries of its directory whose names match
        """
        result: list[Path] = []
        for pattern in patterns:
            if has_wildcard(pattern):
                result.extend(self._expand_wildcard(pattern))
            elif os.path.isfile(pattern):
                result.append(Path(pattern))
            else:
                self._reporter.warning(f"File not found or not a regular file: {pattern}")
        return result

    def _expand_wildcard(self, pattern: str) -> list[Path]:
        """Match the last path component against direct entries of its directory."""
        directory, name_pattern = os.path.split(pattern)
        if not directory:
            directory = "."

        if not os.path.isdir(directory):
            self._reporter.warning(f"Directory not found for pattern: {pattern}")
            return []

        try:
            with os.scandir(directory) as entries:
                matches = [
                    Path(entry.path)
                    for entry in entries
                    if entry.is_file()
                    and wildcard_match(entry.name, name_pattern)
                    and not self._is_excluded(entry.name)
                ]
        except OSError as e:
            self._reporter.warning(f"Error processing pattern '{pattern}': {e}")
            return []

        if not matches:
            self._reporter.warning(f"No files matched pattern: {pattern}")
        if self._config.sort_matches:
            matches.sort(key=lambda p: p.name)
        return matches

    def _is_excluded(self, name: str) -> bool:
        return self._exclude_spec is not None and self._exclude_spec.match_file(name)


def expand_patterns(
    patterns: Sequence[str],
    config: ExpanderConfig | None = None,
    reporter: Reporter | None = None,
) -> list[Path]:
    """
    Expand patterns into files, raising `NoFilesResolvedError` if nothing
    usable was found.
    """
    files = PatternExpander(config, reporter).expand(patterns)
    if not files:
        raise NoFilesResolvedError("No valid input files found")
    return files
