"""Exclusion patterns for wildcard matches, compiled with pathspec."""

from __future__ import annotations

from collections.abc import Iterable

import pathspec


def compile_excludes(patterns: Iterable[str]) -> pathspec.PathSpec | None:
    """
    Compile gitignore-style exclusion patterns, skipping blanks and `#` comments.
    Returns `None` when nothing is left to match.
    """
    lines = [p for p in patterns if p.strip() and not p.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)
