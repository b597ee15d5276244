"""Configuration types for pattern expansion."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExpanderConfig:
    """
    Configuration for pattern expansion.

    `exclude` holds gitignore-syntax patterns checked against the base name of
    each wildcard match. Literal paths named explicitly are never excluded.

    `sort_matches=False` keeps the directory's own iteration order, which is
    filesystem-defined. Set it to get lexicographic order within each pattern.
    """

    exclude: list[str] = field(default_factory=list)
    sort_matches: bool = False
