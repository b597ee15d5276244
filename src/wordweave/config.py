"""
Config file support for wordweave.

Settings are read from `.wordweave.toml`, `wordweave.toml`, or the `[tool.wordweave]`
table of a `pyproject.toml`, whichever is found first in the current directory or
its ancestors. Keys may be kebab-case and may be grouped under `[merge]` and
`[expand]` sections. Every value is type-checked on load, so a bad config file
fails up front with a `ValueError` naming the offending key.

Flags given explicitly on the command line always override the config file.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, cast

from wordweave.merger.fingerprint import FingerprintScheme

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class WordweaveConfig:
    """Settings from a config file. `None` means the key was absent."""

    output: str | None = None
    fingerprint: str | None = None
    progress_interval: int | None = None
    max_open_warning: int | None = None
    quiet: bool | None = None
    sort_matches: bool | None = None
    exclude: list[str] | None = None

    def settings(self) -> dict[str, Any]:
        """The fields that were actually set, by name."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return {name: value for name, value in values.items() if value is not None}


# File name and the key path of the wordweave table inside it, in lookup order.
_SOURCES: list[tuple[str, tuple[str, ...]]] = [
    (".wordweave.toml", ()),
    ("wordweave.toml", ()),
    ("pyproject.toml", ("tool", "wordweave")),
]

_SECTIONS = ("merge", "expand")


def _string(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"`{key}` must be a string, not {type(value).__name__}")
    return value


def _flag(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"`{key}` must be true or false, not {type(value).__name__}")
    return value


def _count(key: str, value: Any) -> int:
    # bool is an int subclass; `progress-interval = true` is a mistake, not 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{key}` must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"`{key}` must not be negative, got {value}")
    return value


def _patterns(key: str, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in cast(list[Any], value)):
        return list(cast(list[str], value))
    raise ValueError(f"`{key}` must be a pattern or a list of patterns")


def _fingerprint(key: str, value: Any) -> str:
    name = _string(key, value)
    allowed = [s.value for s in FingerprintScheme]
    if name not in allowed:
        raise ValueError(f"`{key}` must be one of {', '.join(allowed)}, got {name!r}")
    return name


_CHECKS: dict[str, Callable[[str, Any], Any]] = {
    "output": _string,
    "fingerprint": _fingerprint,
    "progress_interval": _count,
    "max_open_warning": _count,
    "quiet": _flag,
    "sort_matches": _flag,
    "exclude": _patterns,
}


def _read_table(path: Path, key_path: tuple[str, ...]) -> dict[str, Any] | None:
    """The wordweave table of a TOML file, or `None` if the file has none."""
    table: Any = tomllib.loads(path.read_text())
    for key in key_path:
        if not isinstance(table, dict) or key not in table:
            return None
        table = cast(dict[str, Any], table)[key]
    return cast(dict[str, Any], table) if isinstance(table, dict) else None


def find_config_file(start_dir: Path) -> Path | None:
    """
    Nearest config file at or above `start_dir`. A `pyproject.toml` only
    counts if it parses and has a `[tool.wordweave]` table.
    """
    start = start_dir.resolve()
    for directory in [start, *start.parents]:
        for filename, key_path in _SOURCES:
            candidate = directory / filename
            if not candidate.is_file():
                continue
            if not key_path:
                return candidate
            try:
                if _read_table(candidate, key_path) is not None:
                    return candidate
            except (tomllib.TOMLDecodeError, OSError):
                continue
    return None


def load_config(config_path: Path) -> WordweaveConfig:
    """Read and validate a config file found by `find_config_file`."""
    key_path = dict(_SOURCES).get(config_path.name, ())
    return parse_config(_read_table(config_path, key_path) or {})


def parse_config(table: dict[str, Any]) -> WordweaveConfig:
    """
    Validate a wordweave table. Unknown keys are ignored; a known key with a
    value of the wrong type raises `ValueError`. A single `exclude` pattern
    is accepted in place of a list.
    """
    entries: dict[str, Any] = {}
    for key, value in table.items():
        if key in _SECTIONS and isinstance(value, dict):
            entries.update(cast(dict[str, Any], value))
        else:
            entries[key] = value

    checked: dict[str, Any] = {}
    for key, value in entries.items():
        name = key.replace("-", "_")
        check = _CHECKS.get(name)
        if check is not None:
            checked[name] = check(key, value)
    return WordweaveConfig(**checked)


def apply_config(options: Any, config: WordweaveConfig, explicit_flags: set[str]) -> None:
    """Copy config settings onto `options`, except those set on the command line."""
    for name, value in config.settings().items():
        if name not in explicit_flags and hasattr(options, name):
            setattr(options, name, value)
