"""Tests for pattern expansion."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import CollectingReporter
from wordweave.errors import NoFilesResolvedError
from wordweave.expander import ExpanderConfig, PatternExpander, expand_patterns


def _make_lists(root: Path) -> None:
    for name in ["file1.txt", "file2.txt", "file10.txt", "other.txt", "notes.md"]:
        (root / name).write_text(f"{name}\n")
    sub = root / "sub"
    sub.mkdir()
    (sub / "file3.txt").write_text("nested\n")
    (sub / "deep.txt").write_text("nested\n")


def test_question_mark_pattern(tmp_path: Path, reporter: CollectingReporter):
    _make_lists(tmp_path)
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "file?.txt")])
    assert sorted(p.name for p in result) == ["file1.txt", "file2.txt"]
    assert reporter.warnings == []


def test_star_pattern_is_not_recursive(tmp_path: Path):
    _make_lists(tmp_path)
    result = PatternExpander().expand([str(tmp_path / "*.txt")])
    assert sorted(p.name for p in result) == ["file1.txt", "file10.txt", "file2.txt", "other.txt"]
    assert all(p.parent == tmp_path for p in result)


def test_star_pattern_skips_directories(tmp_path: Path):
    _make_lists(tmp_path)
    (tmp_path / "dir.txt").mkdir()
    result = PatternExpander().expand([str(tmp_path / "*")])
    names = {p.name for p in result}
    assert "sub" not in names
    assert "dir.txt" not in names
    assert "notes.md" in names


def test_pattern_without_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _make_lists(tmp_path)
    monkeypatch.chdir(tmp_path)
    result = PatternExpander().expand(["file?.txt"])
    assert sorted(str(p) for p in result) == ["file1.txt", "file2.txt"]
    assert all(p.is_file() for p in result)


def test_literal_file_kept_verbatim(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _make_lists(tmp_path)
    monkeypatch.chdir(tmp_path)
    result = PatternExpander().expand(["other.txt", str(tmp_path / "notes.md")])
    assert result == [Path("other.txt"), tmp_path / "notes.md"]


def test_literal_missing_file_warns_and_continues(tmp_path: Path, reporter: CollectingReporter):
    _make_lists(tmp_path)
    missing = tmp_path / "missing.txt"
    result = PatternExpander(reporter=reporter).expand(
        [str(missing), str(tmp_path / "other.txt")]
    )
    assert result == [tmp_path / "other.txt"]
    assert len(reporter.warnings) == 1
    assert "missing.txt" in reporter.warnings[0]


def test_literal_directory_is_not_a_file(tmp_path: Path, reporter: CollectingReporter):
    _make_lists(tmp_path)
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "sub")])
    assert result == []
    assert "not a regular file" in reporter.warnings[0]


def test_wildcard_in_missing_directory_warns(tmp_path: Path, reporter: CollectingReporter):
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "nope" / "*.txt")])
    assert result == []
    assert reporter.warnings == [f"Directory not found for pattern: {tmp_path / 'nope' / '*.txt'}"]


def test_wildcard_directory_part_is_a_file(tmp_path: Path, reporter: CollectingReporter):
    _make_lists(tmp_path)
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "other.txt" / "*")])
    assert result == []
    assert "Directory not found" in reporter.warnings[0]


def test_wildcard_in_directory_component_is_not_expanded(
    tmp_path: Path, reporter: CollectingReporter
):
    _make_lists(tmp_path)
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "s*" / "file3.txt")])
    assert result == []
    assert len(reporter.warnings) == 1


def test_wildcard_with_no_matches_warns(tmp_path: Path, reporter: CollectingReporter):
    _make_lists(tmp_path)
    result = PatternExpander(reporter=reporter).expand([str(tmp_path / "*.csv")])
    assert result == []
    assert reporter.warnings == [f"No files matched pattern: {tmp_path / '*.csv'}"]


def test_pattern_order_is_kept(tmp_path: Path):
    _make_lists(tmp_path)
    result = PatternExpander().expand(
        [str(tmp_path / "other.txt"), str(tmp_path / "file?.txt"), str(tmp_path / "notes.md")]
    )
    assert result[0].name == "other.txt"
    assert sorted(p.name for p in result[1:3]) == ["file1.txt", "file2.txt"]
    assert result[3].name == "notes.md"


def test_duplicates_across_patterns_are_kept(tmp_path: Path):
    _make_lists(tmp_path)
    result = PatternExpander().expand(
        [str(tmp_path / "other.txt"), str(tmp_path / "oth*.txt")]
    )
    assert [p.name for p in result] == ["other.txt", "other.txt"]


def test_sort_matches(tmp_path: Path):
    for name in ["c.txt", "a.txt", "b.txt"]:
        (tmp_path / name).write_text("x\n")
    config = ExpanderConfig(sort_matches=True)
    result = PatternExpander(config).expand([str(tmp_path / "*.txt")])
    assert [p.name for p in result] == ["a.txt", "b.txt", "c.txt"]


def test_exclude_filters_wildcard_matches(tmp_path: Path):
    _make_lists(tmp_path)
    config = ExpanderConfig(exclude=["file1*", "# a comment", ""])
    result = PatternExpander(config).expand([str(tmp_path / "*.txt")])
    assert sorted(p.name for p in result) == ["file2.txt", "other.txt"]


def test_exclude_does_not_apply_to_literal_files(tmp_path: Path):
    _make_lists(tmp_path)
    config = ExpanderConfig(exclude=["*.txt"])
    result = PatternExpander(config).expand([str(tmp_path / "other.txt")])
    assert result == [tmp_path / "other.txt"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlink_to_file_is_matched(tmp_path: Path):
    target = tmp_path / "real.lst"
    target.write_text("x\n")
    (tmp_path / "link.txt").symlink_to(target)
    result = PatternExpander().expand([str(tmp_path / "*.txt")])
    assert [p.name for p in result] == ["link.txt"]


def test_expand_patterns_raises_when_nothing_resolves(
    tmp_path: Path, reporter: CollectingReporter
):
    with pytest.raises(NoFilesResolvedError):
        expand_patterns([str(tmp_path / "missing.txt"), str(tmp_path / "*.txt")], None, reporter)
    assert len(reporter.warnings) == 2


def test_enumeration_error_is_a_warning(
    tmp_path: Path, reporter: CollectingReporter, monkeypatch: pytest.MonkeyPatch
):
    _make_lists(tmp_path)

    def fail_scandir(path: str):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr(os, "scandir", fail_scandir)
    result = PatternExpander(reporter=reporter).expand(
        [str(tmp_path / "*.txt"), str(tmp_path / "other.txt")]
    )
    assert result == [tmp_path / "other.txt"]
    assert "Permission denied" in reporter.warnings[0]
