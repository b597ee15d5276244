"""
wordweave: round-robin merging of wordlists with line deduplication.
"""

from wordweave.errors import (
    NoFilesOpenedError,
    NoFilesResolvedError,
    OutputUnavailableError,
    WordweaveError,
)
from wordweave.expander import ExpanderConfig, PatternExpander, expand_patterns, wildcard_match
from wordweave.merge_api import merge_files
from wordweave.merger import FingerprintScheme, MergeStats, weave_merge
from wordweave.reporting import NullReporter, Reporter, StderrReporter

__all__ = [
    "ExpanderConfig",
    "FingerprintScheme",
    "MergeStats",
    "NoFilesOpenedError",
    "NoFilesResolvedError",
    "NullReporter",
    "OutputUnavailableError",
    "PatternExpander",
    "Reporter",
    "StderrReporter",
    "WordweaveError",
    "expand_patterns",
    "merge_files",
    "weave_merge",
    "wildcard_match",
]
