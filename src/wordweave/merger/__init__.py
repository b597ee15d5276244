"""Round-robin merging of many files with line deduplication."""

from wordweave.merger.fingerprint import (
    DEFAULT_FINGERPRINT,
    FingerprintScheme,
    SeenSet,
    get_fingerprinter,
)
from wordweave.merger.weave import FileCursor, MergeStats, weave_merge

__all__ = [
    "DEFAULT_FINGERPRINT",
    "FileCursor",
    "FingerprintScheme",
    "MergeStats",
    "SeenSet",
    "get_fingerprinter",
    "weave_merge",
]
