"""
Pattern expansion: literal paths and `*`/`?` wildcard patterns to files.

Usage::

    from wordweave.expander import ExpanderConfig, PatternExpander

    expander = PatternExpander(ExpanderConfig(sort_matches=True))
    files = expander.expand(["lists/*.txt", "extra/names.txt"])
"""

from wordweave.expander.resolver import PatternExpander, expand_patterns
from wordweave.expander.types import ExpanderConfig
from wordweave.expander.wildcard import has_wildcard, wildcard_match

__all__ = [
    "ExpanderConfig",
    "PatternExpander",
    "expand_patterns",
    "has_wildcard",
    "wildcard_match",
]
