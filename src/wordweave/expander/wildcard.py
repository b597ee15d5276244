"""
Wildcard matching for file name patterns.

Only two metacharacters are recognized: `*` matches any run of characters
(including none) and `?` matches exactly one character. There is no escaping,
no character classes and no path-separator handling.
"""

from __future__ import annotations

WILDCARD_CHARS = frozenset("*?")


def has_wildcard(pattern: str) -> bool:
    """True if the pattern contains `*` or `?`."""
    return any(c in WILDCARD_CHARS for c in pattern)


def wildcard_match(text: str, pattern: str) -> bool:
    """
    Match `text` against `pattern` using two-pointer matching with greedy-star
    backtracking.

    On a mismatch, the most recent `*` is made to absorb one more character of
    text and matching resumes just after it. Runs in O(len(text) * len(pattern))
    in the worst case and constant extra space.
    """
    t = p = 0
    star = -1  # pattern index of the last `*` seen
    resume = 0  # text index the last `*` currently extends to

    while t < len(text):
        if p < len(pattern) and (pattern[p] == "?" or pattern[p] == text[t]):
            t += 1
            p += 1
        elif p < len(pattern) and pattern[p] == "*":
            star = p
            resume = t
            p += 1
        elif star != -1:
            p = star + 1
            resume += 1
            t = resume
        else:
            return False

    while p < len(pattern) and pattern[p] == "*":
        p += 1

    return p == len(pattern)
