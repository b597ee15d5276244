"""
Line fingerprints for deduplication.

The seen set stores a fingerprint per unique line rather than the line itself,
so memory per entry is fixed regardless of line length. Two distinct lines that
share a fingerprint would be treated as duplicates; the 128-bit default makes
that negligible for any realistic corpus. `exact` stores the raw line instead:
no collisions, but memory then grows with line length.
"""

from __future__ import annotations

import hashlib
import sys
from collections.abc import Callable
from enum import Enum


class FingerprintScheme(Enum):
    """How each line is reduced to a seen-set key."""

    blake2b_128 = "blake2b-128"
    """16-byte BLAKE2b digest."""

    blake2b_64 = "blake2b-64"
    """8-byte BLAKE2b digest, a machine-word-sized key like a plain hash table."""

    exact = "exact"
    """The line bytes themselves."""


DEFAULT_FINGERPRINT = FingerprintScheme.blake2b_128


def _blake2b(digest_size: int) -> Callable[[bytes], bytes]:
    def fingerprint(line: bytes) -> bytes:
        return hashlib.blake2b(line, digest_size=digest_size).digest()

    return fingerprint


def _identity(line: bytes) -> bytes:
    return line


def get_fingerprinter(scheme: FingerprintScheme | str) -> Callable[[bytes], bytes]:
    """Return the fingerprint function for a scheme or its name."""
    scheme = FingerprintScheme(scheme)
    if scheme is FingerprintScheme.blake2b_128:
        return _blake2b(16)
    if scheme is FingerprintScheme.blake2b_64:
        return _blake2b(8)
    return _identity


class SeenSet:
    """
    Fingerprints of every line emitted so far in one merge run.

    Entries are never removed, so memory grows linearly with the number of
    unique lines.
    """

    def __init__(self, scheme: FingerprintScheme | str = DEFAULT_FINGERPRINT) -> None:
        self.scheme: FingerprintScheme = FingerprintScheme(scheme)
        self._fingerprint: Callable[[bytes], bytes] = get_fingerprinter(self.scheme)
        self._seen: set[bytes] = set()
        self._key_bytes: int = 0

    def add(self, line: bytes) -> bool:
        """Record a line. Returns True if it had not been seen before."""
        key = self._fingerprint(line)
        if key in self._seen:
            return False
        self._seen.add(key)
        self._key_bytes += sys.getsizeof(key)
        return True

    def __contains__(self, line: bytes) -> bool:
        return self._fingerprint(line) in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def approx_bytes(self) -> int:
        """Rough memory held by the set: hash table plus key objects."""
        return sys.getsizeof(self._seen) + self._key_bytes
