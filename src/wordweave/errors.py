"""Fatal errors for wordweave. Recoverable problems go to the reporter instead."""

from __future__ import annotations


class WordweaveError(Exception):
    """Base class for errors that abort a merge run."""


class NoFilesResolvedError(WordweaveError):
    """Every input pattern expanded to zero files."""


class NoFilesOpenedError(WordweaveError):
    """None of the resolved files could be opened for reading."""


class OutputUnavailableError(WordweaveError):
    """The output destination could not be opened for writing."""
