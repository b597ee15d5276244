from __future__ import annotations

import pytest


class CollectingReporter:
    """Reporter that keeps every message for assertions."""

    def __init__(self) -> None:
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.progress_counts: list[int] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)

    def progress(self, lines_written: int) -> None:
        self.progress_counts.append(lines_written)


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()
