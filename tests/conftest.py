from __future__ import annotations

import pytest

from contextroots.resources import MemoryResourceProvider


class RecordingProvider(MemoryResourceProvider):
    """Memory provider that remembers which files were read."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: list[str] = []

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        return super().read_text(path)


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()
