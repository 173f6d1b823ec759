"""Shared fixtures for selector tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest


class CountingLabels:
    """Label source that records every lookup it serves."""

    def __init__(self, labels: Dict[str, str]) -> None:
        self._labels = labels
        self.lookups: List[str] = []

    def get(self, key: str) -> Optional[str]:
        self.lookups.append(key)
        return self._labels.get(key)


@pytest.fixture
def counting_labels():
    """Factory for lookup-recording label sources."""
    return CountingLabels
