"""Label sources consumed by selector evaluation.

A label source answers a single question: what is the value of label ``key``,
or is it absent? Label values are strings, so ``None`` unambiguously means
"absent". Any object with a compatible ``get`` method qualifies, including a
plain ``dict``; computed sources only need to implement ``get``.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol

__all__ = [
    "Labels",
    "MapAsLabels",
]


class Labels(Protocol):
    """Protocol for read-only label lookup."""

    def get(self, key: str) -> Optional[str]:
        """Return the value of label ``key``, or None if it is absent."""
        ...


class MapAsLabels:
    """Adapt an ordinary key/value mapping to the `Labels` protocol.

    The mapping is referenced, not copied; changes made between evaluations
    are visible to later evaluations.
    """

    __slots__ = ("_labels",)

    def __init__(self, labels: Mapping[str, str]) -> None:
        self._labels = labels

    def get(self, key: str) -> Optional[str]:
        return self._labels.get(key)

    def __repr__(self) -> str:
        return f"MapAsLabels({dict(self._labels)!r})"
