"""Selector: root handle over one expression tree.

A `Selector` owns an immutable node tree and lazily derives two values from
it: the canonical string and the unique identifier. Both are computed at
most once per instance under a per-instance lock and then reused, so every
caller sharing the instance observes identical results.
"""

from __future__ import annotations

import threading
from typing import Mapping, Optional

from labelselector.config import SELECTOR_CONFIG, SelectorConfig
from labelselector.hashing import IdentifierDeriver, make_unique_id
from labelselector.labels import Labels, MapAsLabels
from labelselector.logging import get_logger
from labelselector.nodes import NODE_TYPES, All, Node, collect_fragments, evaluate

__all__ = [
    "Selector",
]

logger = get_logger(__name__)


class Selector:
    """Label selector over a completed expression tree.

    Evaluation is side-effect free and safe to call concurrently without
    locking. The memoized canonical string and identifier are the only
    mutable state; they are published under ``_lock``.

    Args:
        root: Root node of the expression tree.
        deriver: Identifier derivation function. Defaults to `make_unique_id`.
        config: Selector configuration. Defaults to `SELECTOR_CONFIG`.

    Raises:
        TypeError: If ``root`` is not a selector node.
    """

    __slots__ = ("_root", "_deriver", "_config", "_lock", "_string", "_unique_id")

    def __init__(
        self,
        root: Node,
        deriver: Optional[IdentifierDeriver] = None,
        config: Optional[SelectorConfig] = None,
    ) -> None:
        if not isinstance(root, NODE_TYPES):
            raise TypeError(
                f"Selector root must be a selector node, got {type(root).__name__}"
            )
        self._root = root
        self._deriver: IdentifierDeriver = deriver or make_unique_id
        self._config = config or SELECTOR_CONFIG
        self._lock = threading.Lock()
        self._string: Optional[str] = None
        self._unique_id: Optional[str] = None

    @classmethod
    def all(cls, **kwargs) -> "Selector":
        """Return a selector matching every label set."""
        return cls(All(), **kwargs)

    @property
    def root(self) -> Node:
        """Root node of the expression tree."""
        return self._root

    def evaluate(self, labels: Mapping[str, str]) -> bool:
        """Evaluate against a concrete label mapping."""
        return self.evaluate_labels(MapAsLabels(labels))

    def evaluate_labels(self, labels: Labels) -> bool:
        """Evaluate against any label source, including computed ones."""
        return evaluate(self._root, labels)

    def canonical_string(self) -> str:
        """Return the canonical rendering of the tree, computed once."""
        cached = self._string
        if cached is not None:
            return cached
        with self._lock:
            if self._string is None:
                self._string = "".join(collect_fragments(self._root, []))
                logger.debug("Rendered selector: %s", self._string)
            return self._string

    def unique_id(self) -> str:
        """Return the namespace-tagged identifier of the canonical string.

        Computed once from `canonical_string()`; the order in which the two
        accessors are first called does not affect either result.
        """
        cached = self._unique_id
        if cached is not None:
            return cached
        text = self.canonical_string()
        with self._lock:
            if self._unique_id is None:
                self._unique_id = self._deriver(self._config.id_namespace, text)
                logger.debug("Derived selector id %s for %s", self._unique_id, text)
            return self._unique_id

    def __str__(self) -> str:
        return self.canonical_string()

    def __repr__(self) -> str:
        return f"Selector({self.canonical_string()!r})"

    def _identity_key(self) -> tuple[str, str]:
        return (self._config.id_namespace, self.canonical_string())

    def __eq__(self, other: object) -> bool:
        # Equal selectors must share a unique_id(), so the namespace takes part
        if not isinstance(other, Selector):
            return NotImplemented
        return self._identity_key() == other._identity_key()

    def __hash__(self) -> int:
        return hash(self._identity_key())
