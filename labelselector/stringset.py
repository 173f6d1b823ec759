"""Immutable, deterministically ordered set of strings.

Used by the ``in`` / ``not in`` selector operators: membership for evaluation
and iteration order for canonical rendering. Members are kept sorted and
de-duplicated so two sets with the same members always iterate identically.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, Tuple

__all__ = [
    "StringSet",
]


class StringSet:
    """Sorted, de-duplicated collection of strings.

    Args:
        values: Any iterable of strings. Order and duplicates are irrelevant.

    Raises:
        TypeError: If any member is not a string.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[str] = ()) -> None:
        if isinstance(values, str):
            raise TypeError("StringSet expects an iterable of strings, not a string")
        members = set()
        for value in values:
            if not isinstance(value, str):
                raise TypeError(
                    f"StringSet members must be strings, got {type(value).__name__}"
                )
            members.add(value)
        self._values: Tuple[str, ...] = tuple(sorted(members))

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        idx = bisect_left(self._values, value)
        return idx < len(self._values) and self._values[idx] == value

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringSet):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"StringSet({list(self._values)!r})"
