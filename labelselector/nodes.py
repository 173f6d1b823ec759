"""Selector expression tree.

The tree is a closed set of immutable node variants. Two operations are
defined over it, each as a single exhaustive dispatch:

- `evaluate()`: test a label source against the expression.
- `collect_fragments()` / `render()`: produce the canonical text form.

Canonical rendering rules (the output feeds selector identity, so it must
stay byte-stable):

- ``Equals(k, v)``      -> ``k == "v"``
- ``NotEquals(k, v)``   -> ``k != "v"``
- ``Has(k)``            -> ``has(k)``
- ``In(k, {a, b})``     -> ``k in {"a", "b"}``
- ``NotIn(k, {a, b})``  -> ``k not in {"a", "b"}``
- ``Not(x)``            -> ``!x``
- ``And([x, y])``       -> ``(x && y)``
- ``Or([x, y])``        -> ``(x || y)``
- ``All()``             -> ``all()``

Values are wrapped in double quotes, or in single quotes when the value
contains a double quote. A value containing both quote characters is not
escaped and therefore does not render unambiguously.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from labelselector.labels import Labels
from labelselector.stringset import StringSet

__all__ = [
    "Equals",
    "NotEquals",
    "In",
    "NotIn",
    "Has",
    "Not",
    "And",
    "Or",
    "All",
    "Node",
    "NODE_TYPES",
    "evaluate",
    "collect_fragments",
    "render",
    "quote",
]


@dataclass(frozen=True)
class Equals:
    """Label ``key`` is present and equal to ``value``."""

    key: str
    value: str


@dataclass(frozen=True)
class NotEquals:
    """Label ``key`` is absent, or present with a value other than ``value``."""

    key: str
    value: str


@dataclass(frozen=True)
class In:
    """Label ``key`` is present and its value is a member of ``values``.

    ``values`` may be given as any iterable of strings; it is stored as a
    `StringSet`.
    """

    key: str
    values: StringSet

    def __post_init__(self) -> None:
        if not isinstance(self.values, StringSet):
            object.__setattr__(self, "values", StringSet(self.values))


@dataclass(frozen=True)
class NotIn:
    """Label ``key`` is absent, or present with a value not in ``values``."""

    key: str
    values: StringSet

    def __post_init__(self) -> None:
        if not isinstance(self.values, StringSet):
            object.__setattr__(self, "values", StringSet(self.values))


@dataclass(frozen=True)
class Has:
    """Label ``key`` is present, whatever its value."""

    key: str


@dataclass(frozen=True)
class Not:
    """Logical negation of ``operand``."""

    operand: "Node"

    def __post_init__(self) -> None:
        _check_operand(self.operand, "Not")


@dataclass(frozen=True)
class And:
    """Conjunction of one or more operands, evaluated left to right.

    Raises:
        ValueError: If ``operands`` is empty.
        TypeError: If any operand is not a node.
    """

    operands: Tuple["Node", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", _freeze_operands(self.operands, "And"))


@dataclass(frozen=True)
class Or:
    """Disjunction of one or more operands, evaluated left to right.

    Raises:
        ValueError: If ``operands`` is empty.
        TypeError: If any operand is not a node.
    """

    operands: Tuple["Node", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "operands", _freeze_operands(self.operands, "Or"))


@dataclass(frozen=True)
class All:
    """Universal selector; matches every label set."""


Node = Union[Equals, NotEquals, In, NotIn, Has, Not, And, Or, All]

#: Every node variant. Dispatch in this module is exhaustive over this tuple.
NODE_TYPES = (Equals, NotEquals, In, NotIn, Has, Not, And, Or, All)


def _check_operand(operand: object, owner: str) -> None:
    if not isinstance(operand, NODE_TYPES):
        raise TypeError(
            f"{owner} operand must be a selector node, got {type(operand).__name__}"
        )


def _freeze_operands(operands: Iterable["Node"], owner: str) -> Tuple["Node", ...]:
    if operands is None:
        raise TypeError(f"{owner} requires a sequence of operands, got None")
    frozen = tuple(operands)
    if not frozen:
        raise ValueError(f"{owner} requires at least one operand")
    for operand in frozen:
        _check_operand(operand, owner)
    return frozen


def evaluate(node: Node, labels: Labels) -> bool:
    """Evaluate an expression tree against a label source.

    Absent labels are an ordinary input: ``Equals`` and ``In`` fail on them,
    ``NotEquals`` and ``NotIn`` pass. ``And``/``Or`` stop at the first operand
    that decides the result, so later operands perform no lookups.

    Args:
        node: Root of the (sub)tree to evaluate.
        labels: Label source providing ``get(key)``.

    Returns:
        True if the labels match the expression.

    Raises:
        TypeError: If ``node`` is not a selector node.
    """
    if isinstance(node, Equals):
        value = labels.get(node.key)
        return value is not None and value == node.value
    elif isinstance(node, NotEquals):
        value = labels.get(node.key)
        return value is None or value != node.value
    elif isinstance(node, In):
        value = labels.get(node.key)
        return value is not None and value in node.values
    elif isinstance(node, NotIn):
        value = labels.get(node.key)
        return value is None or value not in node.values
    elif isinstance(node, Has):
        return labels.get(node.key) is not None
    elif isinstance(node, Not):
        return not evaluate(node.operand, labels)
    elif isinstance(node, And):
        for operand in node.operands:
            if not evaluate(operand, labels):
                return False
        return True
    elif isinstance(node, Or):
        for operand in node.operands:
            if evaluate(operand, labels):
                return True
        return False
    elif isinstance(node, All):
        return True
    else:
        raise TypeError(f"Unsupported selector node: {type(node).__name__}")


def quote(value: str) -> str:
    """Quote a label value for canonical rendering."""
    q = "'" if '"' in value else '"'
    return q + value + q


def _collect_set_fragments(
    fragments: List[str], key: str, op: str, values: StringSet
) -> List[str]:
    fragments.extend((key, " ", op, " {"))
    first = True
    for value in values:
        if not first:
            fragments.append(", ")
        first = False
        fragments.append(quote(value))
    fragments.append("}")
    return fragments


def _collect_joined(
    fragments: List[str], operands: Tuple[Node, ...], sep: str
) -> List[str]:
    fragments.append("(")
    collect_fragments(operands[0], fragments)
    for operand in operands[1:]:
        fragments.append(sep)
        collect_fragments(operand, fragments)
    fragments.append(")")
    return fragments


def collect_fragments(node: Node, fragments: List[str]) -> List[str]:
    """Append the canonical rendering of ``node`` to ``fragments``.

    The accumulator is extended in place and returned so calls can be
    chained; the fragments are joined once by the caller.

    Raises:
        TypeError: If ``node`` is not a selector node.
    """
    if isinstance(node, Equals):
        fragments.extend((node.key, " == ", quote(node.value)))
    elif isinstance(node, NotEquals):
        fragments.extend((node.key, " != ", quote(node.value)))
    elif isinstance(node, In):
        _collect_set_fragments(fragments, node.key, "in", node.values)
    elif isinstance(node, NotIn):
        _collect_set_fragments(fragments, node.key, "not in", node.values)
    elif isinstance(node, Has):
        fragments.extend(("has(", node.key, ")"))
    elif isinstance(node, Not):
        fragments.append("!")
        collect_fragments(node.operand, fragments)
    elif isinstance(node, And):
        _collect_joined(fragments, node.operands, " && ")
    elif isinstance(node, Or):
        _collect_joined(fragments, node.operands, " || ")
    elif isinstance(node, All):
        fragments.append("all()")
    else:
        raise TypeError(f"Unsupported selector node: {type(node).__name__}")
    return fragments


def render(node: Node) -> str:
    """Return the canonical string for an expression tree."""
    return "".join(collect_fragments(node, []))
