"""Build selector trees from structured definitions.

Structured definitions are plain mappings (typically loaded from YAML or
JSON) with exactly one operator key per node:

    {"equals": {"key": "role", "value": "db"}}
    {"not_equals": {"key": "role", "value": "db"}}
    {"in": {"key": "tier", "values": ["a", "b"]}}
    {"not_in": {"key": "tier", "values": ["a", "b"]}}
    {"has": "env"}
    {"not": <node>}
    {"and": [<node>, ...]}
    {"or": [<node>, ...]}
    {"all": {}}
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from labelselector.nodes import (
    All,
    And,
    Equals,
    Has,
    In,
    Node,
    Not,
    NotEquals,
    NotIn,
    Or,
)
from labelselector.selector import Selector

__all__ = [
    "build_node",
    "build_selector",
    "node_to_dict",
]

_OPERATORS = (
    "equals",
    "not_equals",
    "in",
    "not_in",
    "has",
    "not",
    "and",
    "or",
    "all",
)


def build_node(data: Mapping[str, Any], path: str = "selector") -> Node:
    """Convert a structured definition into a node tree.

    Args:
        data: Mapping with exactly one operator key.
        path: Location used in error messages.

    Returns:
        Root node of the built tree.

    Raises:
        ValueError: If the definition is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(
            f"{path}: selector node must be a mapping, got {type(data).__name__}"
        )
    if len(data) != 1:
        raise ValueError(
            f"{path}: selector node must have exactly one operator key, "
            f"got {sorted(str(k) for k in data)}"
        )

    op, body = next(iter(data.items()))
    if op not in _OPERATORS:
        raise ValueError(
            f"{path}: unknown operator '{op}'. Expected one of: {list(_OPERATORS)}"
        )
    here = f"{path}.{op}"

    if op in ("equals", "not_equals"):
        key, value = _leaf_fields(body, "value", here)
        if not isinstance(value, str):
            raise ValueError(f"{here}: 'value' must be a string")
        return Equals(key, value) if op == "equals" else NotEquals(key, value)

    if op in ("in", "not_in"):
        key, values = _leaf_fields(body, "values", here)
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"{here}: 'values' must be a list of strings")
        return In(key, values) if op == "in" else NotIn(key, values)

    if op == "has":
        if not isinstance(body, str):
            raise ValueError(f"{here}: expected a label key string")
        return Has(body)

    if op == "not":
        return Not(build_node(body, here))

    if op in ("and", "or"):
        if not isinstance(body, list) or not body:
            raise ValueError(f"{here}: expected a non-empty list of selector nodes")
        operands = [build_node(item, f"{here}[{i}]") for i, item in enumerate(body)]
        return And(operands) if op == "and" else Or(operands)

    if not (body is None or body == {}):
        raise ValueError(f"{here}: 'all' takes no arguments")
    return All()


def _leaf_fields(body: Any, value_field: str, path: str) -> tuple[str, Any]:
    if not isinstance(body, Mapping):
        raise ValueError(f"{path}: expected a mapping with 'key' and '{value_field}'")
    extra = set(body) - {"key", value_field}
    if extra:
        raise ValueError(f"{path}: unrecognized key(s): {', '.join(sorted(extra))}")
    if "key" not in body or value_field not in body:
        raise ValueError(f"{path}: must have 'key' and '{value_field}'")
    if not isinstance(body["key"], str):
        raise ValueError(f"{path}: 'key' must be a string")
    return body["key"], body[value_field]


def build_selector(data: Mapping[str, Any], **kwargs: Any) -> Selector:
    """Build a `Selector` from a structured definition.

    Keyword arguments are forwarded to the `Selector` constructor.
    """
    return Selector(build_node(data), **kwargs)


def node_to_dict(node: Node) -> Dict[str, Any]:
    """Convert a node tree back into its structured definition."""
    if isinstance(node, Equals):
        return {"equals": {"key": node.key, "value": node.value}}
    elif isinstance(node, NotEquals):
        return {"not_equals": {"key": node.key, "value": node.value}}
    elif isinstance(node, In):
        return {"in": {"key": node.key, "values": list(node.values)}}
    elif isinstance(node, NotIn):
        return {"not_in": {"key": node.key, "values": list(node.values)}}
    elif isinstance(node, Has):
        return {"has": node.key}
    elif isinstance(node, Not):
        return {"not": node_to_dict(node.operand)}
    elif isinstance(node, And):
        return {"and": _operands_to_list(node.operands)}
    elif isinstance(node, Or):
        return {"or": _operands_to_list(node.operands)}
    elif isinstance(node, All):
        return {"all": {}}
    else:
        raise TypeError(f"Unsupported selector node: {type(node).__name__}")


def _operands_to_list(operands: tuple[Node, ...]) -> List[Dict[str, Any]]:
    return [node_to_dict(operand) for operand in operands]
