"""Structured selector definitions.

Usage:
    from labelselector.dsl import build_selector, load_selectors_yaml

    sel = build_selector({"and": [{"has": "env"}, {"equals": {"key": "role", "value": "db"}}]})
    named = load_selectors_yaml(open("selectors.yaml").read())
"""

from .build import build_node, build_selector, node_to_dict
from .loader import load_selector_schema, load_selectors_yaml, validate_selector_document

__all__ = [
    "build_node",
    "build_selector",
    "node_to_dict",
    "load_selector_schema",
    "load_selectors_yaml",
    "validate_selector_document",
]
