"""labelselector: label selector expressions over key/value label sets.

A selector is an immutable boolean expression tree evaluated against a label
source. Every selector has a canonical string form and a stable identifier
derived from it, so selectors can be compared and deduplicated cheaply.

Primary API:
    Selector - root handle: evaluate, canonical_string, unique_id
    Equals, NotEquals, In, NotIn, Has, Not, And, Or, All - expression nodes
    MapAsLabels, Labels - label sources
    StringSet - ordered value set for in/not in
    build_selector(), load_selectors_yaml() - structured definitions

Example:
    from labelselector import And, Equals, Has, Selector

    sel = Selector(And([Equals("role", "db"), Has("env")]))
    sel.evaluate({"role": "db", "env": "prod"})  # True
    str(sel)  # '(role == "db" && has(env))'
"""

from __future__ import annotations

from labelselector import logging
from labelselector._version import __version__
from labelselector.config import SELECTOR_CONFIG, SelectorConfig
from labelselector.dsl import build_node, build_selector, load_selectors_yaml
from labelselector.hashing import IdentifierDeriver, make_unique_id
from labelselector.labels import Labels, MapAsLabels
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
    evaluate,
    render,
)
from labelselector.selector import Selector
from labelselector.stringset import StringSet

__all__ = [
    "__version__",
    "logging",
    # Core
    "Selector",
    "Node",
    "Equals",
    "NotEquals",
    "In",
    "NotIn",
    "Has",
    "Not",
    "And",
    "Or",
    "All",
    "evaluate",
    "render",
    # Collaborators
    "Labels",
    "MapAsLabels",
    "StringSet",
    "IdentifierDeriver",
    "make_unique_id",
    # Configuration
    "SelectorConfig",
    "SELECTOR_CONFIG",
    # Structured definitions
    "build_node",
    "build_selector",
    "load_selectors_yaml",
]
