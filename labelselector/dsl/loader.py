"""YAML loader + schema validation for selector documents.

A selector document names a set of structured selector definitions:

    selectors:
      databases:
        and:
          - equals: {key: role, value: db}
          - has: env
      everything:
        all: {}
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from labelselector.dsl.build import build_selector
from labelselector.logging import get_logger
from labelselector.selector import Selector

__all__ = [
    "load_selector_schema",
    "load_selectors_yaml",
    "validate_selector_document",
]

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_selector_schema() -> Dict[str, Any]:
    """Return the packaged JSON schema for selector documents."""
    with (
        resources.files("labelselector.schemas")
        .joinpath("selector.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def validate_selector_document(data: Any) -> None:
    """Validate a parsed selector document.

    Raises:
        ValueError: If the document is not a mapping.
        jsonschema.ValidationError: If the document violates the schema.
    """
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    jsonschema.validate(data, load_selector_schema())


def load_selectors_yaml(yaml_str: str, **kwargs: Any) -> Dict[str, Selector]:
    """Load, validate and build the selectors of a YAML document.

    Keyword arguments are forwarded to each `Selector` constructor.

    Args:
        yaml_str: YAML text of the selector document.

    Returns:
        Mapping of selector name to `Selector`, in document order.

    Raises:
        ValueError: If the document is empty or not a mapping, or if two
            selector names are equal once converted to strings.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise ValueError("Selector document is empty.")
    validate_selector_document(data)

    selectors: Dict[str, Selector] = {}
    for name, definition in data["selectors"].items():
        # YAML may yield non-string keys (1, true) that collide once stringified
        key = str(name)
        if key in selectors:
            raise ValueError(
                f"Duplicate selector name '{key}': YAML key {name!r} collides "
                "with an earlier key after conversion to string"
            )
        selectors[key] = build_selector(definition, **kwargs)
    logger.debug("Loaded %d selector(s) from YAML document", len(selectors))
    return selectors
