"""Tests for YAML selector documents and schema validation."""

import jsonschema
import pytest

from labelselector.dsl import (
    load_selector_schema,
    load_selectors_yaml,
    validate_selector_document,
)
from labelselector.hashing import make_unique_id

DOCUMENT = """
selectors:
  databases:
    and:
      - equals: {key: role, value: db}
      - in: {key: tier, values: [silver, gold]}
  not_legacy:
    not:
      has: legacy
  everything:
    all: {}
"""


def test_load_selectors_yaml_builds_named_selectors() -> None:
    selectors = load_selectors_yaml(DOCUMENT)
    assert list(selectors) == ["databases", "not_legacy", "everything"]

    db = selectors["databases"]
    assert str(db) == '(role == "db" && tier in {"gold", "silver"})'
    assert db.evaluate({"role": "db", "tier": "gold"}) is True
    assert db.evaluate({"role": "db"}) is False

    assert str(selectors["not_legacy"]) == "!has(legacy)"
    assert selectors["everything"].evaluate({}) is True


def test_loaded_ids_match_directly_built_selectors() -> None:
    from labelselector import And, Equals, In, Selector

    loaded = load_selectors_yaml(DOCUMENT)["databases"]
    direct = Selector(And([Equals("role", "db"), In("tier", ["gold", "silver"])]))
    assert loaded.unique_id() == direct.unique_id()
    assert loaded == direct


def test_selector_kwargs_forwarded() -> None:
    selectors = load_selectors_yaml(
        "selectors: {x: {has: a}}", deriver=lambda p, c: f"{p}/{c}"
    )
    assert selectors["x"].unique_id() == "s/has(a)"


def test_schema_is_packaged() -> None:
    schema = load_selector_schema()
    assert schema["required"] == ["selectors"]
    assert "node" in schema["$defs"]


@pytest.mark.parametrize(
    "text",
    [
        "selectors: {x: {and: []}}",
        "selectors: {x: {equals: {key: a}}}",
        "selectors: {x: {equals: {key: a, value: 1}}}",
        "selectors: {x: {has: a, all: {}}}",
        "selectors: {x: {matches: a}}",
        "selectors: {x: {has: a}}\nextra: 1",
        "other: {}",
    ],
)
def test_schema_violations_raise(text: str) -> None:
    with pytest.raises(jsonschema.ValidationError):
        load_selectors_yaml(text)


def test_empty_and_non_mapping_documents() -> None:
    with pytest.raises(ValueError, match="empty"):
        load_selectors_yaml("")
    with pytest.raises(ValueError, match="dictionary at top-level"):
        load_selectors_yaml("- a\n- b\n")


@pytest.mark.parametrize(
    "text",
    [
        "selectors:\n  1: {has: a}\n  '1': {has: b}\n",
        "selectors:\n  yes: {has: a}\n  'True': {has: b}\n",
    ],
)
def test_names_colliding_after_str_conversion_raise(text: str) -> None:
    with pytest.raises(ValueError, match="Duplicate selector name"):
        load_selectors_yaml(text)


def test_validate_selector_document_accepts_valid() -> None:
    validate_selector_document({"selectors": {"x": {"has": "a"}}})


def test_unquoted_boolean_value_is_rejected() -> None:
    # YAML 1.1 turns bare yes/no into booleans; label values must be quoted
    with pytest.raises(jsonschema.ValidationError):
        load_selectors_yaml("selectors: {x: {equals: {key: a, value: yes}}}")
    sel = load_selectors_yaml("selectors: {x: {equals: {key: a, value: 'yes'}}}")["x"]
    assert sel.unique_id() == make_unique_id("s", 'a == "yes"')
