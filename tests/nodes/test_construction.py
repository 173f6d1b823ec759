"""Construction invariants of selector nodes."""

import dataclasses

import pytest

from labelselector.nodes import All, And, Equals, Has, In, Not, NotIn, Or
from labelselector.stringset import StringSet


class TestCompositeInvariants:
    @pytest.mark.parametrize("cls", [And, Or])
    def test_empty_operands_rejected(self, cls) -> None:
        with pytest.raises(ValueError, match="at least one operand"):
            cls([])

    @pytest.mark.parametrize("cls", [And, Or])
    def test_none_operands_rejected(self, cls) -> None:
        with pytest.raises(TypeError):
            cls(None)
        with pytest.raises(TypeError, match="NoneType"):
            cls([Has("a"), None])

    def test_not_requires_node(self) -> None:
        with pytest.raises(TypeError, match="Not operand"):
            Not(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="str"):
            Not("has(a)")  # type: ignore[arg-type]

    def test_operands_frozen_into_tuple(self) -> None:
        ops = [Has("a"), Has("b")]
        node = And(ops)
        ops.append(Has("c"))
        assert node.operands == (Has("a"), Has("b"))

    def test_operands_accept_generators(self) -> None:
        node = Or(Has(k) for k in "ab")
        assert node.operands == (Has("a"), Has("b"))


class TestImmutability:
    def test_nodes_are_frozen(self) -> None:
        node = Equals("a", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = "2"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            And([node]).operands = ()  # type: ignore[misc]

    def test_set_values_normalized(self) -> None:
        assert isinstance(In("k", ["b", "a"]).values, StringSet)
        assert In("k", ["b", "a"]) == In("k", StringSet(["a", "b"]))
        assert NotIn("k", {"x"}).values == StringSet(["x"])

    def test_structural_equality_and_hashing(self) -> None:
        a = And([Equals("a", "1"), Not(Has("b"))])
        b = And((Equals("a", "1"), Not(Has("b"))))
        assert a == b
        assert hash(a) == hash(b)
        assert All() == All()
