"""Tests for document node dataclasses."""

import dataclasses

import pytest

from pliegue.nodes import NIL, DOC_TYPES, Break, Cons, Group, Nest, Nil, Text, is_doc


class TestNodeDataclasses:
    def test_nodes_are_frozen(self) -> None:
        node = Text("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "bye"  # type: ignore[misc]

    def test_nodes_use_slots(self) -> None:
        for cls in DOC_TYPES:
            assert hasattr(cls, "__slots__"), cls.__name__

    def test_structural_equality(self) -> None:
        a = Group(Nest(Cons((Text("a"), Break(), Text("b"))), 2))
        b = Group(Nest(Cons((Text("a"), Break(), Text("b"))), 2))
        assert a == b
        assert hash(a) == hash(b)

    def test_break_defaults_to_space(self) -> None:
        assert Break().content == " "

    def test_nil_instances_are_equal(self) -> None:
        assert Nil() == NIL

    def test_documents_usable_as_dict_keys(self) -> None:
        cache = {Group(Text("x")): "x"}
        assert cache[Group(Text("x"))] == "x"


class TestIsDoc:
    @pytest.mark.parametrize(
        "value",
        [NIL, Text("a"), Break(""), Cons(()), Nest(NIL, 2), Group(NIL)],
    )
    def test_variants_are_docs(self, value: object) -> None:
        assert is_doc(value)

    @pytest.mark.parametrize("value", ["text", 3, None, ("a",), object()])
    def test_other_values_are_not_docs(self, value: object) -> None:
        assert not is_doc(value)
