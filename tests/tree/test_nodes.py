"""Tests for JsonNode and JsonKind.

Covers:
- JsonKind has exactly six members with lowercase string values
- label gives the capitalised name used in mismatch messages
- JsonNode is frozen; default containers are independent per instance
- to_python / to_json / display conversions, numbers kept verbatim
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_token_match.tree.builder import TreeBuilder
from json_token_match.tree.nodes import JsonKind, JsonNode


@pytest.fixture
def builder() -> TreeBuilder:
    return TreeBuilder()


class TestJsonKind:
    def test_has_exactly_six_members(self) -> None:
        assert len(list(JsonKind)) == 6

    def test_values_are_lowercase_names(self) -> None:
        assert [k.value for k in JsonKind] == [
            "object",
            "array",
            "string",
            "number",
            "boolean",
            "null",
        ]

    def test_is_str_subclass(self) -> None:
        assert isinstance(JsonKind.OBJECT, str)

    @pytest.mark.parametrize(
        ("kind", "label"),
        [
            (JsonKind.OBJECT, "Object"),
            (JsonKind.ARRAY, "Array"),
            (JsonKind.STRING, "String"),
            (JsonKind.NUMBER, "Number"),
            (JsonKind.BOOLEAN, "Boolean"),
            (JsonKind.NULL, "Null"),
        ],
    )
    def test_label(self, kind: JsonKind, label: str) -> None:
        assert kind.label == label


class TestJsonNode:
    def test_frozen(self) -> None:
        node = JsonNode(JsonKind.STRING, "x")
        with pytest.raises(FrozenInstanceError):
            node.value = "y"  # type: ignore[misc]

    def test_default_members_are_independent(self) -> None:
        a = JsonNode(JsonKind.OBJECT)
        b = JsonNode(JsonKind.OBJECT)
        assert a.members == {}
        assert a.members is not b.members

    def test_default_items_empty(self) -> None:
        assert JsonNode(JsonKind.ARRAY).items == ()

    def test_equality_by_value(self) -> None:
        assert JsonNode(JsonKind.NUMBER, "1") == JsonNode(JsonKind.NUMBER, "1")
        assert JsonNode(JsonKind.NUMBER, "1") != JsonNode(JsonKind.NUMBER, "1.0")


class TestToPython:
    def test_nested_document(self, builder: TreeBuilder) -> None:
        tree = builder.parse('{"a": [1, 2.5, "x", true, null], "b": {}}')
        assert tree.to_python() == {"a": [1, 2.5, "x", True, None], "b": {}}

    def test_integer_literal_is_int(self, builder: TreeBuilder) -> None:
        value = builder.parse("42").to_python()
        assert value == 42
        assert type(value) is int

    def test_fraction_literal_is_float(self, builder: TreeBuilder) -> None:
        value = builder.parse("1.0").to_python()
        assert type(value) is float

    def test_exponent_literal_is_float(self, builder: TreeBuilder) -> None:
        assert builder.parse("1e3").to_python() == 1000.0


class TestToJson:
    def test_numbers_verbatim(self, builder: TreeBuilder) -> None:
        tree = builder.parse('{ "n": 1.0, "m": 1E3 }')
        assert tree.to_json() == '{"n":1.0,"m":1E3}'

    def test_array_and_scalars(self, builder: TreeBuilder) -> None:
        tree = builder.parse('[true, false, null, "q\\"uote"]')
        assert tree.to_json() == '[true,false,null,"q\\"uote"]'

    def test_member_order_preserved(self, builder: TreeBuilder) -> None:
        tree = builder.parse('{"z": 1, "a": 2}')
        assert tree.to_json() == '{"z":1,"a":2}'


class TestDisplay:
    def test_string_is_bare_content(self) -> None:
        assert JsonNode(JsonKind.STRING, "abc-123").display() == "abc-123"

    def test_number_is_source_text(self) -> None:
        assert JsonNode(JsonKind.NUMBER, "2.50").display() == "2.50"

    def test_object_is_json(self, builder: TreeBuilder) -> None:
        assert builder.parse('{"a": "b"}').display() == '{"a":"b"}'
