"""Tests for Go type expression -> generator type mapping."""

import pytest

from gocodegen.errors import UnsupportedTypeError
from gocodegen.goparser import parse_source
from gocodegen.type_mapper import map_field_type


def _type(expression: str):
    """Parse `type T <expression>` and return the type node."""
    file = parse_source(f"package api\n\ntype T {expression}\n")
    return file.decls[0].named_children[0].child_by_field_name("type")


class TestMapFieldType:
    """Test each supported expression shape."""

    def test_identifier_passes_through(self):
        assert map_field_type(_type("string")) == "string"
        assert map_field_type(_type("Card")) == "Card"

    def test_pointer_to_identifier(self):
        assert map_field_type(_type("*Card")) == "Card"

    def test_pointer_to_qualified_is_object(self):
        assert map_field_type(_type("*model.Card")) == "Object"

    def test_pointer_to_pointer_is_object(self):
        assert map_field_type(_type("**int")) == "Object"

    def test_global_id_is_uuid(self):
        assert map_field_type(_type("globalid.ID")) == "UUID"

    def test_reaction_type_is_string(self):
        assert map_field_type(_type("model.ReactionType")) == "string"

    def test_model_composites_are_objects(self):
        for name in ("CardsResponse", "CardResponse", "Draft"):
            assert map_field_type(_type(f"model.{name}")) == "Object"

    def test_other_qualified_name_passes_through(self):
        assert map_field_type(_type("time.Time")) == "time.Time"
        assert map_field_type(_type("model.Card")) == "model.Card"

    def test_slices_and_arrays(self):
        assert map_field_type(_type("[]string")) == "Array"
        assert map_field_type(_type("[]*model.Card")) == "Array"
        assert map_field_type(_type("[16]byte")) == "Array"
        assert map_field_type(_type("[N*2]byte")) == "Array"


@pytest.mark.parametrize("expression,kind", [
    ("map[string]int", "map_type"),
    ("chan int", "channel_type"),
    ("func() error", "function_type"),
    ("struct{}", "struct_type"),
    ("interface{}", "interface_type"),
    ("Page[Card]", "generic_type"),
])
def test_unsupported_shapes_raise(expression, kind):
    with pytest.raises(UnsupportedTypeError) as excinfo:
        map_field_type(_type(expression))
    assert excinfo.value.kind == kind
    assert excinfo.value.expression == expression


def test_unsupported_message_names_expression():
    with pytest.raises(UnsupportedTypeError, match=r"Unmapped type map_type map\[string\]int"):
        map_field_type(_type("map[string]int"))
