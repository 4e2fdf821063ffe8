"""Tests for the entity model and its builder."""

import pytest

from gocodegen.model import EntityBuilder, Parameter, Response, ResponseField


def _param(field: str, tag: str = "") -> Parameter:
    return Parameter(field=field, type="string", description="", tag=tag or field.lower())


class TestEntityBuilder:
    """Test entity correlation and the response attachment rule."""

    def test_get_or_create_returns_same_entity(self):
        builder = EntityBuilder()
        assert builder.get_or_create("CreateWidget") is builder.get_or_create("CreateWidget")

    def test_parameters_keep_order_and_index(self):
        builder = EntityBuilder()
        for name in ("Name", "Color", "Size"):
            builder.add_parameter("CreateWidget", _param(name))
        entity = builder.get_or_create("CreateWidget")
        assert [p.field for p in entity.parameters] == ["Name", "Color", "Size"]
        assert entity.parameter_by_name["Color"] is entity.parameters[1]

    def test_duplicate_parameter_overwrites_index_only(self):
        builder = EntityBuilder()
        builder.add_parameter("CreateWidget", _param("Name", "first"))
        builder.add_parameter("CreateWidget", _param("Name", "second"))
        entity = builder.get_or_create("CreateWidget")
        assert [p.tag for p in entity.parameters] == ["first", "second"]
        assert entity.parameter_by_name["Name"].tag == "second"

    def test_empty_object_response_is_not_attached(self):
        builder = EntityBuilder()
        builder.set_response("Ping", Response(type="Object"))
        assert builder.get_or_create("Ping").response is None

    def test_empty_object_response_keeps_previous(self):
        builder = EntityBuilder()
        full = Response(type="Object", fields=[ResponseField(field="id", type="UUID")])
        builder.set_response("Get", full)
        builder.set_response("Get", Response(type="Object"))
        assert builder.get_or_create("Get").response is full

    def test_last_non_trivial_response_wins(self):
        builder = EntityBuilder()
        builder.set_response("List", Response(type="Object", fields=[ResponseField(field="id", type="UUID")]))
        builder.set_response("List", Response(type="Array"))
        assert builder.get_or_create("List").response == Response(type="Array")

    def test_scalar_response_attached_without_fields(self):
        builder = EntityBuilder()
        builder.set_response("Count", Response(type="int"))
        assert builder.get_or_create("Count").response.type == "int"

    def test_endpoints_define_render_order(self):
        builder = EntityBuilder()
        builder.add_parameter("Orphan", _param("Name"))
        builder.add_endpoint("B", "Second.")
        builder.add_endpoint("A", "First.")
        result = builder.finalize()
        assert [e.name for e in result.entities] == ["B", "A"]
        assert set(result.entities_by_name) == {"Orphan", "A", "B"}
        assert result.entities_by_name["A"].description == "First."

    def test_endpoint_added_once(self):
        builder = EntityBuilder()
        builder.add_endpoint("A", "one")
        builder.add_endpoint("A", "two")
        result = builder.finalize()
        assert len(result.entities) == 1
        assert result.entities[0].description == "two"

    def test_finalize_closes_builder(self):
        builder = EntityBuilder()
        builder.finalize()
        with pytest.raises(RuntimeError):
            builder.get_or_create("Late")
        with pytest.raises(RuntimeError):
            builder.finalize()
