"""Extract parameters and response shapes from Go struct declarations.

Handles:
- Request struct fields -> Parameter (name, mapped type, doc, json key)
- Response structs -> Object response with one field per json key
- Non-struct responses (slices, named and qualified types) -> scalar response
"""

from __future__ import annotations

from tree_sitter import Node

from .errors import MissingFieldNameError
from .goparser import doc_text, node_text, struct_fields
from .model import Parameter, Response, ResponseField
from .tags import parse_tag
from .type_mapper import map_field_type


def _raw_tag(field: Node) -> str | None:
    tag = field.child_by_field_name("tag")
    return node_text(tag) if tag is not None else None


def parse_parameters(type_name: str, struct: Node) -> list[Parameter]:
    """Build one Parameter per field of a Request struct, in field order."""
    params: list[Parameter] = []
    for field in struct_fields(struct):
        names = field.children_by_field_name("name")
        if not names:
            raise MissingFieldNameError(type_name)
        name = node_text(names[0])
        tag = parse_tag(_raw_tag(field), f"{type_name}.{name}")
        params.append(Parameter(
            field=name,
            type=map_field_type(field.child_by_field_name("type")),
            description=doc_text(field),
            tag=tag,
        ))
    return params


def parse_response(type_name: str, node: Node) -> Response:
    """Describe the shape of a Response type declaration."""
    if node.type != "struct_type":
        return Response(type=map_field_type(node))

    fields: list[ResponseField] = []
    for field in struct_fields(node):
        names = field.children_by_field_name("name")
        label = node_text(names[0] if names else field.child_by_field_name("type"))
        fields.append(ResponseField(
            field=parse_tag(_raw_tag(field), f"{type_name}.{label}"),
            type=map_field_type(field.child_by_field_name("type")),
            description=doc_text(field),
        ))
    return Response(type="Object", fields=fields)
