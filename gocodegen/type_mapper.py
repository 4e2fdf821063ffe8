"""Map Go type expressions to the generator's type vocabulary.

The vocabulary is deliberately small: scalar and named types pass through,
pointers collapse to their target, slices and arrays become ``Array``,
composite model types become ``Object`` and global IDs become ``UUID``.
"""

from __future__ import annotations

from tree_sitter import Node

from .errors import UnsupportedTypeError
from .goparser import node_text

# Qualified names with a fixed mapping; other qualified names pass through
_QUALIFIED_TYPES: dict[str, str] = {
    "globalid.ID": "UUID",
    "model.ReactionType": "string",
    "model.CardsResponse": "Object",
    "model.CardResponse": "Object",
    "model.Draft": "Object",
}


def map_field_type(node: Node) -> str:
    """Return the generator type name for a Go type node.

    Raises UnsupportedTypeError for maps, channels, function types, inline
    structs, interfaces, generic instantiations and any other shape without
    a mapping.
    """
    kind = node.type
    if kind == "type_identifier":
        return node_text(node)
    if kind == "pointer_type":
        target = node.named_children[0]
        if target.type == "type_identifier":
            return node_text(target)
        return "Object"
    if kind == "qualified_type":
        package = node_text(node.child_by_field_name("package"))
        name = f"{package}.{node_text(node.child_by_field_name('name'))}"
        return _QUALIFIED_TYPES.get(name, name)
    if kind in ("slice_type", "array_type"):
        # element type is not preserved
        return "Array"
    raise UnsupportedTypeError(kind, node_text(node))
