"""Walk the declarations of a parsed Go file and build the entity model.

The walk runs in two passes: every type spec and function declaration is
collected first, then each list is classified on its own. Declarations
that match no naming convention are ignored.
"""

from __future__ import annotations

from tree_sitter import Node

from .errors import MalformedDeclarationError
from .goparser import GoFile, doc_text, node_text
from .model import EntityBuilder, ExtractionResult
from .schema_parser import parse_parameters, parse_response
from .tags import enhance_description

REQUEST_SUFFIX = "Request"
RESPONSE_SUFFIX = "Response"

# Handlers are exported methods on *api
HANDLER_RECEIVER = "api"


def collect_declarations(file: GoFile) -> tuple[list[Node], list[Node]]:
    """Split top-level declarations into type specs and function declarations."""
    type_specs: list[Node] = []
    funcs: list[Node] = []
    for decl in file.decls:
        if decl.type == "type_declaration":
            type_specs.extend(c for c in decl.named_children if c.type in ("type_spec", "type_alias"))
        elif decl.type in ("function_declaration", "method_declaration"):
            funcs.append(decl)
    return type_specs, funcs


def classify_type_spec(builder: EntityBuilder, spec: Node) -> None:
    name = node_text(spec.child_by_field_name("name"))
    type_node = spec.child_by_field_name("type")
    if name.endswith(REQUEST_SUFFIX):
        entity = name[:-len(REQUEST_SUFFIX)]
        if type_node.type != "struct_type":
            raise MalformedDeclarationError(name, node_text(type_node))
        builder.get_or_create(entity)
        for param in parse_parameters(name, type_node):
            builder.add_parameter(entity, param)
    elif name.endswith(RESPONSE_SUFFIX):
        entity = name[:-len(RESPONSE_SUFFIX)]
        builder.set_response(entity, parse_response(name, type_node))


def is_handler(decl: Node) -> bool:
    """True for exported methods whose receiver is *api."""
    if decl.type != "method_declaration":
        return False
    params = [
        p for p in decl.child_by_field_name("receiver").named_children
        if p.type == "parameter_declaration"
    ]
    if len(params) != 1:
        return False
    recv = params[0].child_by_field_name("type")
    if recv.type != "pointer_type":
        return False
    target = recv.named_children[0]
    if target.type != "type_identifier" or node_text(target) != HANDLER_RECEIVER:
        return False
    return node_text(decl.child_by_field_name("name"))[:1].isupper()


def classify_func_decl(builder: EntityBuilder, decl: Node) -> None:
    if not is_handler(decl):
        return
    name = node_text(decl.child_by_field_name("name"))
    builder.add_endpoint(name, enhance_description(doc_text(decl), name))


def walk(file: GoFile) -> ExtractionResult:
    """Build the entity model for one file.

    ExtractionError subclasses propagate unchanged; nothing is returned
    for a file with an unsupported declaration.
    """
    builder = EntityBuilder()
    type_specs, funcs = collect_declarations(file)
    for spec in type_specs:
        classify_type_spec(builder, spec)
    for decl in funcs:
        classify_func_decl(builder, decl)
    return builder.finalize()
