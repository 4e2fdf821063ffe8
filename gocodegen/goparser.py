"""Parse Go source with tree-sitter and read documentation comments.

The tree-sitter grammar is more permissive than the Go compiler: it accepts
statements at the top level and a file without a package clause, and it
recovers from syntax errors instead of stopping. parse_source rejects all
three so that extraction only ever sees a well-formed file.

Doc comments follow go/parser: a lead comment is the comment group ending
on the line directly before the node, minus any comment that trails the
previous token on its line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .errors import GoSyntaxError

GO_LANGUAGE = Language(tree_sitter_go.language())

_TOP_LEVEL = {
    "package_clause",
    "import_declaration",
    "const_declaration",
    "var_declaration",
    "type_declaration",
    "function_declaration",
    "method_declaration",
    "comment",
}

# Statement terminators are anonymous tokens between declarations
_TERMINATORS = {"\n", "\0"}

# //go:generate, //line, //export and friends are not documentation
_DIRECTIVE = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")


@dataclass
class GoFile:
    package: str
    filename: str
    root: Node

    @property
    def decls(self) -> list[Node]:
        """Top-level declarations after the package clause, in source order."""
        return [n for n in self.root.named_children if n.type not in ("package_clause", "comment")]


def node_text(node: Node | None) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _first_error(node: Node) -> Node:
    for child in node.children:
        if child.type == "ERROR" or child.is_missing:
            return child
        if child.has_error:
            return _first_error(child)
    return node


def _describe_error(node: Node) -> str:
    if node.is_missing:
        return f"expected {node.type!r}"
    snippet = node_text(node).split("\n", 1)[0].strip()
    if not snippet:
        return "syntax error"
    return f"syntax error near {snippet[:40]!r}"


def parse_source(source: str, filename: str = "<source>") -> GoFile:
    """Parse Go source text; raises GoSyntaxError for anything the compiler would reject."""
    tree = Parser(GO_LANGUAGE).parse(source.encode("utf-8"))
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root)
        raise GoSyntaxError(_describe_error(bad), filename, _line(bad))

    decls = [n for n in root.named_children if n.type != "comment"]
    if not decls or decls[0].type != "package_clause":
        raise GoSyntaxError("expected 'package'", filename, _line(decls[0]) if decls else 1)
    for node in decls:
        if node.type not in _TOP_LEVEL:
            raise GoSyntaxError("non-declaration statement outside function body", filename, _line(node))

    package = node_text(decls[0].named_children[0])
    return GoFile(package=package, filename=filename, root=root)


def lead_comment(node: Node) -> list[Node]:
    """Return the comment nodes documenting node, first to last."""
    group: list[Node] = []
    line = node.start_point[0]
    sibling = node.prev_sibling
    while sibling is not None:
        if sibling.type in _TERMINATORS:
            sibling = sibling.prev_sibling
            continue
        if sibling.type != "comment":
            break
        end = sibling.end_point[0]
        if end < line - 1 or (not group and end != line - 1):
            break
        group.append(sibling)
        line = sibling.start_point[0]
        sibling = sibling.prev_sibling

    if sibling is not None and sibling.type != "comment":
        # a comment on the previous token's line belongs to that token
        group = [c for c in group if c.start_point[0] > sibling.end_point[0]]
    group.reverse()
    return group


def comment_text(comments: list[Node]) -> str:
    """Return the text of a comment group the way go/ast's CommentGroup.Text does.

    Comment markers and directive lines are removed, trailing space is
    stripped from every line, leading and trailing blank lines are
    dropped and runs of blank lines collapse into one. A non-empty
    result always ends with a newline.
    """
    lines: list[str] = []
    for comment in comments:
        c = node_text(comment)
        if c.startswith("//"):
            c = c[2:]
            if c.startswith(" "):
                c = c[1:]
            elif c and _DIRECTIVE.match(c):
                continue
        else:
            c = c[2:-2]
        lines.extend(line.rstrip() for line in c.split("\n"))

    kept: list[str] = []
    for line in lines:
        if line or (kept and kept[-1]):
            kept.append(line)
    if kept and kept[-1]:
        kept.append("")
    return "\n".join(kept)


def doc_text(node: Node) -> str:
    """Doc comment text of a declaration or field; empty when there is none."""
    return comment_text(lead_comment(node))


def struct_fields(struct: Node) -> list[Node]:
    """The field_declaration nodes of a struct_type, in declaration order."""
    fields: list[Node] = []
    for body in struct.named_children:
        if body.type == "field_declaration_list":
            fields.extend(c for c in body.named_children if c.type == "field_declaration")
    return fields
