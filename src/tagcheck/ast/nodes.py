"""Read-only views over tree-sitter Go syntax nodes."""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Node, Tree

from tagcheck.models.errors import SourceSpan

# tree-sitter-go node kinds the checker cares about
COMMENT = "comment"
TYPE_SPEC = "type_spec"
TYPE_ALIAS = "type_alias"
STRUCT_TYPE = "struct_type"
FIELD_DECLARATION_LIST = "field_declaration_list"
FIELD_DECLARATION = "field_declaration"
PACKAGE_CLAUSE = "package_clause"
PACKAGE_IDENTIFIER = "package_identifier"

TYPE_DECL_KINDS = frozenset({TYPE_SPEC, TYPE_ALIAS})


def node_text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class SourceFile:
    """A parsed Go file: syntax tree, comments and a position resolver.

    Built by ``GoSourceLoader``; the checker only reads it.
    """

    filename: str
    tree: Tree
    package: str | None = None
    comments: tuple[str, ...] = ()

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def position(self, node: Node) -> SourceSpan:
        """Resolve a node to 1-based line and byte column, like the Go toolchain."""
        line, column = node.start_point
        end_line, end_column = node.end_point
        return SourceSpan(
            file=self.filename,
            line=line + 1,
            column=column + 1,
            end_line=end_line + 1,
            end_column=end_column + 1,
        )


def struct_decl_name(node: Node) -> str | None:
    """Declared name of ``type X struct{...}`` (or ``type X = struct{...}``).

    Returns ``None`` for any node that is not a named struct declaration.
    """
    if node.type not in TYPE_DECL_KINDS:
        return None
    type_node = node.child_by_field_name("type")
    if type_node is None or type_node.type != STRUCT_TYPE:
        return None
    return node_text(node.child_by_field_name("name"))


def struct_fields(struct_node: Node) -> list[Node]:
    """Field declarations of a struct type, in declaration order."""
    fields: list[Node] = []
    for child in struct_node.named_children:
        if child.type == FIELD_DECLARATION_LIST:
            fields.extend(c for c in child.named_children if c.type == FIELD_DECLARATION)
    return fields


def field_names(field_node: Node) -> list[str]:
    """Declared names of a field; empty for an embedded field."""
    return [node_text(n) for n in field_node.children_by_field_name("name")]


def has_tag(field_node: Node) -> bool:
    return field_node.child_by_field_name("tag") is not None


def package_name(root: Node) -> str | None:
    for child in root.named_children:
        if child.type == PACKAGE_CLAUSE:
            for ident in child.named_children:
                if ident.type == PACKAGE_IDENTIFIER:
                    return node_text(ident)
    return None
