"""Visitor pattern for pre-order syntax tree traversal."""

from __future__ import annotations

from collections.abc import Iterator

from tree_sitter import Node


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node under ``root`` (inclusive) in pre-order."""
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


class NodeVisitor:
    """Base visitor for Go syntax trees.

    ``walk`` visits nodes in pre-order and dispatches to ``visit_<node.type>``
    when such a method exists, falling back to ``generic_visit``.  A visit
    method returns ``True`` to descend into the node's children and ``False``
    to skip the whole subtree.
    """

    def walk(self, root: Node) -> None:
        stack: list[Node] = [root]
        while stack:
            node = stack.pop()
            if self.visit(node):
                stack.extend(reversed(node.children))

    def visit(self, node: Node) -> bool:
        """Dispatch to the appropriate visit_* method."""
        method = getattr(self, f"visit_{node.type}", self.generic_visit)
        return method(node)

    def generic_visit(self, node: Node) -> bool:
        return True
