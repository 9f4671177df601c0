"""Go source loader backed by tree-sitter."""

from __future__ import annotations

import logging
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from tagcheck.ast.nodes import COMMENT, SourceFile, node_text, package_name
from tagcheck.ast.visitor import iter_nodes
from tagcheck.models.errors import GoSyntaxError, SourceSpan

GO_LANGUAGE = Language(tree_sitter_go.language())

logger = logging.getLogger("tagcheck.parser")


def _comment_text(node: Node) -> str:
    text = node_text(node)
    # Line comments carry no line terminator, matching go/ast.
    if text.startswith("//"):
        text = text.rstrip("\r")
    return text


class GoSourceLoader:
    """Parses Go files into ``SourceFile`` values.

    tree-sitter recovers from syntax errors by inserting ERROR/MISSING nodes;
    the loader treats any such node as a failed parse and raises
    ``GoSyntaxError`` instead of handing a partial tree to the checker.
    """

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def load(self, path: Path) -> SourceFile:
        """Read and parse a Go file from disk."""
        return self.load_bytes(path.read_bytes(), str(path))

    def load_string(self, content: str, filename: str = "<string>") -> SourceFile:
        """Parse Go source held in a string."""
        return self.load_bytes(content.encode("utf-8"), filename)

    def load_bytes(self, content: bytes, filename: str) -> SourceFile:
        tree = self._parser.parse(content)
        root = tree.root_node
        if root.has_error:
            self._raise_syntax_error(root, filename)
        comments = tuple(_comment_text(n) for n in iter_nodes(root) if n.type == COMMENT)
        source = SourceFile(
            filename=filename,
            tree=tree,
            package=package_name(root),
            comments=comments,
        )
        logger.debug(
            "Parsed %s (package %s, %d comments)", filename, source.package, len(comments)
        )
        return source

    @staticmethod
    def _raise_syntax_error(root: Node, filename: str) -> None:
        for node in iter_nodes(root):
            if node.is_missing:
                message = f"missing {node.type!r}"
            elif node.is_error:
                message = "syntax error"
            else:
                continue
            line, column = node.start_point
            raise GoSyntaxError(
                message, SourceSpan(file=filename, line=line + 1, column=column + 1)
            )
        # has_error without a locatable node; report the file start
        raise GoSyntaxError("syntax error", SourceSpan(file=filename, line=1, column=1))
