"""Tag-check traversal: flags named struct fields that carry no tag."""

from __future__ import annotations

import logging

from tree_sitter import Node

from tagcheck.ast.nodes import SourceFile, field_names, has_tag, struct_decl_name, struct_fields
from tagcheck.ast.visitor import NodeVisitor
from tagcheck.checker.exemptions import collect_exemptions
from tagcheck.models.diagnostics import Diagnostic, DiagnosticList
from tagcheck.settings import DEFAULT_MARKER

logger = logging.getLogger("tagcheck.checker")


class TagChecker(NodeVisitor):
    """Collects one ``Diagnostic`` per untagged named field of a file.

    Exempted struct declarations are pruned during the walk, so any struct
    type nested inside them is skipped as well.
    """

    def __init__(self, source: SourceFile, exemptions: frozenset[str]) -> None:
        self._source = source
        self._exemptions = exemptions
        self._found: list[Diagnostic] = []

    def run(self) -> DiagnosticList:
        self._found = []
        self.walk(self._source.root)
        return DiagnosticList(list(self._found))

    def _visit_type_decl(self, node: Node) -> bool:
        name = struct_decl_name(node)
        if name is not None and name in self._exemptions:
            logger.debug("Skipping exempt struct %s in %s", name, self._source.filename)
            return False
        return True

    visit_type_spec = _visit_type_decl
    visit_type_alias = _visit_type_decl

    def visit_struct_type(self, node: Node) -> bool:
        for field in struct_fields(node):
            if has_tag(field):
                continue
            names = field_names(field)
            # embedded field
            if not names:
                continue
            span = self._source.position(field)
            self._found.append(
                Diagnostic(
                    file_name=span.file,
                    field_name=names[0],
                    line=span.line,
                    column=span.column,
                )
            )
        return True


def check(source: SourceFile, exemptions: frozenset[str]) -> DiagnosticList:
    """Untagged named fields of ``source``, in pre-order traversal order."""
    return TagChecker(source, exemptions).run()


def check_file(source: SourceFile, marker: str = DEFAULT_MARKER) -> DiagnosticList:
    """Collect the file's exemptions, then check it."""
    diagnostics = check(source, collect_exemptions(source, marker))
    if diagnostics:
        logger.debug("%s: %d untagged fields", source.filename, len(diagnostics))
    return diagnostics
