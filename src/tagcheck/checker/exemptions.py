"""Exemption directives: ``// notagcheck:Foo,Bar`` comments that switch off the check."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tagcheck.ast.nodes import SourceFile
from tagcheck.settings import DEFAULT_MARKER

logger = logging.getLogger("tagcheck.checker")


def parse_directive(text: str, marker: str = DEFAULT_MARKER) -> list[str]:
    """Struct names listed by a single comment.

    Everything after the first ``:`` that follows the marker is split on
    commas.  Names are kept exactly as written (no whitespace trimming) and
    empty entries are dropped.  A comment with the marker but no colon yields
    no names.
    """
    start = text.find(marker)
    if start < 0:
        return []
    colon = text.find(":", start + len(marker))
    if colon < 0:
        logger.debug("Ignoring %s directive without ':' in %r", marker, text)
        return []
    return [name for name in text[colon + 1 :].split(",") if name]


def parse_directives(comments: Iterable[str], marker: str = DEFAULT_MARKER) -> frozenset[str]:
    """Union of the names from every directive comment."""
    names: set[str] = set()
    for text in comments:
        names.update(parse_directive(text, marker))
    return frozenset(names)


def collect_exemptions(source: SourceFile, marker: str = DEFAULT_MARKER) -> frozenset[str]:
    """Struct names exempted by the comments of one file."""
    exemptions = parse_directives(source.comments, marker)
    if exemptions:
        logger.debug("%s exempts %s", source.filename, ", ".join(sorted(exemptions)))
    return exemptions
