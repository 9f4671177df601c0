"""Struct tag checking: exemption directives and the traversal engine."""

from tagcheck.checker.engine import TagChecker, check, check_file
from tagcheck.checker.exemptions import collect_exemptions, parse_directive, parse_directives

__all__ = [
    "TagChecker",
    "check",
    "check_file",
    "collect_exemptions",
    "parse_directive",
    "parse_directives",
]
