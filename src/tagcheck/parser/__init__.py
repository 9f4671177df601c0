"""Go source discovery and parsing."""

from tagcheck.parser.discovery import discover_go_files
from tagcheck.parser.loader import GO_LANGUAGE, GoSourceLoader

__all__ = [
    "GO_LANGUAGE",
    "GoSourceLoader",
    "discover_go_files",
]
