"""Structured error models with Go source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in Go source for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class TagCheckError(Exception):
    """Base class for failures that abort a tag-check run."""


class SourceDiscoveryError(TagCheckError):
    """Raised when the requested source path cannot be scanned."""


class GoSyntaxError(TagCheckError):
    """Raised when a Go file cannot be turned into a clean syntax tree.

    Carries the span of the first offending node so the CLI can point at it.
    """

    def __init__(self, message: str, span: SourceSpan) -> None:
        super().__init__(f"{span}: {message}")
        self.span = span
