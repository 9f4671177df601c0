"""Pydantic value models for the struct tag checker."""

from tagcheck.models.diagnostics import CheckReport, Diagnostic, DiagnosticList
from tagcheck.models.errors import (
    GoSyntaxError,
    SourceDiscoveryError,
    SourceSpan,
    TagCheckError,
)

__all__ = [
    "CheckReport",
    "Diagnostic",
    "DiagnosticList",
    "GoSyntaxError",
    "SourceDiscoveryError",
    "SourceSpan",
    "TagCheckError",
]
