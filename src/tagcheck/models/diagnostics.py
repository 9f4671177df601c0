"""Diagnostic value objects produced by the tag checker."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, RootModel


class Diagnostic(BaseModel):
    """A named struct field without a tag.

    Renders as ``file:field:line:column``, the format CI logs and editors expect.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    field_name: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file_name}:{self.field_name}:{self.line}:{self.column}"


class DiagnosticList(RootModel[list[Diagnostic]]):
    """Diagnostics of a single file, in the order the traversal found them."""

    root: list[Diagnostic] = []

    def __iter__(self) -> Iterator[Diagnostic]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Diagnostic:
        return self.root[index]

    def __bool__(self) -> bool:
        return bool(self.root)

    def render(self) -> str:
        """Newline-joined diagnostics, without a trailing newline."""
        return "\n".join(str(d) for d in self.root)

    def __str__(self) -> str:
        return self.render()


class CheckReport(RootModel[dict[str, DiagnosticList]]):
    """Aggregated result of a run: filename -> non-empty DiagnosticList."""

    root: dict[str, DiagnosticList] = {}

    @property
    def failed(self) -> bool:
        return bool(self.root)

    @property
    def filenames(self) -> list[str]:
        return sorted(self.root)

    @property
    def total(self) -> int:
        return sum(len(diags) for diags in self.root.values())

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, filename: object) -> bool:
        return filename in self.root

    def __getitem__(self, filename: str) -> DiagnosticList:
        return self.root[filename]

    def render_lines(self) -> list[str]:
        """One rendered block per file, sorted by filename."""
        return [self.root[name].render() for name in self.filenames]
