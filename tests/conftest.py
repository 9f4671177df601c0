"""Shared test fixtures for the struct tag checker."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagcheck.parser.loader import GoSourceLoader
from tagcheck.service.runner import TagCheckRunner

FIXTURES_DIR = Path(__file__).parent / "fixtures"
MODELS_DIR = FIXTURES_DIR / "models"
BROKEN_DIR = FIXTURES_DIR / "broken"


@pytest.fixture
def loader() -> GoSourceLoader:
    return GoSourceLoader()


@pytest.fixture
def runner(loader: GoSourceLoader) -> TagCheckRunner:
    return TagCheckRunner(loader=loader)


# One struct, one untagged field: Name at line 3, column 19.
SINGLE_STRUCT_GO = """\
package sample

type Foo struct { Name string }
"""

SAMPLE_GO = """\
package sample

import "encoding/json"

// notagcheck:Legacy

type Account struct {
\tID      int    `json:"id"`
\tOwner   string
\tBalance float64 `json:"balance"`
\t*Base
\tjson.Marshaler
}

type Legacy struct {
\tblob []byte
\tMeta struct {
\t\tVersion int
\t}
}

type Base struct {
\tCreated int64
}
"""
