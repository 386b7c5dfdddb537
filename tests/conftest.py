# tests/conftest.py
"""Pytest configuration with shared fixtures for the simedit core tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from simedit.core.Document import Document
from simedit.core.FileType import FileType
from simedit.core.Highlighter import HighlightingOptions
from simedit.core.Row import Row


@pytest.fixture
def rust_options() -> HighlightingOptions:
    """Rule set of the Rust profile, which enables every classification."""
    return FileType.from_profile("rust").options


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Build an in-memory document from plain lines and highlight it.

    Returns:
        Callable: ``factory(lines, file_name=None)`` returning a clean document.
    """

    def factory(lines: list[str], file_name: Optional[str] = None) -> Document:
        document = Document(rows=[Row(line) for line in lines], file_name=file_name)
        document.highlight()
        return document

    return factory


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write raw bytes to a file inside the test's temporary directory."""

    def writer(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return writer


@pytest.fixture
def sample_lines() -> list[str]:
    """A small Rust snippet with a block comment spanning two rows."""
    return [
        "/* start",
        "still in comment */",
        "fn main() {",
        '    let s = "hi"; // greet',
        "}",
    ]
