# src/simedit/core/__init__.py
"""Public facade for simedit.core: re-export main classes from CamelCase modules.

Keeps one-class-per-file module names (Row.py, Document.py, ...),
but provides flat imports for convenience and stability.
"""

from .Document import Document, DocumentIOError  # noqa: F401
from .FileType import FileType  # noqa: F401
from .Highlighter import HighlightingOptions, HighlightType, highlight_line  # noqa: F401
from .Position import Position, SearchDirection  # noqa: F401
from .Row import Row  # noqa: F401


__all__ = [
    "Document",
    "DocumentIOError",
    "FileType",
    "HighlightingOptions",
    "HighlightType",
    "highlight_line",
    "Position",
    "SearchDirection",
    "Row",
]
