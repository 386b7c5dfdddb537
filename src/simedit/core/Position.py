# simedit/core/Position.py
"""Addressing values shared by the row and document layers.

`Position` is a plain (column, row) pair; it owns nothing and is never
validated on construction. Whether it is valid depends on the document it is
applied to, and document operations treat out-of-range positions as no-ops.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A (column, row) location inside a document, both 0-based."""

    x: int = 0
    y: int = 0


class SearchDirection(Enum):
    """Scan order used by `Row.find` and `Document.find`."""

    FORWARD = "forward"
    BACKWARD = "backward"
