# simedit/core/Row.py
"""simedit.core.Row.py
====================
One editable line of a document and its per-character classification.

All offsets are character (code point) offsets, never byte offsets. Row
operations are permissive: an offset past the end degrades to an append (for
`insert`) or a no-op (for `delete`) instead of raising, because the document
layer already decided whether the position is meaningful.

The highlight buffer goes stale after every edit and stays that way until
`highlight()` is called again; `Document` re-highlights after each mutation.
"""

from typing import Optional

from wcwidth import wcswidth, wcwidth

from simedit.core.Highlighter import HighlightingOptions, HighlightType, highlight_line
from simedit.core.Position import SearchDirection


DEFAULT_TAB_SIZE = 4


class Row:
    """A single line of text without its terminating newline.

    Attributes:
        ends_in_comment (bool): Continuation flag produced by the last
            highlight pass; True when this row ends inside an unterminated
            multi-line comment.
    """

    def __init__(self, text: str = "") -> None:
        self._string = text
        self._len = len(text)
        self._highlighting: list[HighlightType] = []
        self.ends_in_comment = False

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"Row({self._string!r})"

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._string == other._string
        return NotImplemented

    @property
    def text(self) -> str:
        return self._string

    @property
    def highlighting(self) -> tuple[HighlightType, ...]:
        return tuple(self._highlighting)

    def len(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def as_bytes(self) -> bytes:
        return self._string.encode("utf-8")

    # --- Edits ---
    def insert(self, at: int, char: str) -> None:
        """Inserts `char` before offset `at`; appends when `at` is past the end."""
        if at >= self._len:
            self._string += char
        else:
            self._string = self._string[:at] + char + self._string[at:]
        self._len = len(self._string)

    def delete(self, at: int) -> None:
        """Removes the character at `at`. No-op past the end."""
        if at >= self._len:
            return
        self._string = self._string[:at] + self._string[at + 1 :]
        self._len -= 1

    def append(self, other: "Row") -> None:
        self._string += other._string
        self._len = len(self._string)

    def split(self, at: int) -> "Row":
        """Truncates this row to ``[0, at)`` and returns the rest as a new row."""
        remainder = Row(self._string[at:])
        self._string = self._string[:at]
        self._len = len(self._string)
        return remainder

    # --- Queries ---
    def find(self, query: str, at: int, direction: SearchDirection) -> Optional[int]:
        """Offset of the nearest occurrence of `query` relative to `at`.

        Forward returns the leftmost match starting at or after `at`;
        Backward returns the rightmost match starting at or before `at`.
        Matching is a case-sensitive substring scan.

        Returns:
            The character offset of the match, or None when there is none,
            when `query` is empty, or when `at` is past the end of the row.
        """
        if not 0 <= at <= self._len or not query:
            return None
        if direction is SearchDirection.FORWARD:
            index = self._string.find(query, at)
        else:
            index = self._string.rfind(query, 0, at + len(query))
        return None if index == -1 else index

    def render(self, start: int, end: int, tab_size: int = DEFAULT_TAB_SIZE) -> str:
        """Display string for the character window ``[start, end)``.

        Tabs become `tab_size` spaces; no colors are applied. The caller pairs
        `highlighting[i]` with the i-th character when it wants colors.
        """
        end = max(0, min(end, self._len))
        start = max(0, min(start, end))
        return self._string[start:end].replace("\t", " " * tab_size)

    def width(
        self, start: int = 0, end: Optional[int] = None, tab_size: int = DEFAULT_TAB_SIZE
    ) -> int:
        """Terminal cell width of the rendered window.

        Uses wcswidth so wide (CJK) characters count double. When the window
        holds a non-printable character, widths are summed per character and
        each non-printable one counts as a single cell.
        """
        rendered = self.render(start, self._len if end is None else end, tab_size)
        width = wcswidth(rendered)
        if width >= 0:
            return width
        total_width = 0
        for char in rendered:
            char_width = wcwidth(char)
            total_width += char_width if char_width >= 0 else 1
        return total_width

    def segments(
        self, start: int = 0, end: Optional[int] = None
    ) -> list[tuple[str, HighlightType]]:
        """Splits the window into runs of characters that share one tag.

        Characters with no tag yet (stale highlight buffer) are reported as
        `HighlightType.NONE`.
        """
        end = self._len if end is None else max(0, min(end, self._len))
        start = max(0, min(start, end))
        if start == end:
            return []

        def tag_at(index: int) -> HighlightType:
            if index < len(self._highlighting):
                return self._highlighting[index]
            return HighlightType.NONE

        segments = []
        current_segment_text = self._string[start]
        current_segment_tag = tag_at(start)

        for i in range(start + 1, end):
            if tag_at(i) == current_segment_tag:
                current_segment_text += self._string[i]
            else:
                segments.append((current_segment_text, current_segment_tag))
                current_segment_text = self._string[i]
                current_segment_tag = tag_at(i)

        segments.append((current_segment_text, current_segment_tag))
        return segments

    # --- Highlighting ---
    def highlight(
        self,
        options: HighlightingOptions,
        query: Optional[str] = None,
        in_comment: bool = False,
    ) -> bool:
        """Recomputes this row's classification in place.

        Args:
            options: Rule set of the active file type.
            query: Transient search overlay; None clears it.
            in_comment: The row above ended inside a multi-line comment.

        Returns:
            True when this row ends inside an unterminated multi-line comment.
        """
        self._highlighting, self.ends_in_comment = highlight_line(
            self._string, options, query, in_comment
        )
        return self.ends_in_comment
