# simedit/core/Highlighter.py
"""simedit.core.Highlighter.py
============================
Per-row syntax classification for the simedit text core.

A row is classified by a single left-to-right scan driven by a
`HighlightingOptions` rule set. The scan is a pure function of the row's
text, the rule set, an optional search query and one bit of inherited state:
whether the previous row ended inside an unterminated multi-line comment.
The function returns the outgoing value of that bit so the caller (the
document) can seed the next row with it.

Scanner states:
    DEFAULT            - looking for the start of the next token.
    STRING             - inside a quoted literal, until the matching quote
                         or end of row. Never carried to the next row.
    MULTILINE_COMMENT  - inside a block comment, until the close marker.
                         This is the only state that crosses rows.
    NUMBER             - a run of digits and dots that began on a boundary.
    IDENTIFIER         - a word run, tagged as a keyword when it is one.

Once inside a string or comment, every other marker is inert until the
state's own terminator is found.
"""

import logging
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from simedit.utils.logging_config import HIGHLIGHT_LOGGER
from simedit.utils.utils import DEFAULT_CONFIG, hex_to_xterm


class HighlightType(Enum):
    """Classification tag assigned to every character of a row."""

    NONE = "none"
    NUMBER = "number"
    MATCH = "match"
    STRING = "string"
    CHARACTER = "character"
    COMMENT = "comment"
    MULTILINE_COMMENT = "multiline_comment"
    PRIMARY_KEYWORD = "primary_keyword"
    SECONDARY_KEYWORD = "secondary_keyword"

    def to_color(self, colors: Optional[Mapping[str, str]] = None) -> str:
        """Returns the hex color for this tag.

        Args:
            colors: The ``[colors]`` configuration table. Tags missing from it
                fall back to the built-in palette.
        """
        palette = DEFAULT_CONFIG["colors"]
        if colors is None:
            return palette[self.value]
        return colors.get(self.value, palette[self.value])

    def color_index(self, colors: Optional[Mapping[str, str]] = None) -> int:
        """Nearest xterm-256 palette index for this tag's color."""
        return hex_to_xterm(self.to_color(colors))


@dataclass(frozen=True)
class HighlightingOptions:
    """Data-only rule set consumed by `highlight_line`.

    The default instance disables every classification, which is what an
    unknown file type gets.

    Attributes:
        numbers: Classify numeric literals.
        strings: Characters that open (and close) a string literal.
        characters: Classify single-quoted character literals (``'a'``, ``'\\n'``).
        line_comment: Marker that comments out the rest of the row.
        multiline_comment: ``(open, close)`` markers of a block comment.
        primary_keywords: Words tagged `PRIMARY_KEYWORD`.
        secondary_keywords: Words tagged `SECONDARY_KEYWORD` (type names).
    """

    numbers: bool = False
    strings: tuple[str, ...] = ()
    characters: bool = False
    line_comment: Optional[str] = None
    multiline_comment: Optional[tuple[str, str]] = None
    primary_keywords: frozenset[str] = field(default_factory=frozenset)
    secondary_keywords: frozenset[str] = field(default_factory=frozenset)


class _ScanState(Enum):
    DEFAULT = 0
    STRING = 1
    MULTILINE_COMMENT = 2
    NUMBER = 3
    IDENTIFIER = 4


def is_separator(char: str) -> bool:
    """True for whitespace and ASCII punctuation, the token boundaries."""
    return char.isspace() or char in string.punctuation


def _is_word(char: str) -> bool:
    return char.isalnum() or char == "_"


def _character_literal_length(text: str, index: int) -> int:
    """Length of a ``'x'`` or ``'\\x'`` literal starting at `index`, or 0."""
    length = len(text)
    if index + 2 < length and text[index + 1] != "\\" and text[index + 2] == "'":
        return 3
    if index + 3 < length and text[index + 1] == "\\" and text[index + 3] == "'":
        return 4
    return 0


def highlight_line(
    text: str,
    options: HighlightingOptions,
    query: Optional[str] = None,
    in_comment: bool = False,
) -> tuple[list[HighlightType], bool]:
    """Classifies every character of one row.

    Args:
        text: The row's characters.
        options: Rule set of the active file type.
        query: When non-empty, every non-overlapping occurrence is re-tagged
            `MATCH` after language classification.
        in_comment: The previous row ended inside an unterminated
            multi-line comment.

    Returns:
        ``(tags, in_comment_out)`` where ``len(tags) == len(text)`` and
        ``in_comment_out`` tells whether this row ends inside an unterminated
        multi-line comment.
    """
    tags: list[HighlightType] = []
    length = len(text)
    open_marker, close_marker = options.multiline_comment or ("", "")

    state = _ScanState.DEFAULT
    if in_comment and close_marker:
        state = _ScanState.MULTILINE_COMMENT
    quote = ""
    word_tag = HighlightType.NONE

    index = 0
    while index < length:
        char = text[index]

        if state is _ScanState.MULTILINE_COMMENT:
            if text.startswith(close_marker, index):
                tags.extend([HighlightType.MULTILINE_COMMENT] * len(close_marker))
                index += len(close_marker)
                state = _ScanState.DEFAULT
            else:
                tags.append(HighlightType.MULTILINE_COMMENT)
                index += 1
            continue

        if state is _ScanState.STRING:
            tags.append(HighlightType.STRING)
            if char == "\\" and index + 1 < length:
                tags.append(HighlightType.STRING)
                index += 2
                continue
            if char == quote:
                state = _ScanState.DEFAULT
            index += 1
            continue

        if state is _ScanState.NUMBER:
            if char in string.digits or char == ".":
                tags.append(HighlightType.NUMBER)
                index += 1
            else:
                state = _ScanState.DEFAULT
            continue

        if state is _ScanState.IDENTIFIER:
            if _is_word(char):
                tags.append(word_tag)
                index += 1
            else:
                state = _ScanState.DEFAULT
            continue

        # DEFAULT: decide which state the next token opens.
        at_boundary = index == 0 or is_separator(text[index - 1])

        if open_marker and text.startswith(open_marker, index):
            tags.extend([HighlightType.MULTILINE_COMMENT] * len(open_marker))
            index += len(open_marker)
            state = _ScanState.MULTILINE_COMMENT
            continue

        if options.line_comment and text.startswith(options.line_comment, index):
            tags.extend([HighlightType.COMMENT] * (length - index))
            index = length
            break

        if options.characters and char == "'":
            literal_length = _character_literal_length(text, index)
            if literal_length:
                tags.extend([HighlightType.CHARACTER] * literal_length)
                index += literal_length
                continue

        if char in options.strings:
            tags.append(HighlightType.STRING)
            quote = char
            state = _ScanState.STRING
            index += 1
            continue

        if options.numbers and at_boundary and char in string.digits:
            state = _ScanState.NUMBER
            continue

        if _is_word(char):
            end = index
            while end < length and _is_word(text[end]):
                end += 1
            word = text[index:end]
            word_tag = HighlightType.NONE
            if at_boundary:
                if word in options.primary_keywords:
                    word_tag = HighlightType.PRIMARY_KEYWORD
                elif word in options.secondary_keywords:
                    word_tag = HighlightType.SECONDARY_KEYWORD
            state = _ScanState.IDENTIFIER
            continue

        tags.append(HighlightType.NONE)
        index += 1

    if query:
        start = text.find(query)
        while start != -1:
            end = start + len(query)
            tags[start:end] = [HighlightType.MATCH] * len(query)
            start = text.find(query, end)

    in_comment_out = state is _ScanState.MULTILINE_COMMENT
    if HIGHLIGHT_LOGGER.isEnabledFor(logging.DEBUG):
        HIGHLIGHT_LOGGER.debug(
            "row len=%d in_comment=%s -> %s query=%r",
            length,
            in_comment,
            in_comment_out,
            query,
        )
    return tags, in_comment_out
