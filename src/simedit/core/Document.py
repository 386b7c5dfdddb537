# simedit/core/Document.py
"""simedit.core.Document.py
=========================
Document: the ordered row sequence of one open file.

This module owns everything that addresses text by `Position`:

- Opening a file as UTF-8 text and splitting it into rows
- Position-addressed insert/delete, including newline split and line merge
- Saving rows back to disk and tracking the dirty flag
- Re-highlighting touched rows and propagating multi-line comment state
- Substring search in either direction across rows

Out-of-range positions are ignored rather than rejected: the interactive
caller may hand over a stale position (for example from a prompt callback
fired on every keystroke) and must never crash because of it. File I/O
failures are the only errors raised, always as `DocumentIOError`.

Newline convention on open: the text is split on ``\\n`` and a single
trailing newline does not produce an extra empty row, so ``"a\\nb"`` and
``"a\\nb\\n"`` both open as two rows. An empty file opens with no rows.
"""

import os
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

import chardet

from simedit.core.FileType import FileType
from simedit.core.Position import Position, SearchDirection
from simedit.core.Row import DEFAULT_TAB_SIZE, Row
from simedit.utils.logging_config import logger


PathLike = Union[str, os.PathLike]


class DocumentIOError(OSError):
    """Raised when a document cannot be read from or written to disk.

    Attributes:
        path (str | None): The file the operation was working on.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


def split_lines(contents: str) -> list[str]:
    """Splits file contents into row texts.

    A trailing newline terminates the last row instead of opening a new one,
    and a ``\\r`` before a newline is dropped.
    """
    lines = contents.split("\n")
    last = lines.pop()
    rows = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        rows.append(last)
    return rows


class Document:
    """Class Document
    =================
    An ordered sequence of `Row` objects plus the file they belong to.

    Attributes:
        file_name (str | None): Target path; None means the document was
            never saved. Callers implement "save as" by assigning it before
            calling `save()`.
    """

    def __init__(
        self,
        rows: Optional[list[Row]] = None,
        file_name: Optional[str] = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._rows: list[Row] = list(rows or [])
        self.file_name = file_name
        self._dirty = False
        self._config: Mapping[str, Any] = config or {}
        self._file_type = FileType.from_name(file_name, self._config)

    # --- Loading ---
    @classmethod
    def open(cls, path: PathLike, config: Optional[Mapping[str, Any]] = None) -> "Document":
        """Reads `path` as UTF-8 text and builds a highlighted document.

        Raises:
            DocumentIOError: The file cannot be read or is not valid UTF-8.
        """
        file_name = os.fspath(path)
        logger.debug(f"Document.open: reading '{file_name}'")
        try:
            raw = Path(file_name).read_bytes()
        except OSError as e:
            logger.error(f"Failed to read file '{file_name}': {e}", exc_info=True)
            raise DocumentIOError(f"Could not open file: {file_name}", path=file_name) from e

        try:
            contents = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            guess = chardet.detect(raw).get("encoding") or "unknown"
            logger.error(
                f"File '{file_name}' is not valid UTF-8 (detected encoding: {guess}).",
                exc_info=True,
            )
            raise DocumentIOError(
                f"Could not open file: {file_name} is not UTF-8 text (looks like {guess})",
                path=file_name,
            ) from e

        document = cls(
            rows=[Row(line) for line in split_lines(contents)],
            file_name=file_name,
            config=config,
        )
        document.highlight()
        logger.info(
            f"Opened '{file_name}': {len(document)} rows, file type '{document.file_type_name}'."
        )
        return document

    # --- Accessors ---
    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def is_empty(self) -> bool:
        return not self._rows

    def len(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def file_type(self) -> FileType:
        return self._file_type

    @property
    def file_type_name(self) -> str:
        return self._file_type.name

    @property
    def tab_size(self) -> int:
        """Columns a tab expands to, from the ``[editor]`` config table."""
        return self._config.get("editor", {}).get("tab_size", DEFAULT_TAB_SIZE)

    # --- Mutation ---
    def insert(self, at: Position, char: str) -> None:
        """Inserts `char` at `at`; a newline splits the row instead.

        ``at.y == len(self)`` appends a new row. Rows beyond that, and
        negative coordinates, are out of range and the call is ignored.
        """
        if at.x < 0 or not 0 <= at.y <= len(self._rows):
            return

        self._dirty = True

        if char == "\n":
            self._insert_newline(at)
            return

        if at.y == len(self._rows):
            self._rows.append(Row(char))
        else:
            self._rows[at.y].insert(at.x, char)
        self._highlight_row(at.y)

    def _insert_newline(self, at: Position) -> None:
        if at.y == len(self._rows):
            self._rows.append(Row())
            self._highlight_row(at.y)
            return

        new_row = self._rows[at.y].split(at.x)
        self._rows.insert(at.y + 1, new_row)
        self._highlight_row(at.y)
        self._highlight_row(at.y + 1)
        logger.debug(f"Document: split row {at.y} at column {at.x}.")

    def delete(self, at: Position) -> None:
        """Deletes the character at `at`, or joins the next row at end of line."""
        length = len(self._rows)
        if at.x < 0 or not 0 <= at.y < length:
            return

        self._dirty = True

        row = self._rows[at.y]
        if at.x == row.len() and at.y + 1 < length:
            next_row = self._rows.pop(at.y + 1)
            row.append(next_row)
            logger.debug(f"Document: merged row {at.y + 1} into row {at.y}.")
        else:
            row.delete(at.x)
        self._highlight_row(at.y)

    # --- Persistence ---
    def save(self) -> None:
        """Writes every row followed by a newline to `file_name`.

        Does nothing when no file name is set. The file type is re-derived
        from the current file name and rows are re-highlighted as they are
        written. The write is not atomic: bytes written before a failure stay
        on disk and the document stays dirty.

        Raises:
            DocumentIOError: Any failure while opening, encoding or writing
                the file.
        """
        if self.file_name is None:
            logger.debug("Document.save: no file name set, nothing to do.")
            return

        self._file_type = FileType.from_name(self.file_name, self._config)
        options = self._file_type.options
        logger.debug(f"Document.save: writing {len(self._rows)} rows to '{self.file_name}'")

        try:
            with open(self.file_name, "wb") as file:
                in_comment = False
                for row in self._rows:
                    file.write(row.as_bytes())
                    file.write(b"\n")
                    in_comment = row.highlight(options, None, in_comment)
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to write file '{self.file_name}': {e}", exc_info=True)
            raise DocumentIOError(
                f"Could not write file: {self.file_name}", path=self.file_name
            ) from e

        self._dirty = False
        logger.info(f"Saved '{self.file_name}'.")

    # --- Highlighting ---
    def _highlight_row(self, index: int) -> None:
        in_comment = index > 0 and self._rows[index - 1].ends_in_comment
        self._rows[index].highlight(self._file_type.options, None, in_comment)

    def highlight(self, query: Optional[str] = None) -> None:
        """Re-highlights every row in order, carrying comment state forward.

        Args:
            query: Search overlay applied to every row; None clears it.
        """
        options = self._file_type.options
        in_comment = False
        for row in self._rows:
            in_comment = row.highlight(options, query, in_comment)

    # --- Search ---
    def find(
        self, query: str, at: Position, direction: SearchDirection
    ) -> Optional[Position]:
        """Nearest occurrence of `query` scanning from `at` in `direction`.

        Forward continues into later rows from column 0; backward continues
        into earlier rows from their last column.

        Returns:
            The match position, or None when `at.y` is out of range or the
            scanned span holds no match.
        """
        if not 0 <= at.y < len(self._rows):
            return None

        x, y = at.x, at.y
        while True:
            found = self._rows[y].find(query, x, direction)
            if found is not None:
                return Position(found, y)
            if direction is SearchDirection.FORWARD:
                if y + 1 >= len(self._rows):
                    return None
                y += 1
                x = 0
            else:
                if y == 0:
                    return None
                y -= 1
                x = self._rows[y].len()
