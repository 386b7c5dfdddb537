# simedit/core/FileType.py
"""simedit.core.FileType.py
=========================
File-name to highlighting-rule lookup.

Highlighting rule sets are a closed set of named profiles, each a plain
`HighlightingOptions` value. A file name is resolved to a profile in three
steps:

1. The ``[file_types]`` configuration table (extension -> profile key) is
   consulted first, so users can bind extra extensions.
2. Otherwise Pygments resolves the file name to a lexer and the lexer's
   aliases are matched against the profile keys.
3. Anything else gets the "No filetype" default, which disables all
   classification.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from simedit.core.Highlighter import HighlightingOptions
from simedit.utils.logging_config import logger


_RUST = HighlightingOptions(
    numbers=True,
    strings=('"',),
    characters=True,
    line_comment="//",
    multiline_comment=("/*", "*/"),
    primary_keywords=frozenset(
        """as break const continue crate else enum extern false fn for if impl
        in let loop match mod move mut pub ref return self Self static struct
        super trait true type unsafe use where while dyn abstract become box do
        final macro override priv typeof unsized virtual yield async await
        try""".split()
    ),
    secondary_keywords=frozenset(
        """bool char i8 i16 i32 i64 i128 isize u8 u16 u32 u64 u128 usize f32
        f64 str String""".split()
    ),
)

_C = HighlightingOptions(
    numbers=True,
    strings=('"',),
    characters=True,
    line_comment="//",
    multiline_comment=("/*", "*/"),
    primary_keywords=frozenset(
        """auto break case const continue default do else enum extern for goto
        if inline register restrict return sizeof static struct switch typedef
        union volatile while""".split()
    ),
    secondary_keywords=frozenset(
        """char double float int long short signed unsigned void size_t
        int8_t int16_t int32_t int64_t uint8_t uint16_t uint32_t uint64_t
        bool""".split()
    ),
)

_PYTHON = HighlightingOptions(
    numbers=True,
    strings=('"', "'"),
    line_comment="#",
    primary_keywords=frozenset(
        """False None True and as assert async await break class continue def
        del elif else except finally for from global if import in is lambda
        nonlocal not or pass raise return try while with yield""".split()
    ),
    secondary_keywords=frozenset(
        """bool bytes dict float frozenset int list object set str tuple
        self cls""".split()
    ),
)

_JAVASCRIPT = HighlightingOptions(
    numbers=True,
    strings=('"', "'", "`"),
    line_comment="//",
    multiline_comment=("/*", "*/"),
    primary_keywords=frozenset(
        """break case catch class const continue debugger default delete do
        else export extends finally for function if import in instanceof let
        new return super switch this throw try typeof var void while with
        yield async await of""".split()
    ),
    secondary_keywords=frozenset(
        """true false null undefined NaN Infinity Array Boolean Date Error
        Map Number Object Promise Set String Symbol""".split()
    ),
)

# Profile key -> (display name, rule set).
PROFILES: Mapping[str, tuple[str, HighlightingOptions]] = {
    "rust": ("Rust", _RUST),
    "c": ("C", _C),
    "python": ("Python", _PYTHON),
    "javascript": ("JavaScript", _JAVASCRIPT),
}

DEFAULT_NAME = "No filetype"


@dataclass(frozen=True)
class FileType:
    """The active highlighting profile of a document."""

    name: str = DEFAULT_NAME
    options: HighlightingOptions = field(default_factory=HighlightingOptions)

    @classmethod
    def from_profile(cls, key: str) -> "FileType":
        name, options = PROFILES[key]
        return cls(name=name, options=options)

    @classmethod
    def from_name(
        cls, file_name: Optional[str], config: Optional[Mapping[str, Any]] = None
    ) -> "FileType":
        """Resolves a file name to its highlighting profile.

        Args:
            file_name: Path or bare name of the file; ``None`` for an unsaved
                buffer.
            config: Application configuration; only ``["file_types"]`` is read.

        Returns:
            The matching `FileType`, or the default one when nothing matches.
        """
        if not file_name:
            return cls()

        overrides = (config or {}).get("file_types", {})
        _, extension = os.path.splitext(os.path.basename(file_name))
        key = overrides.get(extension[1:].lower()) if extension else None
        if key is not None:
            if key in PROFILES:
                logger.debug(f"FileType: '{file_name}' mapped to '{key}' by config.")
                return cls.from_profile(key)
            logger.warning(f"FileType: unknown profile '{key}' configured for '{extension}'.")

        try:
            lexer = get_lexer_for_filename(file_name)
        except ClassNotFound:
            logger.debug(f"FileType: No lexer for filename '{file_name}'.")
            return cls()

        for alias in [lexer.name.lower(), *lexer.aliases]:
            if alias in PROFILES:
                logger.debug(f"FileType: Detected '{alias}' from lexer '{lexer.name}'.")
                return cls.from_profile(alias)

        logger.debug(f"FileType: Lexer '{lexer.name}' has no highlighting profile.")
        return cls()
