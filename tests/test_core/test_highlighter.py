# tests/test_core/test_highlighter.py
"""Highlighter Tests
===================

Unit tests for `highlight_line`, the per-row scanner.

Each row is classified in isolation; the only state shared between rows is
the multi-line comment flag, passed in and returned explicitly.
"""

from simedit.core.FileType import FileType
from simedit.core.Highlighter import (
    HighlightingOptions,
    HighlightType,
    highlight_line,
    is_separator,
)

NONE = HighlightType.NONE
ML = HighlightType.MULTILINE_COMMENT


def test_keywords_and_type_names(rust_options):
    """Primary keywords and type names are tagged on word boundaries."""
    tags, in_comment = highlight_line("let x: i32 = 5;", rust_options)

    assert tags[0:3] == [HighlightType.PRIMARY_KEYWORD] * 3
    assert tags[4] == NONE
    assert tags[7:10] == [HighlightType.SECONDARY_KEYWORD] * 3
    assert tags[13] == HighlightType.NUMBER
    assert tags[14] == NONE
    assert in_comment is False


def test_keyword_inside_identifier_is_not_tagged(rust_options):
    tags, _ = highlight_line("format fnord", rust_options)
    assert tags == [NONE] * len("format fnord")


def test_numbers_need_a_boundary(rust_options):
    """Digits glued to an identifier are part of that identifier."""
    tags, _ = highlight_line("x1 3.14", rust_options)
    assert tags[0:2] == [NONE, NONE]
    assert tags[3:] == [HighlightType.NUMBER] * 4


def test_string_hides_comment_marker(rust_options):
    text = 'a "b // c" d'
    tags, _ = highlight_line(text, rust_options)

    assert tags[2:10] == [HighlightType.STRING] * 8
    assert tags[11] == NONE


def test_string_escape_does_not_close_literal(rust_options):
    text = '"a\\"b" x'
    tags, _ = highlight_line(text, rust_options)

    assert tags[:6] == [HighlightType.STRING] * 6
    assert tags[7] == NONE


def test_unterminated_string_runs_to_end_and_does_not_carry(rust_options):
    tags, in_comment = highlight_line('x = "abc', rust_options)

    assert tags[4:] == [HighlightType.STRING] * 4
    assert in_comment is False


def test_line_comment_runs_to_end_of_row(rust_options):
    tags, in_comment = highlight_line("x // note", rust_options)

    assert tags[0] == NONE
    assert tags[2:] == [HighlightType.COMMENT] * 7
    assert in_comment is False


def test_character_literals(rust_options):
    """Both plain and escaped literals are recognized; a lifetime is not."""
    tags, _ = highlight_line("'a' '\\n' 'b", rust_options)

    assert tags[0:3] == [HighlightType.CHARACTER] * 3
    assert tags[4:8] == [HighlightType.CHARACTER] * 4
    assert tags[9] == NONE


def test_multiline_comment_propagation(rust_options):
    """An open block comment carries into the next rows until closed."""
    rows = ["/* start", "still in comment */", "code"]
    results = []
    in_comment = False
    for text in rows:
        tags, in_comment = highlight_line(text, rust_options, None, in_comment)
        results.append((tags, in_comment))

    first, second, third = results
    assert first == ([ML] * len(rows[0]), True)
    assert second == ([ML] * len(rows[1]), False)
    assert third == ([NONE] * len(rows[2]), False)


def test_default_classification_resumes_after_close(rust_options):
    tags, in_comment = highlight_line("end */ fn", rust_options, None, True)

    assert tags[0:6] == [ML] * 6
    assert tags[6] == NONE
    assert tags[7:9] == [HighlightType.PRIMARY_KEYWORD] * 2
    assert in_comment is False


def test_markers_are_inert_inside_block_comment(rust_options):
    tags, in_comment = highlight_line('"quoted" // fn', rust_options, None, True)

    assert tags == [ML] * len('"quoted" // fn')
    assert in_comment is True


def test_comment_closed_on_same_row(rust_options):
    tags, in_comment = highlight_line("/* a */ 1", rust_options)

    assert tags[:7] == [ML] * 7
    assert tags[8] == HighlightType.NUMBER
    assert in_comment is False


def test_query_overlay_marks_every_occurrence(rust_options):
    text = "fn x fn"
    tags, _ = highlight_line(text, rust_options, query="fn")

    assert tags[0:2] == [HighlightType.MATCH] * 2
    assert tags[2:5] == [NONE] * 3
    assert tags[5:7] == [HighlightType.MATCH] * 2


def test_query_overlay_is_transient(rust_options):
    """Re-running without a query restores the syntax classification."""
    text = "// note"
    overlaid, _ = highlight_line(text, rust_options, query="note")
    plain, _ = highlight_line(text, rust_options)

    assert overlaid[3:] == [HighlightType.MATCH] * 4
    assert plain == [HighlightType.COMMENT] * len(text)


def test_default_options_disable_everything():
    tags, in_comment = highlight_line('fn /* "x" 12', HighlightingOptions(), None, True)

    assert tags == [NONE] * len('fn /* "x" 12')
    assert in_comment is False


def test_python_profile_uses_hash_comments_and_single_quotes():
    options = FileType.from_profile("python").options
    tags, _ = highlight_line("s = 's' # c", options)

    assert tags[4:7] == [HighlightType.STRING] * 3
    assert tags[8:] == [HighlightType.COMMENT] * 3


def test_one_tag_per_character(rust_options):
    for text in ["", "日本語 fn", "\t'x' /* ", 'r"#', "0.5.1abc"]:
        tags, _ = highlight_line(text, rust_options)
        assert len(tags) == len(text)


def test_is_separator():
    assert is_separator(" ")
    assert is_separator(";")
    assert not is_separator("a")
    assert not is_separator("é")


def test_highlight_type_colors():
    """Tags map to the configured palette, falling back to the built-in one."""
    assert HighlightType.NUMBER.to_color() == "#dc143c"
    assert HighlightType.NUMBER.to_color({"number": "#000000"}) == "#000000"
    assert HighlightType.STRING.to_color({"number": "#000000"}) == "#d3d3d3"
    assert HighlightType.NONE.color_index() == 231
