"""Unit tests for the lenient CSV tokenizer."""

from __future__ import annotations

from ingest.csv_tokenizer import tokenize_csv


def test_tokenize_csv_splits_plain_rows_and_fields() -> None:
    """Unquoted text should split on commas and line breaks."""
    rows = tokenize_csv("a,b,c\n1,2,3\n")

    assert rows == [("a", "b", "c"), ("1", "2", "3")]


def test_tokenize_csv_keeps_quoted_comma_in_one_field() -> None:
    """A comma inside quotes is part of the field."""
    rows = tokenize_csv('"Hello, World",x')

    assert rows == [("Hello, World", "x")]


def test_tokenize_csv_unescapes_doubled_quotes() -> None:
    """Doubled quotes inside a quoted field become one literal quote."""
    rows = tokenize_csv('"She said ""hi"""')

    assert rows == [('She said "hi"',)]


def test_tokenize_csv_keeps_embedded_newline_in_quoted_field() -> None:
    """A quoted line break must not start a new row."""
    rows = tokenize_csv('title,desc\n"Song","line one\nline two"\n')

    assert rows == [("title", "desc"), ("Song", "line one\nline two")]


def test_tokenize_csv_treats_crlf_as_one_terminator() -> None:
    """CRLF, lone CR, and LF all end exactly one row."""
    rows = tokenize_csv("a,b\r\nc,d\re,f\ng,h")

    assert rows == [("a", "b"), ("c", "d"), ("e", "f"), ("g", "h")]


def test_tokenize_csv_emits_blank_lines_as_single_empty_field() -> None:
    """Blank lines inside the document yield a one-field empty row."""
    rows = tokenize_csv("\n\nVideoTitle\n")

    assert rows == [("",), ("",), ("VideoTitle",)]


def test_tokenize_csv_drops_empty_trailing_line() -> None:
    """A trailing terminator must not produce an extra row."""
    rows = tokenize_csv("a,b\r\n")

    assert rows == [("a", "b")]


def test_tokenize_csv_flushes_last_row_without_terminator() -> None:
    """Final field and row are emitted at end of input."""
    rows = tokenize_csv("a,b\nc,")

    assert rows == [("a", "b"), ("c", "")]


def test_tokenize_csv_unterminated_quote_absorbs_remaining_input() -> None:
    """An open quote swallows the rest of the document without raising."""
    rows = tokenize_csv('a,"b,c\nd,e')

    assert rows == [("a", "b,c\nd,e")]


def test_tokenize_csv_returns_no_rows_for_empty_input() -> None:
    """Empty text has no rows."""
    assert tokenize_csv("") == []


def test_tokenize_csv_preserves_unquoted_cells_for_reserialization() -> None:
    """Joining unquoted cells back reproduces each original line."""
    lines = ["PublishDate,VideoTitle,Views", "2026-01-10,Song A,100", "2026-01-11,Song B,200"]

    rows = tokenize_csv("\n".join(lines))

    assert [",".join(row) for row in rows] == lines


def test_tokenize_csv_quote_mid_field_enters_quoted_mode() -> None:
    """A quote inside an unquoted field toggles quoting for the rest of it."""
    rows = tokenize_csv('ab"c,d"e')

    assert rows == [("abc,de",)]
