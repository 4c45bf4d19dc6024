"""Lenient CSV tokenizer for spreadsheet exports.

This module splits raw CSV text into rows of raw field strings in a single
left-to-right scan. Quoted fields may contain commas, escaped quotes, and
line breaks. Malformed quoting never raises: an unterminated quote absorbs
the remainder of the input into the open field.
"""

from __future__ import annotations

from core.types import RawRow

_QUOTE = '"'
_DELIMITER = ","
_CARRIAGE_RETURN = "\r"
_LINE_FEED = "\n"


def tokenize_csv(text: str) -> list[RawRow]:
    """Tokenize CSV text into ordered rows of raw fields.

    Args:
        text: Full CSV document.

    Returns:
        Rows in document order. A blank line inside the document yields a
        single empty field; an empty trailing line is dropped.
    """
    rows: list[RawRow] = []
    current_row: list[str] = []
    field_chars: list[str] = []
    in_quotes = False
    index = 0
    text_length = len(text)
    while index < text_length:
        char = text[index]
        next_char = text[index + 1] if index + 1 < text_length else ""
        if char == _QUOTE:
            if in_quotes and next_char == _QUOTE:
                field_chars.append(_QUOTE)
                index += 1
            else:
                in_quotes = not in_quotes
        elif char == _DELIMITER and not in_quotes:
            current_row.append("".join(field_chars))
            field_chars = []
        elif char in (_CARRIAGE_RETURN, _LINE_FEED) and not in_quotes:
            if char == _CARRIAGE_RETURN and next_char == _LINE_FEED:
                index += 1
            current_row.append("".join(field_chars))
            rows.append(tuple(current_row))
            current_row = []
            field_chars = []
        else:
            field_chars.append(char)
        index += 1
    if current_row or field_chars:
        current_row.append("".join(field_chars))
        rows.append(tuple(current_row))
    return rows
