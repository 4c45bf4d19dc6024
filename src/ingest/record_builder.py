"""Typed record construction from raw spreadsheet rows.

This module turns one raw data row into a fully populated video record.
Numeric cells degrade to zero instead of failing, string cells are trimmed,
and missing columns fall back to defaults.
"""

from __future__ import annotations

import math
import re
from typing import Mapping

from core.types import (
    DEFAULT_INGEST_SCHEMA,
    FieldValue,
    IngestSchema,
    RawRow,
    VideoField,
    VideoRecord,
)

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def coerce_number(raw_value: str | None) -> float:
    """Coerce a spreadsheet cell into a finite float.

    Every character other than digits, ``.`` and ``-`` is stripped, then the
    longest leading decimal literal is parsed, so ``"1,234 views"`` becomes
    ``1234.0`` and ``"1.5.2"`` becomes ``1.5``.

    Args:
        raw_value: Raw cell text, or None for a missing cell.

    Returns:
        Parsed value, or ``0.0`` when nothing parseable remains.
    """
    if not raw_value:
        return 0.0
    cleaned = _NON_NUMERIC_RE.sub("", raw_value)
    match = _LEADING_FLOAT_RE.match(cleaned)
    if match is None:
        return 0.0
    number = float(match.group(0))
    if not math.isfinite(number):
        return 0.0
    return number


def build_video_record(
    row: RawRow,
    field_columns: Mapping[VideoField, int | None],
    schema: IngestSchema = DEFAULT_INGEST_SCHEMA,
) -> VideoRecord:
    """Build one typed record from a raw data row.

    Args:
        row: Raw data row cells.
        field_columns: Column index per canonical field.
        schema: Numeric field settings.

    Returns:
        Video record with every field populated.
    """
    values: dict[VideoField, FieldValue] = {}
    for video_field in VideoField:
        raw_value = _cell_value(row, field_columns.get(video_field))
        if schema.is_numeric(video_field):
            values[video_field] = coerce_number(raw_value)
        else:
            values[video_field] = raw_value.strip() if raw_value is not None else ""
    if not values[VideoField.VIDEO_DESCRIPTION] and values[VideoField.CREATIVE_ADVICE]:
        values[VideoField.VIDEO_DESCRIPTION] = values[VideoField.CREATIVE_ADVICE]
    return VideoRecord.from_field_values(values)


def _cell_value(row: RawRow, column_index: int | None) -> str | None:
    """Return the raw cell at an index, or None when absent."""
    if column_index is None or column_index >= len(row):
        return None
    return row[column_index]
