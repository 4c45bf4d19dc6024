"""Tolerant header-name mapping for spreadsheet columns.

This module normalizes header cells so that variants such as
``Video Title``, ``video_title`` and ``VideoTitle `` resolve to one key,
then resolves canonical video fields to column indexes.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.types import HeaderMap, RawRow, VideoField

_NON_ALPHANUMERIC_RE = re.compile(r"[^a-z0-9]")


def normalize_column_name(name: str) -> str:
    """Normalize a header cell or field name for lookup.

    Args:
        name: Raw header text.

    Returns:
        Lower-case text with every non ``[a-z0-9]`` character removed.
    """
    return _NON_ALPHANUMERIC_RE.sub("", name.strip().lower())


def build_header_map(header_row: RawRow) -> HeaderMap:
    """Build a normalized header-name to column-index map.

    When two columns normalize to the same key, the later column wins.

    Args:
        header_row: Raw header row cells.

    Returns:
        Mapping from normalized header name to zero-based column index.
    """
    header_map: HeaderMap = {}
    for column_index, cell in enumerate(header_row):
        header_map[normalize_column_name(cell)] = column_index
    return header_map


def resolve_field_columns(
    header_map: HeaderMap,
    fields: Iterable[VideoField] = tuple(VideoField),
) -> dict[VideoField, int | None]:
    """Resolve canonical fields to column indexes once per ingestion run.

    Args:
        header_map: Normalized header map.
        fields: Canonical fields to resolve.

    Returns:
        Column index per field, or None when the sheet lacks the column.
    """
    return {
        video_field: header_map.get(normalize_column_name(video_field.header_name))
        for video_field in fields
    }
