"""Header row detection for spreadsheet exports.

Exports often carry banner or blank rows above the real header, so the
header is located by marker substrings rather than assumed at row zero.
"""

from __future__ import annotations

from typing import Sequence

from core.types import DEFAULT_INGEST_SCHEMA, IngestSchema, RawRow


def locate_header_row(
    rows: Sequence[RawRow],
    schema: IngestSchema = DEFAULT_INGEST_SCHEMA,
) -> int:
    """Return the index of the row to treat as the header.

    Args:
        rows: Tokenized rows.
        schema: Marker substrings and scan window.

    Returns:
        Index of the first row within the scan window containing a header
        marker, or 0 when no row matches.
    """
    for row_index, row in enumerate(rows[: schema.header_scan_limit]):
        if _row_has_marker(row, schema.header_markers):
            return row_index
    return 0


def _row_has_marker(row: RawRow, markers: tuple[str, ...]) -> bool:
    """Return whether the lower-cased comma-joined row contains a marker."""
    joined_row = ",".join(row).lower()
    return any(marker in joined_row for marker in markers)
