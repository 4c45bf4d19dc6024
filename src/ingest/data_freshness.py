"""Catalog freshness detection.

Each sheet row carries the time the export was last refreshed. This
module finds the most recent parseable value and renders it for display.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from core.constants import MISSING_UPDATE_PLACEHOLDER
from core.types import VideoRecord

_SPREADSHEET_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%Y/%m/%d",
    "%Y-%m-%d",
    "%m/%d/%Y",
)


def parse_update_timestamp(value: str) -> datetime | None:
    """Parse a sheet update timestamp.

    Args:
        value: Raw ``LastDataUpdate`` text.

    Returns:
        Parsed timestamp, or None when the text is empty or unrecognized.
    """
    text = value.strip()
    if not text:
        return None
    iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass
    for date_format in _SPREADSHEET_FORMATS:
        try:
            return datetime.strptime(text, date_format)
        except ValueError:
            continue
    return None


def latest_data_update(records: Iterable[VideoRecord]) -> datetime | None:
    """Return the most recent parseable update timestamp across records.

    Values are compared as absolute instants: offsets are honored and naive
    stamps are read as local time.
    """
    latest: datetime | None = None
    for record in records:
        moment = parse_update_timestamp(record.last_data_update)
        if moment is None:
            continue
        if latest is None or moment.timestamp() > latest.timestamp():
            latest = moment
    return latest


def format_data_update(moment: datetime | None) -> str:
    """Render a timestamp as ``YYYY/MM/DD HH:MM AM``.

    Args:
        moment: Timestamp to render, or None.

    Returns:
        Twelve-hour display string, or a placeholder when missing.
    """
    if moment is None:
        return MISSING_UPDATE_PLACEHOLDER
    hour = moment.hour % 12 or 12
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return f"{moment:%Y/%m/%d} {hour:02d}:{moment:%M} {meridiem}"
