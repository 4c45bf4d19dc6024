"""Displayability filter for built video records.

Only records unusable for display are rejected. Numeric anomalies are
never grounds for rejection since they already degrade to zero.
"""

from __future__ import annotations

from typing import Iterable

from core.types import VideoRecord


def is_displayable(record: VideoRecord) -> bool:
    """Return whether a record has a title and a URL or thumbnail."""
    if not record.video_title:
        return False
    return bool(record.video_url or record.thumbnail)


def filter_displayable(records: Iterable[VideoRecord]) -> list[VideoRecord]:
    """Keep displayable records in their original order.

    Args:
        records: Built records.

    Returns:
        Records that pass ``is_displayable``.
    """
    return [record for record in records if is_displayable(record)]
