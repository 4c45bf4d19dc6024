"""Shared JSONL serialization for VideoRecord payloads.

This module centralizes VideoRecord JSON serialization logic.
Payload keys are the canonical spreadsheet header names.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable

from core.types import NUMERIC_FIELDS, FieldValue, VideoField, VideoRecord
from ingest.record_builder import coerce_number


def video_record_to_payload(record: VideoRecord) -> dict[str, object]:
    """Serialize VideoRecord into JSON-safe payload.

    Args:
        record: Video record instance.

    Returns:
        Dictionary keyed by canonical header name.
    """
    return {
        video_field.header_name: value
        for video_field, value in record.field_values().items()
    }


def video_record_from_payload(payload: dict[str, Any]) -> VideoRecord:
    """Deserialize a JSON payload into VideoRecord.

    Missing keys take defaults and numeric values are coerced the same way
    spreadsheet cells are.

    Args:
        payload: Serialized record payload.

    Returns:
        Parsed VideoRecord.
    """
    values: dict[VideoField, FieldValue] = {}
    for video_field in VideoField:
        raw_value = payload.get(video_field.header_name)
        if raw_value is None:
            continue
        if video_field in NUMERIC_FIELDS:
            values[video_field] = _payload_number(raw_value)
        else:
            values[video_field] = str(raw_value)
    return VideoRecord.from_field_values(values)


def write_video_records_jsonl(records_path: Path, records: Iterable[VideoRecord]) -> int:
    """Write VideoRecord payloads to a JSONL file.

    Args:
        records_path: Output JSONL file path.
        records: Records to serialize.

    Returns:
        Number of records written.
    """
    lines = [
        json.dumps(video_record_to_payload(record), ensure_ascii=False, sort_keys=True)
        for record in records
    ]
    records_path.parent.mkdir(parents=True, exist_ok=True)
    payload = "\n".join(lines) + "\n" if lines else ""
    records_path.write_text(payload, encoding="utf-8")
    return len(lines)


def _payload_number(raw_value: object) -> float:
    """Read a numeric payload value, coercing strings like sheet cells."""
    if isinstance(raw_value, bool):
        return 0.0
    if isinstance(raw_value, (int, float)):
        number = float(raw_value)
        return number if math.isfinite(number) else 0.0
    return coerce_number(str(raw_value))
