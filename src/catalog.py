"""Public SDK surface for video catalog ingestion.

This module provides a stable import path for dashboard callers.
It re-exports the load and parse entry points and typed models.
"""

from __future__ import annotations

from core.config import CatalogConfig
from core.errors import (
    CatalogConfigError,
    CatalogDependencyError,
    CatalogEmptyError,
    CatalogError,
    CatalogSourceError,
)
from core.types import (
    DEFAULT_INGEST_SCHEMA,
    CatalogLoadResult,
    IngestSchema,
    VideoField,
    VideoRecord,
)
from ingest.csv_tokenizer import tokenize_csv
from ingest.data_freshness import format_data_update, latest_data_update
from ingest.pipeline import load_video_catalog, parse_video_catalog
from ingest.source_reader import read_source_text
from store.record_payload import (
    video_record_from_payload,
    video_record_to_payload,
    write_video_records_jsonl,
)

__all__ = [
    "CatalogConfig",
    "CatalogConfigError",
    "CatalogDependencyError",
    "CatalogEmptyError",
    "CatalogError",
    "CatalogLoadResult",
    "CatalogSourceError",
    "DEFAULT_INGEST_SCHEMA",
    "IngestSchema",
    "VideoField",
    "VideoRecord",
    "format_data_update",
    "latest_data_update",
    "load_video_catalog",
    "parse_video_catalog",
    "read_source_text",
    "tokenize_csv",
    "video_record_from_payload",
    "video_record_to_payload",
    "write_video_records_jsonl",
]
