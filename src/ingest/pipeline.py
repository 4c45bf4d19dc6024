"""Catalog ingest orchestration.

This module chains tokenizing, header detection, schema mapping, record
building, and filtering into one pure parse call, and wraps it with the
source read and empty-result policy used by dashboard loads.

Parsing is fail-soft: it always returns its best-effort typed output.
The load boundary is fail-loud: an empty result raises.
"""

from __future__ import annotations

from core.config import CatalogConfig
from core.constants import BYTE_ORDER_MARK, EMPTY_CATALOG_MESSAGE
from core.errors import CatalogConfigError, CatalogEmptyError, CatalogError
from core.logging_config import get_logger
from core.types import DEFAULT_INGEST_SCHEMA, CatalogLoadResult, IngestSchema, VideoRecord
from ingest.csv_tokenizer import tokenize_csv
from ingest.data_freshness import latest_data_update
from ingest.header_locator import locate_header_row
from ingest.record_builder import build_video_record
from ingest.record_filter import filter_displayable
from ingest.schema_mapper import build_header_map, resolve_field_columns
from ingest.source_reader import read_source_text

_LOGGER = get_logger(__name__)


def parse_video_catalog(
    text: str,
    schema: IngestSchema = DEFAULT_INGEST_SCHEMA,
) -> list[VideoRecord]:
    """Parse catalog CSV text into displayable video records.

    Args:
        text: Full CSV body, optionally prefixed with a byte-order mark.
        schema: Header markers, scan window, and numeric field settings.

    Returns:
        Displayable records in source row order. Empty when the input has no
        rows or no row survives filtering.
    """
    rows = tokenize_csv(text.removeprefix(BYTE_ORDER_MARK))
    if not rows:
        _LOGGER.warning("catalog_csv_empty")
        return []
    header_index = locate_header_row(rows, schema)
    header_row = rows[header_index]
    field_columns = resolve_field_columns(build_header_map(header_row))
    built_records = [
        build_video_record(row, field_columns, schema) for row in rows[header_index + 1 :]
    ]
    records = filter_displayable(built_records)
    if not records:
        _LOGGER.warning(
            "catalog_no_valid_records",
            header_index=header_index,
            headers=[cell.strip() for cell in header_row],
            data_row_count=len(built_records),
        )
    return records


def load_video_catalog(
    config: CatalogConfig,
    source_uri: str | None = None,
    schema: IngestSchema = DEFAULT_INGEST_SCHEMA,
) -> CatalogLoadResult:
    """Fetch and parse a catalog, rejecting empty results.

    Args:
        config: Runtime configuration.
        source_uri: Explicit source, defaults to ``config.source_url``.
        schema: Parse settings.

    Returns:
        Load result with records and the latest data update time.

    Raises:
        CatalogConfigError: If no source is given or configured.
        CatalogSourceError: If the source cannot be read.
        CatalogEmptyError: If no displayable record is found.
    """
    resolved_uri = source_uri or config.source_url
    if not resolved_uri:
        raise CatalogConfigError(
            "No catalog source configured. "
            "Pass a source URI or set CATALOG_SOURCE_URL."
        )
    try:
        text = read_source_text(resolved_uri, config)
        records = parse_video_catalog(text, schema)
        if not records:
            raise CatalogEmptyError(EMPTY_CATALOG_MESSAGE)
    except CatalogError as error:
        _LOGGER.error("catalog_load_failed", source_uri=resolved_uri, error=str(error))
        raise
    result = CatalogLoadResult(
        source_uri=resolved_uri,
        records=tuple(records),
        last_data_update=latest_data_update(records),
    )
    _LOGGER.info(
        "catalog_loaded",
        source_uri=resolved_uri,
        record_count=result.record_count,
        last_data_update=result.last_data_update.isoformat() if result.last_data_update else None,
    )
    return result
