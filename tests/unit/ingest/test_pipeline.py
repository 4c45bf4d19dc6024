"""Unit tests for catalog parse and load orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import CatalogConfig
from core.errors import CatalogConfigError, CatalogEmptyError, CatalogSourceError
from ingest.pipeline import load_video_catalog, parse_video_catalog


class _FakeLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, object]]] = []

    def info(self, event: str, **fields: object) -> None:
        self.events.append((event, fields))

    def warning(self, event: str, **fields: object) -> None:
        self.events.append((event, fields))

    def error(self, event: str, **fields: object) -> None:
        self.events.append((event, fields))


def _config(source_url: str | None = None) -> CatalogConfig:
    return CatalogConfig(
        source_url=source_url,
        request_timeout=5.0,
        user_agent="test-agent",
        s3_region=None,
        s3_profile=None,
    )


def test_parse_video_catalog_end_to_end_example() -> None:
    """The reference example should yield one typed record."""
    text = 'PublishDate,VideoTitle,VideoURL,Views\n2026-01-10,"New Year Song",https://x/y,"12,000"'

    records = parse_video_catalog(text)

    assert len(records) == 1
    record = records[0]
    assert record.publish_date == "2026-01-10"
    assert record.video_title == "New Year Song"
    assert record.video_url == "https://x/y"
    assert record.views == 12000


def test_parse_video_catalog_skips_banner_rows_and_filters_records() -> None:
    """Banner rows are skipped and undisplayable rows are dropped."""
    text = (
        "2026 CNY Songs,,\r\n"
        ",,\r\n"
        "VideoTitle,Video URL,Thumbnail\r\n"
        "Song A,https://x/a,\r\n"
        ",https://x/b,https://x/b.jpg\r\n"
        "Song C,,https://x/c.jpg\r\n"
        "Song D,,\r\n"
    )

    records = parse_video_catalog(text)

    assert [record.video_title for record in records] == ["Song A", "Song C"]


def test_parse_video_catalog_strips_byte_order_mark() -> None:
    """A leading BOM must not corrupt the first header name."""
    text = "\ufeffVideoTitle,Views,Thumbnail\nSong,5,https://x/t.jpg\n"

    records = parse_video_catalog(text)

    assert records[0].video_title == "Song"


def test_parse_video_catalog_ignores_unknown_columns() -> None:
    """Extra columns are silently ignored."""
    text = "VideoTitle,Mood,VideoURL\nSong,happy,https://x/y\n"

    records = parse_video_catalog(text)

    assert records[0].video_url == "https://x/y"


def test_parse_video_catalog_later_duplicate_column_wins() -> None:
    """With two Views columns the later one is used."""
    text = "VideoTitle,Views,VideoURL,views\nSong,1,https://x/y,2\n"

    records = parse_video_catalog(text)

    assert records[0].views == 2.0


def test_parse_video_catalog_returns_empty_for_empty_text(monkeypatch) -> None:
    """Empty input is not an error and logs a warning."""
    fake_logger = _FakeLogger()
    monkeypatch.setattr("ingest.pipeline._LOGGER", fake_logger)

    records = parse_video_catalog("")

    assert records == []
    assert [event for event, _ in fake_logger.events] == ["catalog_csv_empty"]


def test_parse_video_catalog_logs_headers_when_nothing_survives(monkeypatch) -> None:
    """A header-only sheet logs the raw headers for diagnosis."""
    fake_logger = _FakeLogger()
    monkeypatch.setattr("ingest.pipeline._LOGGER", fake_logger)

    records = parse_video_catalog(" Video Title ,Video URL\n")

    assert records == []
    event, fields = fake_logger.events[0]
    assert event == "catalog_no_valid_records"
    assert fields["headers"] == ["Video Title", "Video URL"]


def test_load_video_catalog_reads_local_file(tmp_path: Path) -> None:
    """Loader should parse a local CSV and report the latest update."""
    source_path = tmp_path / "catalog.csv"
    source_path.write_text(
        "VideoTitle,VideoURL,LastDataUpdate\n"
        "Song A,https://x/a,2026-01-10 08:00\n"
        "Song B,https://x/b,2026-01-12 21:05\n",
        encoding="utf-8",
    )

    result = load_video_catalog(_config(), source_uri=str(source_path))

    assert result.record_count == 2
    assert result.last_data_update is not None
    assert result.last_data_update.day == 12


def test_load_video_catalog_uses_configured_source(tmp_path: Path) -> None:
    """Without an explicit URI the configured source is used."""
    source_path = tmp_path / "catalog.csv"
    source_path.write_text("VideoTitle,Thumbnail\nSong,https://x/t.jpg\n", encoding="utf-8")

    result = load_video_catalog(_config(source_url=str(source_path)))

    assert result.source_uri == str(source_path)


def test_load_video_catalog_raises_for_header_only_sheet(tmp_path: Path) -> None:
    """An empty filtered result is the one fatal parse outcome."""
    source_path = tmp_path / "catalog.csv"
    source_path.write_text("VideoTitle,VideoURL\n", encoding="utf-8")

    with pytest.raises(CatalogEmptyError):
        load_video_catalog(_config(), source_uri=str(source_path))


def test_load_video_catalog_propagates_source_errors(tmp_path: Path, monkeypatch) -> None:
    """Source read failures are logged and re-raised unchanged."""
    fake_logger = _FakeLogger()
    monkeypatch.setattr("ingest.pipeline._LOGGER", fake_logger)

    with pytest.raises(CatalogSourceError):
        load_video_catalog(_config(), source_uri=str(tmp_path / "missing.csv"))

    assert fake_logger.events[-1][0] == "catalog_load_failed"


def test_load_video_catalog_requires_a_source() -> None:
    """A load with no source anywhere is a configuration error."""
    with pytest.raises(CatalogConfigError):
        load_video_catalog(_config())
