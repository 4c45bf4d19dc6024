"""Shared typed models.

This module defines immutable data models used by the ingest pipeline,
payload serialization, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Union

from core.constants import HEADER_MARKERS, HEADER_SCAN_LIMIT
from core.errors import CatalogConfigError

RawRow = tuple[str, ...]
HeaderMap = dict[str, int]
FieldValue = Union[str, float]


class VideoField(Enum):
    """Canonical video catalog fields keyed by spreadsheet header name."""

    PUBLISH_DATE = "PublishDate"
    VIDEO_TITLE = "VideoTitle"
    CHANNEL_NAME = "ChannelName"
    CHANNEL_AVATAR = "ChannelAvatar"
    VIDEO_DESCRIPTION = "VideoDescription"
    VIEWS = "Views"
    LIKES = "Likes"
    COMMENTS = "Comments"
    VIDEO_URL = "VideoURL"
    THUMBNAIL = "Thumbnail"
    DURATION = "Duration"
    DURATION_SEC = "DurationSec"
    VIEW_RANK = "ViewRank"
    DAYS_SINCE_PUBLISHED = "DaysSincePublished"
    VIEWS_PER_DAY = "ViewsPerDay"
    TRENDING_RANK = "TrendingRank"
    RANK_MOMENTUM = "RankMomentum"
    CREATIVE_ADVICE = "CreativeAdvice"
    LAST_DATA_UPDATE = "LastDataUpdate"

    @property
    def header_name(self) -> str:
        """Canonical spreadsheet header text for this field."""
        return self.value


NUMERIC_FIELDS = frozenset(
    {
        VideoField.VIEWS,
        VideoField.LIKES,
        VideoField.COMMENTS,
        VideoField.DURATION_SEC,
        VideoField.VIEW_RANK,
        VideoField.DAYS_SINCE_PUBLISHED,
        VideoField.VIEWS_PER_DAY,
        VideoField.TRENDING_RANK,
        VideoField.RANK_MOMENTUM,
    }
)


@dataclass(frozen=True)
class IngestSchema:
    """Immutable schema settings shared by header detection and record building.

    Attributes:
        numeric_fields: Fields coerced to numbers instead of trimmed strings.
            Must match the numeric slots of ``VideoRecord``.
        header_markers: Lower-case substrings searched for in the comma-joined
            row text to identify the header row.
        header_scan_limit: Maximum number of leading rows searched for a header.
    """

    numeric_fields: frozenset[VideoField] = NUMERIC_FIELDS
    header_markers: tuple[str, ...] = HEADER_MARKERS
    header_scan_limit: int = HEADER_SCAN_LIMIT

    def __post_init__(self) -> None:
        if frozenset(self.numeric_fields) != NUMERIC_FIELDS:
            mismatched = sorted(
                video_field.header_name
                for video_field in frozenset(self.numeric_fields) ^ NUMERIC_FIELDS
            )
            raise CatalogConfigError(
                "Invalid numeric_fields: VideoRecord stores numbers exactly for "
                f"{sorted(video_field.header_name for video_field in NUMERIC_FIELDS)}; "
                f"mismatched fields: {mismatched}."
            )

    def is_numeric(self, video_field: VideoField) -> bool:
        """Return whether a field is coerced to a number."""
        return video_field in self.numeric_fields


DEFAULT_INGEST_SCHEMA = IngestSchema()


@dataclass(frozen=True)
class VideoRecord:
    """Canonical typed video catalog record.

    String fields default to an empty string and numeric fields to ``0.0``.
    Numeric fields are always finite floats.
    """

    publish_date: str = ""
    video_title: str = ""
    channel_name: str = ""
    channel_avatar: str = ""
    video_description: str = ""
    views: float = 0.0
    likes: float = 0.0
    comments: float = 0.0
    video_url: str = ""
    thumbnail: str = ""
    duration: str = ""
    duration_sec: float = 0.0
    view_rank: float = 0.0
    days_since_published: float = 0.0
    views_per_day: float = 0.0
    trending_rank: float = 0.0
    rank_momentum: float = 0.0
    creative_advice: str = ""
    last_data_update: str = ""

    @classmethod
    def from_field_values(cls, values: Mapping[VideoField, FieldValue]) -> "VideoRecord":
        """Build a record from a field-keyed value table.

        Args:
            values: Values keyed by canonical field; missing keys use defaults.

        Returns:
            Immutable video record.
        """

        def text(video_field: VideoField) -> str:
            return str(values.get(video_field, ""))

        def number(video_field: VideoField) -> float:
            return float(values.get(video_field, 0.0))

        return cls(
            publish_date=text(VideoField.PUBLISH_DATE),
            video_title=text(VideoField.VIDEO_TITLE),
            channel_name=text(VideoField.CHANNEL_NAME),
            channel_avatar=text(VideoField.CHANNEL_AVATAR),
            video_description=text(VideoField.VIDEO_DESCRIPTION),
            views=number(VideoField.VIEWS),
            likes=number(VideoField.LIKES),
            comments=number(VideoField.COMMENTS),
            video_url=text(VideoField.VIDEO_URL),
            thumbnail=text(VideoField.THUMBNAIL),
            duration=text(VideoField.DURATION),
            duration_sec=number(VideoField.DURATION_SEC),
            view_rank=number(VideoField.VIEW_RANK),
            days_since_published=number(VideoField.DAYS_SINCE_PUBLISHED),
            views_per_day=number(VideoField.VIEWS_PER_DAY),
            trending_rank=number(VideoField.TRENDING_RANK),
            rank_momentum=number(VideoField.RANK_MOMENTUM),
            creative_advice=text(VideoField.CREATIVE_ADVICE),
            last_data_update=text(VideoField.LAST_DATA_UPDATE),
        )

    def field_values(self) -> dict[VideoField, FieldValue]:
        """Return all record values keyed by canonical field."""
        return {
            VideoField.PUBLISH_DATE: self.publish_date,
            VideoField.VIDEO_TITLE: self.video_title,
            VideoField.CHANNEL_NAME: self.channel_name,
            VideoField.CHANNEL_AVATAR: self.channel_avatar,
            VideoField.VIDEO_DESCRIPTION: self.video_description,
            VideoField.VIEWS: self.views,
            VideoField.LIKES: self.likes,
            VideoField.COMMENTS: self.comments,
            VideoField.VIDEO_URL: self.video_url,
            VideoField.THUMBNAIL: self.thumbnail,
            VideoField.DURATION: self.duration,
            VideoField.DURATION_SEC: self.duration_sec,
            VideoField.VIEW_RANK: self.view_rank,
            VideoField.DAYS_SINCE_PUBLISHED: self.days_since_published,
            VideoField.VIEWS_PER_DAY: self.views_per_day,
            VideoField.TRENDING_RANK: self.trending_rank,
            VideoField.RANK_MOMENTUM: self.rank_momentum,
            VideoField.CREATIVE_ADVICE: self.creative_advice,
            VideoField.LAST_DATA_UPDATE: self.last_data_update,
        }


@dataclass(frozen=True)
class CatalogLoadResult:
    """Outcome of one catalog load.

    Attributes:
        source_uri: Source the catalog text was read from.
        records: Displayable records in source row order.
        last_data_update: Latest parseable update timestamp, if any.
    """

    source_uri: str
    records: tuple[VideoRecord, ...] = field(default_factory=tuple)
    last_data_update: datetime | None = None

    @property
    def record_count(self) -> int:
        """Number of displayable records."""
        return len(self.records)
