"""Core constants used across catalog modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

HEADER_SCAN_LIMIT = 20
HEADER_MARKERS = ("videotitle", "videourl")
BYTE_ORDER_MARK = "\ufeff"
CACHE_BUSTER_PARAM = "t"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 15.0
DEFAULT_USER_AGENT = "video-catalog-ingest/0.1"
SOURCE_URL_ENV = "CATALOG_SOURCE_URL"
REQUEST_TIMEOUT_ENV = "CATALOG_REQUEST_TIMEOUT"
USER_AGENT_ENV = "CATALOG_USER_AGENT"
S3_REGION_ENV = "CATALOG_S3_REGION"
S3_PROFILE_ENV = "CATALOG_S3_PROFILE"
SOURCE_TEXT_ENCODING = "utf-8"
MISSING_UPDATE_PLACEHOLDER = "---"
EMPTY_CATALOG_MESSAGE = "No data records found in the source sheet."
