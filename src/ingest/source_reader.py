"""Catalog source readers.

This module loads the raw CSV text of a catalog from an HTTP(S) endpoint,
an S3 object, or a local file. Every call performs a fresh read; HTTP
requests carry a cache-busting query parameter so intermediaries never
serve a stale export.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from core.config import CatalogConfig
from core.constants import CACHE_BUSTER_PARAM, SOURCE_TEXT_ENCODING
from core.errors import CatalogDependencyError, CatalogSourceError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def read_source_text(source_uri: str, config: CatalogConfig) -> str:
    """Read catalog CSV text from a URL, S3 URI, or local path.

    Args:
        source_uri: ``http(s)://`` URL, ``s3://bucket/key`` URI, or file path.
        config: Runtime configuration for HTTP and S3 defaults.

    Returns:
        Full CSV text body.

    Raises:
        CatalogSourceError: If the source cannot be fetched or read.
        CatalogDependencyError: If S3 support is requested without boto3.
    """
    scheme = urlparse(source_uri).scheme.lower()
    if scheme in ("http", "https"):
        text = _read_http_text(source_uri, config)
    elif scheme == "s3":
        text = _read_s3_text(source_uri, config)
    else:
        text = _read_local_text(Path(source_uri).expanduser())
    _LOGGER.info("catalog_source_fetched", source_uri=source_uri, char_count=len(text))
    return text


def add_cache_buster(url: str, timestamp_ms: int | None = None) -> str:
    """Append a millisecond timestamp query parameter to a URL.

    Args:
        url: Source URL, with or without an existing query string.
        timestamp_ms: Explicit timestamp, defaults to the current time.

    Returns:
        URL carrying ``t=<timestamp>``.
    """
    stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    separator = "&" if urlparse(url).query else "?"
    return f"{url}{separator}{CACHE_BUSTER_PARAM}={stamp}"


def _read_http_text(url: str, config: CatalogConfig) -> str:
    """Fetch catalog text over HTTP(S).

    Args:
        url: Source URL.
        config: Runtime configuration with timeout and user agent.

    Returns:
        Decoded response body.

    Raises:
        CatalogSourceError: On transport failure or non-success status.
    """
    request_url = add_cache_buster(url)
    try:
        response = requests.get(
            request_url,
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )
    except requests.RequestException as error:
        raise CatalogSourceError(
            f"Failed to fetch catalog from {url}: {error}. "
            "Check network connectivity and the configured source URL."
        ) from error
    if not response.ok:
        raise CatalogSourceError(f"HTTP error! status: {response.status_code}")
    return response.content.decode(SOURCE_TEXT_ENCODING, errors="replace")


def _read_local_text(source_path: Path) -> str:
    """Read catalog text from the local file system.

    Args:
        source_path: CSV file path.

    Returns:
        File contents.

    Raises:
        CatalogSourceError: If the path is missing or unreadable.
    """
    if not source_path.is_file():
        raise CatalogSourceError(
            f"Failed to read catalog at {source_path}: file does not exist. "
            "Provide an existing CSV file, an http(s) URL, or an s3:// URI."
        )
    try:
        return source_path.read_text(encoding=SOURCE_TEXT_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise CatalogSourceError(
            f"Failed to read catalog at {source_path}: {error}."
        ) from error


def _read_s3_text(source_uri: str, config: CatalogConfig) -> str:
    """Read catalog text from one S3 object.

    Args:
        source_uri: ``s3://bucket/key`` URI.
        config: Runtime configuration for region/profile.

    Returns:
        Decoded object body.

    Raises:
        CatalogSourceError: If the URI is malformed or the read fails.
    """
    bucket, key = _parse_s3_object_uri(source_uri)
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=bucket, Key=key)["Body"].read()
    except Exception as error:
        raise CatalogSourceError(
            f"Failed to read catalog object {source_uri}: {error}."
        ) from error
    return body.decode(SOURCE_TEXT_ENCODING)


def _parse_s3_object_uri(source_uri: str) -> tuple[str, str]:
    """Split an ``s3://bucket/key`` URI into bucket and key.

    Raises:
        CatalogSourceError: If bucket or key is missing.
    """
    parsed = urlparse(source_uri)
    bucket = parsed.netloc
    key = parsed.path.lstrip("/")
    if not bucket or not key:
        raise CatalogSourceError(
            f"Invalid S3 catalog URI '{source_uri}': expected s3://bucket/key."
        )
    return bucket, key


def _create_s3_client(config: CatalogConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        CatalogDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise CatalogDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install boto3 to load catalogs from s3:// sources."
        ) from error
    session_kwargs = _build_boto3_session_kwargs(config)
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _build_boto3_session_kwargs(config: CatalogConfig) -> dict[str, str]:
    """Build boto3 Session kwargs from config."""
    kwargs: dict[str, str] = {}
    if config.s3_profile:
        kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        kwargs["region_name"] = config.s3_region
    return kwargs
