"""Runtime configuration model for catalog loading.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import os

from core.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    REQUEST_TIMEOUT_ENV,
    S3_PROFILE_ENV,
    S3_REGION_ENV,
    SOURCE_URL_ENV,
    USER_AGENT_ENV,
)
from core.errors import CatalogConfigError


@dataclass(frozen=True)
class CatalogConfig:
    """Validated runtime configuration.

    Attributes:
        source_url: Default catalog source (HTTP URL, local path, or S3 URI).
        request_timeout: HTTP request timeout in seconds.
        user_agent: User-Agent header sent with HTTP requests.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    source_url: str | None
    request_timeout: float
    user_agent: str
    s3_region: str | None
    s3_profile: str | None

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CatalogConfigError: If environment values are invalid.
        """
        source_url = os.getenv(SOURCE_URL_ENV, "").strip()
        timeout_value = os.getenv(REQUEST_TIMEOUT_ENV, str(DEFAULT_REQUEST_TIMEOUT_SECONDS))
        return cls(
            source_url=source_url or None,
            request_timeout=parse_request_timeout(timeout_value),
            user_agent=os.getenv(USER_AGENT_ENV) or DEFAULT_USER_AGENT,
            s3_region=os.getenv(S3_REGION_ENV),
            s3_profile=os.getenv(S3_PROFILE_ENV),
        )


def parse_request_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment or CLI.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        CatalogConfigError: If value is not a positive finite number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise CatalogConfigError(
            f"Invalid {REQUEST_TIMEOUT_ENV} value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {REQUEST_TIMEOUT_ENV} to a positive number."
        ) from error
    if not math.isfinite(timeout) or timeout <= 0:
        raise CatalogConfigError(
            f"Invalid {REQUEST_TIMEOUT_ENV} value: "
            f"expected a positive number of seconds, got '{raw_value}'."
        )
    return timeout
