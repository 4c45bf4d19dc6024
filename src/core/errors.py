"""Catalog exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Parsing stages never raise; only the source and loader boundaries do.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all catalog failures."""


class CatalogConfigError(CatalogError):
    """Raised for invalid runtime configuration."""


class CatalogSourceError(CatalogError):
    """Raised when the catalog source text cannot be fetched or read."""


class CatalogDependencyError(CatalogError):
    """Raised when an optional runtime dependency is missing."""


class CatalogEmptyError(CatalogError):
    """Raised when a load produces no displayable video records."""
