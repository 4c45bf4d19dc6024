"""Video catalog ingestion pipeline.

This package reads spreadsheet CSV exports and turns them into
immutable, displayable video records.
"""
