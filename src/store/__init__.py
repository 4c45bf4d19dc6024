"""Record persistence helpers.

This package serializes parsed video records for downstream consumers.
"""
