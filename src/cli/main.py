"""Video catalog CLI entry points.

This module exposes the catalog load command.
It maps argparse commands onto the ingest pipeline.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import CatalogConfig, parse_request_timeout
from core.errors import CatalogError
from ingest.data_freshness import format_data_update
from ingest.pipeline import load_video_catalog
from store.record_payload import write_video_records_jsonl


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="video-catalog",
        description="Load a spreadsheet video catalog export",
    )
    parser.add_argument("--source", help="Override CATALOG_SOURCE_URL for this command")
    parser.add_argument("--timeout", help="Override CATALOG_REQUEST_TIMEOUT in seconds")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_load_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the video catalog CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.timeout)
        if args.command == "load":
            return _run_load_command(config, args)
    except CatalogError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(timeout: str | None) -> CatalogConfig:
    """Build runtime config with optional timeout override.

    Args:
        timeout: Optional timeout override text.

    Returns:
        Validated config.
    """
    config = CatalogConfig.from_env()
    if timeout:
        config = replace(config, request_timeout=parse_request_timeout(timeout))
    return config


def _run_load_command(config: CatalogConfig, args: argparse.Namespace) -> int:
    """Handle load command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = load_video_catalog(config, source_uri=args.source)
    print(f"records={result.record_count}")
    print(f"last_update={format_data_update(result.last_data_update)}")
    if args.output:
        output_path = Path(args.output).expanduser()
        write_video_records_jsonl(output_path, result.records)
        print(f"output={output_path}")
    return 0


def _add_load_command(subparsers: Any) -> None:
    """Register load subcommand."""
    parser = subparsers.add_parser("load", help="Fetch, parse, and summarize the catalog")
    parser.add_argument("--output", help="Optional JSONL output path for parsed records")
