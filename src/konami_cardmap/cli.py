#!/usr/bin/env python3
"""Command-line interface for the KONAMI ID mapping builder."""

import argparse
import logging
import sys
from pathlib import Path

from konami_cardmap.config import (
    DEFAULT_DOWNLOAD_URL,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_TIMEOUT,
    BuilderConfig,
)
from konami_cardmap.generate_cardmap import generate_cardmap
from konami_cardmap.logging_utils import setup_cli_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser; every option has a working default."""
    parser = argparse.ArgumentParser(
        description="Generate a C++ header mapping KONAMI IDs to card names"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Header file to write (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=DEFAULT_DOWNLOAD_URL,
        help="Card database endpoint (default: YGOPRODeck cardinfo with misc=yes)",
    )
    parser.add_argument(
        "--include-negative-ids",
        action="store_true",
        help="Keep negative KONAMI IDs instead of skipping them",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_cli_logging(verbose=args.verbose)

    config = BuilderConfig(
        download_url=args.url,
        output_file=args.output,
        include_negative_ids=args.include_negative_ids,
        timeout=args.timeout,
    )

    try:
        generate_cardmap(config)
    except Exception as e:
        log.error("Error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
