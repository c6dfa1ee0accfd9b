#!/usr/bin/env python3
"""Console logging for the mapping builder."""

import logging
import sys

CLI_FORMAT = "%(levelname)s: %(message)s"


def setup_cli_logging(verbose: bool = False) -> None:
    """Send log records to stdout as ``LEVEL: message`` lines.

    Calling this again replaces the previous handler rather than adding one.

    Args:
        verbose: If True, show DEBUG messages

    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=CLI_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO)
