#!/usr/bin/env python3
"""HTTP access to the YGOPRODeck card database."""

import logging

import requests

from konami_cardmap.config import DEFAULT_TIMEOUT
from konami_cardmap.exceptions import NetworkError

log = logging.getLogger(__name__)


def download_file_contents(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download the body of ``url`` as text.

    Args:
        url: The URL to download from
        timeout: Seconds to wait for the server before giving up

    Returns:
        The decoded response body

    Raises:
        NetworkError: If the request fails or the server returns an error status

    """
    log.debug("GET %s (timeout %.1fs)", url, timeout)

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        contents = response.text
    except requests.RequestException as e:
        raise NetworkError(f"Failed to download {url}: {e}") from e

    log.debug(
        "Received HTTP %d with %d characters", response.status_code, len(contents)
    )
    return contents
