#!/usr/bin/env python3
"""Output file utilities."""

import logging
from pathlib import Path

from konami_cardmap.exceptions import OutputWriteError

log = logging.getLogger(__name__)


def write_string_to_file(file_path: Path, file_contents: str) -> None:
    """Write text to a file, truncating anything already there.

    Line endings are written exactly as given, so the output is identical on
    every platform.

    Args:
        file_path: Destination file path
        file_contents: Text to write (encoded as UTF-8)

    Raises:
        OutputWriteError: If the file cannot be opened or written

    """
    try:
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(file_contents)
    except OSError as e:
        raise OutputWriteError(f"Failed to write {file_path}: {e}") from e


def get_file_size_human(file_path: Path) -> str:
    """Get human-readable file size.

    Args:
        file_path: Path to file

    Returns:
        Human-readable size string (e.g., "1.5 MB")

    """
    if not file_path.exists():
        return "0 B"

    size = file_path.stat().st_size

    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"
