"""
Format Helpers

Formatting utilities for artifact statistics and log output.
"""

from __future__ import annotations

from pathlib import Path

_UNITS = ["Bytes", "KB", "MB", "GB"]


def format_bytes(size: int) -> str:
    """
    Format a byte count for display.

    Args:
        size: Number of bytes

    Returns:
        Formatted string like "1.5 KB", with trailing zeros dropped

    Example:
        format_bytes(1536)  # "1.5 KB"
    """
    if size <= 0:
        return "0 Bytes"

    index = 0
    while size >= 1024 ** (index + 1) and index < len(_UNITS) - 1:
        index += 1
    value = round(size / 1024**index, 2)
    return f"{value:g} {_UNITS[index]}"


def directory_size(path: str | Path) -> int:
    """
    Total size of all files below a directory.

    Entries that vanish or cannot be read while walking are skipped.

    Args:
        path: Directory to measure

    Returns:
        Size in bytes, 0 for a missing directory
    """
    root = Path(path)
    if not root.is_dir():
        return 0

    total = 0
    for entry in root.rglob("*"):
        try:
            if entry.is_file():
                total += entry.stat().st_size
        except OSError:
            continue
    return total
