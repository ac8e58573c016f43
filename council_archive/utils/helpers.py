"""
Helper utility functions for the council question archive.
"""

import json
from typing import Any, Dict, List


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """
    Shorten text for list previews.

    Args:
        text: Text to truncate
        max_length: Number of characters kept before the suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def date_part(iso_timestamp: str) -> str:
    """Return the date portion of an ISO 8601 timestamp such as ``2025-06-10T01:00:00Z``."""
    return (iso_timestamp or "").split("T")[0]


def read_text(filepath: str) -> str:
    """Read a UTF-8 text file, tolerating a byte order mark."""
    with open(filepath, 'r', encoding='utf-8-sig') as f:
        return f.read()


def dump_json(data: List[Dict[str, Any]], pretty: bool = True) -> str:
    """Serialize records for console output, keeping Japanese text readable."""
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False, default=str)
    return json.dumps(data, ensure_ascii=False, default=str)
