"""
YouTube link helpers and the entry preview built on them.
"""

import re
from typing import List, Optional

from council_archive.core.entry_parser import Entry, ParseMode, parse


def timestamp_to_seconds(timestamp: str) -> int:
    """
    Convert a ``minutes:seconds`` timestamp into a playback offset.

    Seconds are not range checked, so ``"1:90"`` gives 150.

    Args:
        timestamp: Timestamp such as ``"2:01"``

    Returns:
        Offset in whole seconds
    """
    minutes, seconds = timestamp.split(":")
    return int(minutes, 10) * 60 + int(seconds, 10)


def format_youtube_link(url: str, timestamp: str) -> str:
    """Build a link that starts playback of ``url`` at ``timestamp``."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}t={timestamp_to_seconds(timestamp)}s"


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL."""
    if not url:
        return None

    # YouTube URL patterns
    patterns = [
        r"(?:watch\?v=)([0-9A-Za-z_-]{11})",
        r"(?:v=|youtu\.be\/)([0-9A-Za-z_-]{11})",
        r"(?:embed\/|shorts\/|live\/)([0-9A-Za-z_-]{11})",
    ]

    for pattern in patterns:
        match = re.search(pattern, url)
        if match:
            return match.group(1)

    return None


def preview_entries(text: str, youtube_url: Optional[str] = None, mode: ParseMode = ParseMode.MULTILINE) -> List[dict]:
    """
    Parse pasted text and describe each entry.

    Args:
        text: Raw pasted text
        youtube_url: Optional video URL to build jump links for
        mode: Layout of the pasted text

    Returns:
        List of dictionaries with timestamp, seconds, summary and link
    """
    entries: List[Entry] = parse(text, mode)
    return [
        {
            "timestamp": entry.timestamp,
            "seconds": timestamp_to_seconds(entry.timestamp),
            "summary": entry.summary,
            "link": format_youtube_link(youtube_url, entry.timestamp) if youtube_url else None,
        }
        for entry in entries
    ]
