"""
Parser that turns pasted timestamp notes into (timestamp, summary) entries.

Two input styles are accepted:

    0:02 キャッシュレス対応の質問
    2:01 導入状況の回答

and the multi-line form, where lines following a timestamp line belong to
the same summary until the next timestamp line:

    (0:02) キャッシュレス対応の質問
    町内の店舗での導入について
    (2:01) 導入状況の回答

Parsing is best effort: lines that cannot be used are skipped or absorbed
into the open entry, and nothing here ever raises on malformed text.
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


# Full-width space (U+3000) is common in Japanese notes.
TIMESTAMP_LINE = re.compile(r"^\(?(\d+:\d+)\)?[ \t　]+(\S.*)$")


class Entry(BaseModel):
    """One parsed timestamp with its summary text."""
    timestamp: str
    summary: str

    model_config = {"frozen": True}


class ParseMode(str, Enum):
    """Supported layouts of pasted text."""
    MULTILINE = "multiline"
    PER_LINE = "per_line"


def parse_entries(text: str) -> List[Entry]:
    """
    Parse pasted text where a summary may continue over several lines.

    Blank lines are dropped wherever they appear; they neither close the
    open entry nor become empty summary lines.

    Args:
        text: Raw pasted text

    Returns:
        Entries in input order
    """
    entries: List[Entry] = []
    timestamp: Optional[str] = None
    lines: List[str] = []

    for raw_line in (text or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        match = TIMESTAMP_LINE.match(line)
        if match:
            if timestamp is not None:
                entries.append(Entry(timestamp=timestamp, summary="\n".join(lines)))
            timestamp, first = match.groups()
            lines = [first]
        elif timestamp is not None:
            lines.append(line)
        # text before the first timestamp line is dropped

    if timestamp is not None:
        entries.append(Entry(timestamp=timestamp, summary="\n".join(lines)))

    return entries


def parse_entries_per_line(text: str) -> List[Entry]:
    """Parse text holding exactly one timestamp and summary per line, skipping anything else."""
    entries = []
    for raw_line in (text or "").splitlines():
        match = TIMESTAMP_LINE.match(raw_line.strip())
        if not match:
            continue
        timestamp, summary = match.groups()
        entries.append(Entry(timestamp=timestamp, summary=summary))
    return entries


def parse(text: str, mode: ParseMode = ParseMode.MULTILINE) -> List[Entry]:
    """Parse pasted text using the given layout."""
    if ParseMode(mode) == ParseMode.PER_LINE:
        return parse_entries_per_line(text)
    return parse_entries(text)
