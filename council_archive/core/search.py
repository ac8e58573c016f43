"""
Keyword filtering over archived question records.
"""

from typing import Any, Iterable, List, Mapping, Sequence, Union

from council_archive.config import config

SEARCH_FIELDS = ("speaker", "questioner", "date", "summary", "meeting")


def _field(record: Union[Mapping[str, Any], Any], name: str):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def matches(record, query: str, case_sensitive: bool = True, fields: Sequence[str] = SEARCH_FIELDS) -> bool:
    """Return True if ``query`` is a substring of any searched field of ``record``."""
    if not query:
        return True

    needle = query if case_sensitive else query.casefold()
    for name in fields:
        value = _field(record, name)
        if not value:
            continue
        haystack = str(value) if case_sensitive else str(value).casefold()
        if needle in haystack:
            return True
    return False


def filter_records(
    records: Iterable,
    query: str,
    case_sensitive: bool = None,
    fields: Sequence[str] = SEARCH_FIELDS,
) -> List:
    """
    Filter records by substring match on the searchable fields.

    Args:
        records: Records as dicts or objects with attributes
        query: Search text; empty keeps every record
        case_sensitive: Matching policy, defaults to ``config.SEARCH_CASE_SENSITIVE``
        fields: Field names to search

    Returns:
        Matching records, in their original order
    """
    if case_sensitive is None:
        case_sensitive = config.SEARCH_CASE_SENSITIVE
    return [record for record in records if matches(record, query, case_sensitive, fields)]
