"""
Tests for keyword filtering.
"""

from types import SimpleNamespace
from unittest.mock import patch

from council_archive.core.search import filter_records


RECORDS = [
    {"id": 1, "date": "2025-06-10", "meeting": "2025年6月定例会", "speaker": "町長",
     "questioner": "吉川康治議員", "summary": "Cashless payment の導入"},
    {"id": 2, "date": "2025-03-04", "meeting": "2025年3月定例会", "speaker": "教育長",
     "questioner": None, "summary": "子育て支援について"},
]


def ids(records):
    return [r["id"] if isinstance(r, dict) else r.id for r in records]


def test_empty_query_keeps_everything():
    assert ids(filter_records(RECORDS, "")) == [1, 2]


def test_matches_any_searched_field():
    assert ids(filter_records(RECORDS, "吉川")) == [1]
    assert ids(filter_records(RECORDS, "2025-03")) == [2]
    assert ids(filter_records(RECORDS, "子育て")) == [2]
    assert ids(filter_records(RECORDS, "定例会")) == [1, 2]
    assert ids(filter_records(RECORDS, "教育長")) == [2]


def test_missing_fields_never_match():
    assert filter_records(RECORDS, "None") == []


def test_case_sensitive_matching():
    assert ids(filter_records(RECORDS, "cashless", case_sensitive=True)) == []
    assert ids(filter_records(RECORDS, "Cashless", case_sensitive=True)) == [1]


def test_case_insensitive_matching():
    assert ids(filter_records(RECORDS, "CASHLESS", case_sensitive=False)) == [1]


def test_default_policy_comes_from_config():
    with patch("council_archive.core.search.config") as mock_config:
        mock_config.SEARCH_CASE_SENSITIVE = False
        assert ids(filter_records(RECORDS, "cashless")) == [1]


def test_objects_with_attributes():
    record = SimpleNamespace(id=3, speaker="町長", questioner=None, date="2025-06-10",
                             summary="観光", meeting="6月")
    assert ids(filter_records([record], "観光")) == [3]


def test_restricting_fields():
    assert filter_records(RECORDS, "町長", fields=("summary",)) == []
