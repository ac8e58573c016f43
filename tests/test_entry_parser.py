"""
Tests for the pasted-text entry parser.
"""

import pytest

from council_archive.core.entry_parser import (
    Entry,
    ParseMode,
    parse,
    parse_entries,
    parse_entries_per_line,
)


def test_one_entry_per_line():
    """Test that every timestamp line becomes one entry, in order."""
    entries = parse_entries("0:02 キャッシュレス対応の質問\n2:01 導入状況の回答\n10:45 再質問")

    assert [e.timestamp for e in entries] == ["0:02", "2:01", "10:45"]
    assert [e.summary for e in entries] == ["キャッシュレス対応の質問", "導入状況の回答", "再質問"]


def test_parentheses_are_stripped():
    entries = parse_entries("(0:02) hello")

    assert entries == [Entry(timestamp="0:02", summary="hello")]


def test_continuation_lines_attach_to_previous_entry():
    entries = parse_entries("0:02 first\nmore text\n2:01 second")

    assert len(entries) == 2
    assert entries[0].summary == "first\nmore text"
    assert entries[1] == Entry(timestamp="2:01", summary="second")


def test_text_before_first_timestamp_is_dropped():
    entries = parse_entries("stray\n0:05 ok")

    assert entries == [Entry(timestamp="0:05", summary="ok")]


def test_blank_lines_are_dropped_inside_an_entry():
    """Test that a blank line neither closes an entry nor adds an empty line."""
    entries = parse_entries("0:02 first\n\n   \nstill first\n2:01 second")

    assert entries[0].summary == "first\nstill first"
    assert len(entries) == 2


def test_full_width_space_separator(pasted_text):
    entries = parse_entries(pasted_text)

    assert [e.timestamp for e in entries] == ["0:02", "2:01", "12:30"]
    assert entries[0].summary == "キャッシュレス対応の質問\n町内の店舗での導入について"
    assert entries[2].summary == "今後の予定"


def test_surrounding_whitespace_and_crlf():
    entries = parse_entries("  0:02   first  \r\n\tcontinued\t\r\n")

    assert entries == [Entry(timestamp="0:02", summary="first\ncontinued")]


def test_timestamp_without_summary_is_a_continuation():
    """Test that a bare timestamp does not open an entry of its own."""
    entries = parse_entries("0:02 first\n3:00\n4:00 second")

    assert entries[0].summary == "first\n3:00"
    assert entries[1].timestamp == "4:00"


@pytest.mark.parametrize("text", ["", "   \n\n", "no timestamps here\nnone at all", None])
def test_unparseable_input_gives_no_entries(text):
    assert parse_entries(text) == []


def test_parsing_is_repeatable(pasted_text):
    assert parse_entries(pasted_text) == parse_entries(pasted_text)


def test_per_line_skips_non_matching_lines():
    entries = parse_entries_per_line("見出し\n(0:02) キャッシュレス\n続きの行\n2:01 回答")

    assert entries == [
        Entry(timestamp="0:02", summary="キャッシュレス"),
        Entry(timestamp="2:01", summary="回答"),
    ]


def test_per_line_strips_indented_lines():
    assert parse_entries_per_line("  0:02 hello") == [Entry(timestamp="0:02", summary="hello")]


def test_per_line_trailing_spaces_are_not_kept():
    assert parse_entries_per_line("0:02 hello  \t")[0].summary == "hello"


@pytest.mark.parametrize("text", ["0:02 ", "0:02", "(0:02)　"])
def test_per_line_timestamp_without_summary_is_skipped(text):
    assert parse_entries_per_line(text) == []


def test_per_line_counts_match_multiline_for_one_entry_per_line():
    text = "  0:02 質問\n\n(2:01)　回答  \n10:45 再質問"

    assert parse_entries_per_line(text) == parse_entries(text)
    assert len(parse_entries_per_line(text)) == 3


def test_parse_dispatches_on_mode():
    text = "0:02 first\nmore text"

    assert parse(text, ParseMode.MULTILINE)[0].summary == "first\nmore text"
    assert parse(text, ParseMode.PER_LINE)[0].summary == "first"
    assert parse(text, "per_line") == parse(text, ParseMode.PER_LINE)


def test_entries_are_immutable():
    entry = Entry(timestamp="0:02", summary="hello")

    with pytest.raises(Exception):
        entry.summary = "changed"
