"""
Tests for posting, listing and deleting archived questions.
"""

import datetime
import pytest
from unittest.mock import patch, MagicMock
from sqlalchemy.exc import OperationalError

from council_archive.core import archive
from council_archive.core.entry_parser import Entry, ParseMode
from council_archive.core.youtube_metadata import VideoMeta
from council_archive.db import crud
from council_archive.models.schemas import SubmissionForm
from council_archive.utils.error_handling import (
    MetadataFetchError,
    MissingFieldError,
    PermissionDeniedError,
    RecordNotFoundError,
    StorageError,
)

AUTHOR = "clerk@example.jp"


@pytest.fixture
def form(test_video_url, pasted_text):
    return SubmissionForm(
        youtube_url=test_video_url,
        meeting="2025年6月定例会",
        speaker="町長",
        questioner="吉川康治議員",
        raw_input=pasted_text,
    )


@pytest.fixture
def metadata_client():
    client = MagicMock()
    client.fetch_for_url.return_value = VideoMeta(title="6月定例会 一般質問", published_at="2025-06-12T01:23:45Z")
    return client


@pytest.mark.parametrize("field", ["youtube_url", "meeting", "raw_input"])
def test_blank_required_field_is_rejected(form, field):
    blank = form.model_copy(update={field: "   "})

    with pytest.raises(MissingFieldError) as exc_info:
        archive.validate_submission(blank)

    assert len(exc_info.value.fields) == 1


def test_build_records_fills_placeholders(form):
    now = datetime.datetime(2025, 6, 20, 9, 30)
    form = form.model_copy(update={"speaker": "", "questioner": None})

    records = archive.build_records(form, [Entry(timestamp="0:02", summary="質問")], AUTHOR, None, now)

    assert len(records) == 1
    record = records[0]
    assert record.date == "2025-06-20"
    assert record.speaker == "（未入力）"
    assert record.questioner == "（未入力）"
    assert record.title == ""
    assert record.published_at == ""
    assert record.author == AUTHOR
    assert record.created_at == now
    assert record.model_dump(by_alias=True)["youtubeUrl"] == form.youtube_url


def test_build_records_prefers_form_metadata(form):
    form = form.model_copy(update={"title": "入力済みタイトル", "published_at": "2025-06-01T00:00:00Z"})
    meta = VideoMeta(title="取得したタイトル", published_at="2025-06-12T00:00:00Z")

    record = archive.build_records(form, [Entry(timestamp="0:02", summary="質問")], AUTHOR, meta)[0]

    assert record.title == "入力済みタイトル"
    assert record.published_at == "2025-06-01T00:00:00Z"


def test_submit_stores_one_question_per_entry(db_session, form, metadata_client):
    stored = archive.submit_questions(db_session, form, AUTHOR, metadata_client)

    assert [q.timestamp for q in stored] == ["0:02", "2:01", "12:30"]
    assert stored[0].summary == "キャッシュレス対応の質問\n町内の店舗での導入について"
    assert all(q.title == "6月定例会 一般質問" for q in stored)
    assert all(q.author == AUTHOR for q in stored)
    assert len(crud.list_questions(db_session)) == 3


def test_submit_per_line_mode(db_session, form):
    form = form.model_copy(update={"parse_mode": ParseMode.PER_LINE})

    stored = archive.submit_questions(db_session, form, AUTHOR)

    assert stored[0].summary == "キャッシュレス対応の質問"
    assert len(stored) == 3


def test_submit_without_entries_stores_nothing(db_session, form):
    form = form.model_copy(update={"raw_input": "タイムスタンプなし"})

    assert archive.submit_questions(db_session, form, AUTHOR) == []
    assert crud.list_questions(db_session) == []


def test_metadata_failure_does_not_block_submission(db_session, form, metadata_client):
    metadata_client.fetch_for_url.side_effect = MetadataFetchError()

    stored = archive.submit_questions(db_session, form, AUTHOR, metadata_client)

    assert len(stored) == 3
    assert stored[0].title == ""


def test_metadata_not_fetched_when_form_has_title(db_session, form, metadata_client):
    form = form.model_copy(update={"title": "入力済み"})

    archive.submit_questions(db_session, form, AUTHOR, metadata_client)

    metadata_client.fetch_for_url.assert_not_called()


def test_write_failure_keeps_earlier_records(db_session, form):
    real_create = crud.create_question
    calls = {"count": 0}

    def flaky_create(db, record):
        calls["count"] += 1
        if calls["count"] == 2:
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))
        return real_create(db, record)

    with patch("council_archive.core.archive.crud.create_question", side_effect=flaky_create):
        with pytest.raises(StorageError):
            archive.submit_questions(db_session, form, AUTHOR)

    assert len(crud.list_questions(db_session)) == 1


def test_list_questions_filters_and_links(db_session, form):
    archive.submit_questions(db_session, form, AUTHOR)

    results = archive.list_questions(db_session, "導入状況")

    assert len(results) == 1
    assert results[0].timestamp == "2:01"
    assert results[0].link == f"{form.youtube_url}&t=121s"


def test_list_questions_newest_submission_first(db_session, form):
    first = form.model_copy(update={"raw_input": "0:10 古い投稿"})
    second = form.model_copy(update={"raw_input": "0:20 新しい投稿\n0:30 同じ投稿の続き"})
    archive.submit_questions(db_session, first, AUTHOR)
    archive.submit_questions(db_session, second, AUTHOR)

    summaries = [q.summary for q in archive.list_questions(db_session)]

    assert summaries == ["新しい投稿", "同じ投稿の続き", "古い投稿"]


def test_only_author_can_delete(db_session, form):
    question = archive.submit_questions(db_session, form, AUTHOR)[0]

    with pytest.raises(PermissionDeniedError):
        archive.delete_question(db_session, question.id, "someone@example.jp")

    archive.delete_question(db_session, question.id, AUTHOR)
    assert crud.get_question(db_session, question.id) is None


def test_delete_missing_question(db_session):
    with pytest.raises(RecordNotFoundError):
        archive.delete_question(db_session, 999, AUTHOR)
