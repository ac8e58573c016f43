"""
Posting, listing and deleting archived general questions.
"""

import datetime
import traceback
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from council_archive.config import config
from council_archive.core.entry_parser import Entry, parse
from council_archive.core.links import format_youtube_link
from council_archive.core.search import filter_records
from council_archive.core.youtube_metadata import VideoMeta, YouTubeMetadataClient
from council_archive.db import crud
from council_archive.db.models import Question
from council_archive.models.schemas import QuestionOut, QuestionRecord, SubmissionForm
from council_archive.utils.error_handling import (
    MetadataFetchError,
    MissingFieldError,
    PermissionDeniedError,
    RecordNotFoundError,
    StorageError,
)
from council_archive.utils.logger import logging


def validate_submission(form: SubmissionForm) -> None:
    """Reject a form whose URL, meeting name or pasted text is blank."""
    missing = [
        name for name, value in (
            ("youtubeUrl", form.youtube_url),
            ("meeting", form.meeting),
            ("rawInput", form.raw_input),
        )
        if not (value or "").strip()
    ]
    if missing:
        raise MissingFieldError(missing)


def build_records(
    form: SubmissionForm,
    entries: List[Entry],
    author: str,
    meta: Optional[VideoMeta] = None,
    now: Optional[datetime.datetime] = None,
) -> List[QuestionRecord]:
    """
    Combine parsed entries with the session details of the form.

    Args:
        form: Submitted form
        entries: Entries parsed from the form's pasted text
        author: E-mail of the posting administrator
        meta: Video metadata, if it was looked up
        now: Creation time, defaults to the current UTC time

    Returns:
        One record per entry, in entry order
    """
    now = now or datetime.datetime.utcnow()
    placeholder = config.MISSING_NAME_PLACEHOLDER
    title = form.title or (meta.title if meta else "")
    published_at = form.published_at or (meta.published_at if meta else "")

    return [
        QuestionRecord(
            date=now.date().isoformat(),
            meeting=form.meeting.strip(),
            speaker=(form.speaker or "").strip() or placeholder,
            questioner=(form.questioner or "").strip() or placeholder,
            summary=entry.summary,
            timestamp=entry.timestamp,
            youtube_url=form.youtube_url,
            title=title,
            published_at=published_at,
            author=author,
            created_at=now,
        )
        for entry in entries
    ]


def resolve_metadata(form: SubmissionForm, metadata_client: Optional[YouTubeMetadataClient]) -> Optional[VideoMeta]:
    """Look up video details unless the form already carries them; failures yield None."""
    if form.title or metadata_client is None:
        return None
    try:
        return metadata_client.fetch_for_url(form.youtube_url)
    except MetadataFetchError as e:
        logging.warning(f"Storing questions without video details: {str(e)}")
        return None


def submit_questions(
    db: Session,
    form: SubmissionForm,
    author: str,
    metadata_client: Optional[YouTubeMetadataClient] = None,
) -> List[Question]:
    """
    Parse the pasted text of a form and store one question per entry.

    Every record is committed on its own; if one write fails the earlier
    ones stay stored and a single StorageError is raised.

    Args:
        db: Database session
        form: Submitted form
        author: E-mail of the posting administrator
        metadata_client: Client used to look up the video title and publish date

    Returns:
        The stored questions
    """
    validate_submission(form)

    entries = parse(form.raw_input, form.parse_mode)
    if not entries:
        logging.info("Submission contained no timestamp lines, nothing stored")
        return []

    meta = resolve_metadata(form, metadata_client)
    records = build_records(form, entries, author, meta)

    stored = []
    try:
        for record in records:
            stored.append(crud.create_question(db, record))
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Error storing questions: {str(e)}")
        logging.error(traceback.format_exc())
        raise StorageError() from e

    logging.info(f"{author} stored {len(stored)} questions for {form.meeting}")
    return stored


def delete_question(db: Session, question_id: int, operator: str) -> None:
    """Delete a question; only its author may do so."""
    question = crud.get_question(db, question_id)
    if question is None:
        raise RecordNotFoundError()
    if question.author != operator:
        raise PermissionDeniedError("この投稿を削除できるのは投稿者のみです")

    try:
        crud.delete_question(db, question)
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"Error deleting question {question_id}: {str(e)}")
        raise StorageError("削除に失敗しました") from e

    logging.info(f"{operator} deleted question {question_id}")


def to_output(question: Question) -> QuestionOut:
    """Convert a stored question to its API form, including the jump link."""
    out = QuestionOut.model_validate(question)
    out.link = format_youtube_link(question.youtube_url, question.timestamp)
    return out


def list_questions(db: Session, query: str = "", case_sensitive: Optional[bool] = None) -> List[QuestionOut]:
    """List stored questions newest first, keeping those that match ``query``."""
    questions = filter_records(crud.list_questions(db), query, case_sensitive)
    return [to_output(question) for question in questions]
