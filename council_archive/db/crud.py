"""
CRUD operations for the council question archive database.
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from council_archive.db.models import Question
from council_archive.models.schemas import QuestionRecord


def create_question(db: Session, record: QuestionRecord) -> Question:
    """Create and commit a single question record."""
    question = Question(
        date=record.date,
        meeting=record.meeting,
        speaker=record.speaker,
        questioner=record.questioner,
        summary=record.summary,
        timestamp=record.timestamp,
        youtube_url=record.youtube_url,
        title=record.title,
        published_at=record.published_at,
        author=record.author,
        created_at=record.created_at,
    )
    db.add(question)
    db.commit()
    db.refresh(question)
    return question


def get_question(db: Session, question_id: int) -> Optional[Question]:
    """Get a question by ID."""
    return db.query(Question).filter(Question.id == question_id).first()


def list_questions(db: Session) -> List[Question]:
    """Get all questions, newest submission first and in entry order within a submission."""
    return db.query(Question).order_by(Question.created_at.desc(), Question.id.asc()).all()


def delete_question(db: Session, question: Question) -> None:
    """Delete a question."""
    db.delete(question)
    db.commit()
