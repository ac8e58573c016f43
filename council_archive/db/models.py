"""
SQLAlchemy models for the council question archive.
"""

import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer

from council_archive.db.database import Base


class Question(Base):
    """One timestamped summary from a general-question session."""
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(10), nullable=False)  # Submission date, YYYY-MM-DD
    meeting = Column(String(255), nullable=False)  # e.g. 2025年6月定例会
    speaker = Column(String(255), nullable=False)
    questioner = Column(String(255), nullable=True)
    summary = Column(Text, nullable=False)
    timestamp = Column(String(16), nullable=False)  # minutes:seconds
    youtube_url = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False, default="")
    published_at = Column(String(32), nullable=False, default="")
    author = Column(String(255), nullable=False, default="")
    created_at = Column(DateTime, default=datetime.datetime.utcnow, index=True)

    def __repr__(self):
        return f"<Question(id={self.id}, meeting='{self.meeting}', timestamp='{self.timestamp}')>"
