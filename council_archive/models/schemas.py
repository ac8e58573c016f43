"""
Data models for the council question archive.
"""
import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from council_archive.config import config
from council_archive.core.entry_parser import ParseMode


class CamelModel(BaseModel):
    """Base model that serializes field names in camelCase (youtubeUrl, createdAt, ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionForm(CamelModel):
    """Fields an administrator fills in before posting entries."""
    youtube_url: str = ""
    meeting: str = ""
    speaker: Optional[str] = None
    questioner: Optional[str] = None
    raw_input: str = ""
    title: Optional[str] = None
    published_at: Optional[str] = None
    parse_mode: ParseMode = Field(default_factory=lambda: ParseMode(config.DEFAULT_PARSE_MODE))

    @field_validator('youtube_url')
    def strip_url(cls, v):
        return v.strip()


class QuestionRecord(CamelModel):
    """A parsed entry combined with the session details, ready to be stored."""
    date: str
    meeting: str
    speaker: str
    questioner: Optional[str] = None
    summary: str
    timestamp: str
    youtube_url: str
    title: str = ""
    published_at: str = ""
    author: str = ""
    created_at: datetime.datetime


class QuestionOut(QuestionRecord):
    """A stored question as returned by the API."""
    id: int
    link: str = ""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
