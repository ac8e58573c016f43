from pydantic import BaseModel
from typing import Optional, List

from council_archive.core.entry_parser import ParseMode
from council_archive.models.schemas import CamelModel, QuestionOut


class PreviewRequest(CamelModel):
    """Model for parsing pasted text without storing it."""
    raw_input: str
    youtube_url: Optional[str] = None
    parse_mode: Optional[ParseMode] = None


class PreviewEntry(BaseModel):
    """A parsed entry together with its playback offset."""
    timestamp: str
    summary: str
    seconds: int
    link: Optional[str] = None


class PreviewResponse(BaseModel):
    """Model for preview responses."""
    entries: List[PreviewEntry] = []


class SubmitResponse(BaseModel):
    """Model for submission responses."""
    created: int
    questions: List[QuestionOut] = []


class OperatorResponse(BaseModel):
    """Model for the signed-in administrator."""
    email: str
    name: Optional[str] = None
