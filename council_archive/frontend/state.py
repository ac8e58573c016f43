"""
Front-end state for the archive page.

All page state lives in one ArchiveState value. UI callbacks are turned into
events, and ``reduce`` returns the next state together with the side effects
(API calls, notices) the caller should run. ``reduce`` itself performs no I/O.
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field

from council_archive.core.links import extract_video_id
from council_archive.utils.error_handling import MissingFieldError

FORM_FIELDS = ("youtube_url", "meeting", "questioner", "speaker", "raw_input")


class ArchiveState(BaseModel):
    operator: Optional[str] = None
    token: Optional[str] = None
    records: List[Dict[str, Any]] = Field(default_factory=list)
    query: str = ""
    youtube_url: str = ""
    meeting: str = ""
    questioner: str = ""
    speaker: str = ""
    raw_input: str = ""
    video_meta: Optional[Dict[str, str]] = None
    expanded_id: Optional[int] = None
    pending_delete_id: Optional[int] = None
    submitting: bool = False

    model_config = {"frozen": True}

    def form(self) -> Dict[str, Any]:
        """Submission payload for the API, in its camelCase field names."""
        payload = {
            "youtubeUrl": self.youtube_url,
            "meeting": self.meeting,
            "speaker": self.speaker,
            "questioner": self.questioner,
            "rawInput": self.raw_input,
        }
        if self.video_meta:
            payload["title"] = self.video_meta.get("title", "")
            payload["publishedAt"] = self.video_meta.get("published_at", "")
        return payload


# Events

class SignedIn(BaseModel):
    kind: Literal["signed_in"] = "signed_in"
    email: str
    token: str


class SignedOut(BaseModel):
    kind: Literal["signed_out"] = "signed_out"


class FieldChanged(BaseModel):
    kind: Literal["field_changed"] = "field_changed"
    field: str
    value: str


class QueryChanged(BaseModel):
    kind: Literal["query_changed"] = "query_changed"
    query: str


class SubmitRequested(BaseModel):
    kind: Literal["submit_requested"] = "submit_requested"


class SubmitSucceeded(BaseModel):
    kind: Literal["submit_succeeded"] = "submit_succeeded"
    created: int = 0


class SubmitFailed(BaseModel):
    kind: Literal["submit_failed"] = "submit_failed"
    message: str = "保存に失敗しました"


class RecordsLoaded(BaseModel):
    kind: Literal["records_loaded"] = "records_loaded"
    records: List[Dict[str, Any]]


class DeleteRequested(BaseModel):
    kind: Literal["delete_requested"] = "delete_requested"
    record_id: int


class DeleteConfirmed(BaseModel):
    kind: Literal["delete_confirmed"] = "delete_confirmed"


class DeleteCancelled(BaseModel):
    kind: Literal["delete_cancelled"] = "delete_cancelled"


class DeleteSucceeded(BaseModel):
    kind: Literal["delete_succeeded"] = "delete_succeeded"
    record_id: int


class VideoMetaLoaded(BaseModel):
    kind: Literal["video_meta_loaded"] = "video_meta_loaded"
    youtube_url: str
    meta: Optional[Dict[str, str]] = None


class ToggleExpanded(BaseModel):
    kind: Literal["toggle_expanded"] = "toggle_expanded"
    record_id: int


Event = Union[
    SignedIn, SignedOut, FieldChanged, QueryChanged, SubmitRequested, SubmitSucceeded,
    SubmitFailed, RecordsLoaded, DeleteRequested, DeleteConfirmed, DeleteCancelled, DeleteSucceeded,
    VideoMetaLoaded, ToggleExpanded,
]


# Effects

class FetchRecords(BaseModel):
    kind: Literal["fetch_records"] = "fetch_records"


class FetchVideoMeta(BaseModel):
    kind: Literal["fetch_video_meta"] = "fetch_video_meta"
    youtube_url: str


class SubmitEntries(BaseModel):
    kind: Literal["submit_entries"] = "submit_entries"
    token: Optional[str] = None
    form: Dict[str, Any]


class DeleteRecord(BaseModel):
    kind: Literal["delete_record"] = "delete_record"
    token: Optional[str] = None
    record_id: int


class Notify(BaseModel):
    kind: Literal["notify"] = "notify"
    level: Literal["info", "success", "error"] = "info"
    message: str


Effect = Union[FetchRecords, FetchVideoMeta, SubmitEntries, DeleteRecord, Notify]


def _missing_fields(state: ArchiveState) -> List[str]:
    return [name for name in ("youtube_url", "raw_input", "meeting") if not getattr(state, name).strip()]


def reduce(state: ArchiveState, event: Event) -> Tuple[ArchiveState, List[Effect]]:
    """
    Apply one UI event to the page state.

    Args:
        state: Current state
        event: What happened in the UI or which request finished

    Returns:
        The next state and the effects to run, in order
    """
    if isinstance(event, SignedIn):
        return state.model_copy(update={"operator": event.email, "token": event.token}), []

    if isinstance(event, SignedOut):
        return state.model_copy(update={"operator": None, "token": None}), []

    if isinstance(event, QueryChanged):
        return state.model_copy(update={"query": event.query}), []

    if isinstance(event, FieldChanged):
        if event.field not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {event.field}")
        new_state = state.model_copy(update={event.field: event.value})
        if event.field != "youtube_url" or event.value == state.youtube_url:
            return new_state, []
        if not extract_video_id(event.value):
            return new_state.model_copy(update={"video_meta": None}), []
        return new_state, [FetchVideoMeta(youtube_url=event.value)]

    if isinstance(event, VideoMetaLoaded):
        # Ignore lookups for a URL the operator has already replaced
        if event.youtube_url != state.youtube_url:
            return state, []
        return state.model_copy(update={"video_meta": event.meta}), []

    if isinstance(event, SubmitRequested):
        if state.submitting:
            return state, []
        if _missing_fields(state):
            return state, [Notify(level="error", message=MissingFieldError.user_message)]
        return (
            state.model_copy(update={"submitting": True}),
            [SubmitEntries(token=state.token, form=state.form())],
        )

    if isinstance(event, SubmitSucceeded):
        # URL, meeting and questioner are kept for the next batch
        return (
            state.model_copy(update={"submitting": False, "raw_input": ""}),
            [Notify(level="success", message="保存しました"), FetchRecords()],
        )

    if isinstance(event, SubmitFailed):
        return state.model_copy(update={"submitting": False}), [Notify(level="error", message=event.message)]

    if isinstance(event, RecordsLoaded):
        return state.model_copy(update={"records": list(event.records)}), []

    if isinstance(event, DeleteRequested):
        # Nothing is sent until the operator answers the confirmation prompt
        return state.model_copy(update={"pending_delete_id": event.record_id}), []

    if isinstance(event, DeleteCancelled):
        return state.model_copy(update={"pending_delete_id": None}), []

    if isinstance(event, DeleteConfirmed):
        if state.pending_delete_id is None:
            return state, []
        return (
            state.model_copy(update={"pending_delete_id": None}),
            [DeleteRecord(token=state.token, record_id=state.pending_delete_id)],
        )

    if isinstance(event, DeleteSucceeded):
        records = [record for record in state.records if record.get("id") != event.record_id]
        expanded_id = None if state.expanded_id == event.record_id else state.expanded_id
        return state.model_copy(update={"records": records, "expanded_id": expanded_id}), []

    if isinstance(event, ToggleExpanded):
        expanded_id = None if state.expanded_id == event.record_id else event.record_id
        return state.model_copy(update={"expanded_id": expanded_id}), []

    raise TypeError(f"Unhandled event: {type(event).__name__}")
