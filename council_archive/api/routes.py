"""
API routes for the council question archive.
"""

import traceback
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends, Query, Path, Response

from council_archive.api.schemas import (
    OperatorResponse,
    PreviewEntry,
    PreviewRequest,
    PreviewResponse,
    SubmitResponse,
)
from council_archive.config import config
from council_archive.core import archive
from council_archive.core.auth import GoogleIdentityVerifier, Operator, bearer_token, get_identity_verifier
from council_archive.core.entry_parser import ParseMode
from council_archive.core.links import preview_entries
from council_archive.core.youtube_metadata import VideoMeta, YouTubeMetadataClient, get_metadata_client
from council_archive.db.database import get_db, DBSession
from council_archive.models.schemas import QuestionOut, SubmissionForm
from council_archive.utils.error_handling import ArchiveError, MetadataFetchError
from council_archive.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["questions"])


def get_current_operator(
    token: str = Depends(bearer_token),
    verifier: GoogleIdentityVerifier = Depends(get_identity_verifier),
) -> Operator:
    """Resolve the signed-in administrator from the bearer token."""
    return verifier.verify(token)


@router.get("/questions", response_model=List[QuestionOut])
def list_questions(
    q: str = Query("", description="Keyword matched against speaker, questioner, date, summary and meeting"),
    case_sensitive: Optional[bool] = Query(None, description="Override the configured matching policy"),
    db: DBSession = Depends(get_db),
):
    """List archived questions, newest first."""
    try:
        return archive.list_questions(db, q, case_sensitive)
    except Exception as e:
        logging.error(f"Error listing questions: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="読み込みに失敗しました")


@router.post("/entries/preview", response_model=PreviewResponse)
def preview_pasted_entries(request: PreviewRequest):
    """
    Parse pasted text without storing anything.

    - Returns every entry with its playback offset
    - Adds a jump link when a YouTube URL is given
    """
    entries = preview_entries(
        request.raw_input,
        request.youtube_url,
        request.parse_mode or ParseMode(config.DEFAULT_PARSE_MODE),
    )
    return PreviewResponse(entries=[PreviewEntry(**entry) for entry in entries])


@router.get("/video-meta", response_model=Optional[VideoMeta])
def get_video_meta(
    url: str = Query(..., description="YouTube video URL"),
    client: YouTubeMetadataClient = Depends(get_metadata_client),
):
    """Look up the title and publish date of a YouTube video."""
    try:
        return client.fetch_for_url(url)
    except MetadataFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/me", response_model=OperatorResponse)
def me(operator: Operator = Depends(get_current_operator)):
    """Return the signed-in administrator."""
    return OperatorResponse(email=operator.email, name=operator.name)


@router.post("/questions", response_model=SubmitResponse, status_code=201)
def submit_questions(
    form: SubmissionForm,
    operator: Operator = Depends(get_current_operator),
    db: DBSession = Depends(get_db),
    client: YouTubeMetadataClient = Depends(get_metadata_client),
):
    """Parse pasted timestamps and store one question per entry."""
    try:
        stored = archive.submit_questions(db, form, operator.email, client)
    except ArchiveError:
        raise
    except Exception as e:
        logging.error(f"Error submitting questions: {str(e)}")
        logging.error(traceback.format_exc())
        raise HTTPException(status_code=500, detail="保存に失敗しました")

    return SubmitResponse(
        created=len(stored),
        questions=[archive.to_output(question) for question in stored],
    )


@router.delete("/questions/{question_id}", status_code=204)
def delete_question(
    question_id: int = Path(..., description="Question ID"),
    operator: Operator = Depends(get_current_operator),
    db: DBSession = Depends(get_db),
):
    """Delete a question posted by the signed-in administrator."""
    archive.delete_question(db, question_id, operator.email)
    return Response(status_code=204)
