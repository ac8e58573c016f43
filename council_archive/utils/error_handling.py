"""
Centralized error handling for the application.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from council_archive.utils.logger import logging


class ArchiveError(Exception):
    """Base class for errors the archive reports to its callers."""

    status_code = 500
    user_message = "保存に失敗しました"

    def __init__(self, message: str = None):
        super().__init__(message or self.user_message)


class MissingFieldError(ArchiveError):
    """A required submission field was left blank."""

    status_code = 400
    user_message = "YouTube URL・定例会名・要約を入力してください"

    def __init__(self, fields=None):
        self.fields = list(fields or [])
        super().__init__(self.user_message)


class AuthenticationError(ArchiveError):
    status_code = 401
    user_message = "ログインが必要です"


class PermissionDeniedError(ArchiveError):
    status_code = 403
    user_message = "この操作は許可されていません"


class RecordNotFoundError(ArchiveError):
    status_code = 404
    user_message = "投稿が見つかりません"


class MetadataFetchError(ArchiveError):
    status_code = 502
    user_message = "YouTube動画情報の取得に失敗しました"


class StorageError(ArchiveError):
    status_code = 500
    user_message = "保存に失敗しました"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map archive errors onto HTTP responses.

    Args:
        app: The FastAPI application to register the handlers on
    """

    @app.exception_handler(ArchiveError)
    async def archive_error_handler(request: Request, exc: ArchiveError):
        logging.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
        content = {"detail": str(exc)}
        if isinstance(exc, MissingFieldError):
            content["fields"] = exc.fields
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        return JSONResponse(
            status_code=500,
            content={"detail": f"An unexpected error occurred: {str(exc)}"},
        )
