"""
API client for communicating with the council question archive backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin
from council_archive.config import config


class ApiError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    """Client for interacting with the archive API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = config.HTTP_TIMEOUT):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        return {"Authorization": f"Bearer {token}"} if token else {}

    @staticmethod
    def _check(response: requests.Response) -> None:
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, str(detail))

    def list_questions(self, query: str = "", case_sensitive: Optional[bool] = None) -> List[Dict[str, Any]]:
        """
        List archived questions.

        Args:
            query: Keyword to filter by
            case_sensitive: Override of the server's matching policy

        Returns:
            Question records, newest first
        """
        params = {"q": query}
        if case_sensitive is not None:
            params["case_sensitive"] = str(case_sensitive).lower()
        response = requests.get(self._url("questions"), params=params, timeout=self.timeout)
        self._check(response)
        return response.json()

    def preview_entries(self, raw_input: str, youtube_url: Optional[str] = None) -> List[Dict[str, Any]]:
        """Parse pasted text on the server without storing it."""
        response = requests.post(
            self._url("entries/preview"),
            json={"rawInput": raw_input, "youtubeUrl": youtube_url or None},
            timeout=self.timeout,
        )
        self._check(response)
        return response.json()["entries"]

    def get_video_meta(self, youtube_url: str) -> Optional[Dict[str, str]]:
        """Get the title and publish date of a video, or None if unknown."""
        response = requests.get(self._url("video-meta"), params={"url": youtube_url}, timeout=self.timeout)
        self._check(response)
        return response.json()

    def me(self, token: str) -> Dict[str, Any]:
        """Resolve a Google ID token to the signed-in administrator."""
        response = requests.get(self._url("me"), headers=self._headers(token), timeout=self.timeout)
        self._check(response)
        return response.json()

    def submit_questions(self, token: str, form: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post pasted entries.

        Args:
            token: Google ID token of the administrator
            form: Submission payload

        Returns:
            Dictionary with the number of created questions and the questions
        """
        response = requests.post(
            self._url("questions"),
            json=form,
            headers=self._headers(token),
            timeout=self.timeout,
        )
        self._check(response)
        return response.json()

    def delete_question(self, token: str, question_id: int) -> None:
        """Delete a question posted by the signed-in administrator."""
        response = requests.delete(
            self._url(f"questions/{question_id}"),
            headers=self._headers(token),
            timeout=self.timeout,
        )
        self._check(response)
