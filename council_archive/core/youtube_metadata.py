"""
Video title and publish date lookups through the YouTube Data API.
"""

from typing import Optional

import requests
from pydantic import BaseModel

from council_archive.config import config
from council_archive.core.links import extract_video_id
from council_archive.utils.error_handling import MetadataFetchError
from council_archive.utils.logger import logging


class VideoMeta(BaseModel):
    """Cached details of the source video."""
    title: str
    published_at: str

    @property
    def published_date(self) -> str:
        """Publish date without the time part."""
        return self.published_at.split("T")[0]


class YouTubeMetadataClient:
    """Client for the ``videos`` resource of the YouTube Data API."""

    def __init__(
        self,
        api_key: Optional[str] = config.YOUTUBE_API_KEY,
        base_url: str = config.YOUTUBE_API_BASE_URL,
        timeout: float = config.HTTP_TIMEOUT,
    ):
        """
        Initialize the metadata client.

        Args:
            api_key: YouTube Data API key; lookups are skipped without one
            base_url: Base URL of the YouTube Data API
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch(self, video_id: str) -> Optional[VideoMeta]:
        """
        Fetch the snippet of a single video.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoMeta, or None when the video is unknown or no API key is set
        """
        if not self.api_key:
            logging.debug("No YouTube API key configured, skipping metadata lookup")
            return None

        try:
            response = requests.get(
                f"{self.base_url}/videos",
                params={"part": "snippet", "id": video_id, "key": self.api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logging.error(f"YouTube API error for video {video_id}: {str(e)}")
            raise MetadataFetchError() from e

        items = data.get("items") or []
        if not items:
            logging.info(f"No YouTube video found for id {video_id}")
            return None

        snippet = items[0].get("snippet", {})
        return VideoMeta(
            title=snippet.get("title", ""),
            published_at=snippet.get("publishedAt", ""),
        )

    def fetch_for_url(self, url: str) -> Optional[VideoMeta]:
        """Fetch metadata for the video a URL points at, or None if it has no video ID."""
        video_id = extract_video_id(url)
        if not video_id:
            return None
        return self.fetch(video_id)


def get_metadata_client() -> YouTubeMetadataClient:
    """FastAPI dependency returning a client configured from settings."""
    return YouTubeMetadataClient()
