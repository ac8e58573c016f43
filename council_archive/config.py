"""
Configuration settings for the council question archive.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "香美町議会 一般質問アーカイブ"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/council_archive.db")

    # YouTube Data API
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
    YOUTUBE_API_BASE_URL = os.getenv("YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3")

    # Google sign-in
    GOOGLE_TOKENINFO_URL = os.getenv("GOOGLE_TOKENINFO_URL", "https://oauth2.googleapis.com/tokeninfo")
    GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
    ADMIN_EMAILS = os.getenv("ADMIN_EMAILS", "")

    # Archive behaviour
    SEARCH_CASE_SENSITIVE = _env_bool("SEARCH_CASE_SENSITIVE", True)
    DEFAULT_PARSE_MODE = os.getenv("DEFAULT_PARSE_MODE", "multiline")
    SUMMARY_PREVIEW_LENGTH = 50
    MISSING_NAME_PLACEHOLDER = "（未入力）"
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)

        # Validate optional environment variables
        if not cls.YOUTUBE_API_KEY:
            print("WARNING: YOUTUBE_API_KEY environment variable not set.")
            print("Video titles and publish dates will not be looked up.")

    @classmethod
    def admin_emails(cls) -> List[str]:
        """Get the configured administrator allowlist (empty means any verified account)."""
        return [email.strip().lower() for email in cls.ADMIN_EMAILS.split(",") if email.strip()]


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
