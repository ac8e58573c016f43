"""
Configuration for pytest tests.
"""

import os
import shutil
import pytest
from pathlib import Path

# Must be set before council_archive.config is imported
TEST_DATA_DIR = Path("test_data")
TEST_DATA_DIR.mkdir(exist_ok=True)
os.environ["DATA_DIR"] = str(TEST_DATA_DIR)
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DATA_DIR}/test_archive.db"
os.environ["ENVIRONMENT"] = "development"
os.environ["YOUTUBE_API_KEY"] = "test_api_key"
os.environ["ADMIN_EMAILS"] = ""
os.environ.pop("GOOGLE_CLIENT_ID", None)
os.environ.pop("SEARCH_CASE_SENSITIVE", None)


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test data directory once the session ends."""
    yield
    from council_archive.db.database import engine
    engine.dispose()
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture
def db_session():
    """Provide a session on freshly created tables."""
    from council_archive.db.database import Base, SessionLocal, engine, init_db

    init_db()
    db = SessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=V3TUEeB0kW0"


@pytest.fixture
def pasted_text():
    """Return notes pasted in the multi-line layout."""
    return (
        "6月定例会 一般質問メモ\n"
        "(0:02) キャッシュレス対応の質問\n"
        "町内の店舗での導入について\n"
        "\n"
        "(2:01) 導入状況の回答\n"
        "12:30　今後の予定\n"
    )
