"""
Tests for the command line entry point.
"""

import sys
import pytest
from unittest.mock import patch

from council_archive.db import crud
from council_archive.main import main


def test_preview_command(tmp_path, capsys):
    notes = tmp_path / "notes.txt"
    notes.write_text("0:02 キャッシュレス対応の質問\n", encoding="utf-8")

    with patch.object(sys, "argv", ["council-archive", "preview", str(notes)]):
        main()

    assert "キャッシュレス対応の質問" in capsys.readouterr().out


def test_import_command(db_session, tmp_path, test_video_url):
    notes = tmp_path / "notes.txt"
    notes.write_text("0:02 質問\n2:01 回答\n", encoding="utf-8")
    argv = [
        "council-archive", "import", str(notes),
        "--url", test_video_url, "--meeting", "2025年6月定例会", "--author", "clerk@example.jp",
    ]

    with patch.object(sys, "argv", argv), \
            patch("council_archive.main.YouTubeMetadataClient") as mock_client:
        mock_client.return_value.fetch_for_url.return_value = None
        main()

    assert [q.timestamp for q in crud.list_questions(db_session)] == ["0:02", "2:01"]


def test_import_command_missing_meeting(db_session, tmp_path, test_video_url):
    notes = tmp_path / "notes.txt"
    notes.write_text("0:02 質問\n", encoding="utf-8")
    argv = [
        "council-archive", "import", str(notes),
        "--url", test_video_url, "--meeting", " ", "--author", "clerk@example.jp",
    ]

    with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
