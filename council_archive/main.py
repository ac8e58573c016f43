"""
Command line entry point for the council question archive.
"""

import argparse

from dotenv import load_dotenv

from council_archive.config import config
from council_archive.core.archive import submit_questions
from council_archive.core.entry_parser import ParseMode
from council_archive.core.links import preview_entries
from council_archive.core.youtube_metadata import YouTubeMetadataClient
from council_archive.db.database import SessionLocal, init_db
from council_archive.models.schemas import SubmissionForm
from council_archive.utils.error_handling import ArchiveError
from council_archive.utils.helpers import dump_json, read_text
from council_archive.utils.logger import logging


def import_entries(args: argparse.Namespace) -> int:
    """Store the entries of a text file, as the posting form would."""
    form = SubmissionForm(
        youtube_url=args.url,
        meeting=args.meeting,
        speaker=args.speaker,
        questioner=args.questioner,
        raw_input=read_text(args.file),
        parse_mode=args.mode,
    )

    init_db()
    db = SessionLocal()
    try:
        stored = submit_questions(db, form, args.author, YouTubeMetadataClient())
    finally:
        db.close()

    logging.info(f"Imported {len(stored)} questions from {args.file}")
    return len(stored)


def main():
    """Main function to run the application from command line."""
    load_dotenv()

    parser = argparse.ArgumentParser(description=config.APP_NAME)
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview = subparsers.add_parser("preview", help="Show how a text file is split into entries")
    preview.add_argument("file", help="Text file with pasted timestamps")
    preview.add_argument("--url", help="YouTube URL used to build jump links")
    preview.add_argument("--mode", type=ParseMode, default=ParseMode(config.DEFAULT_PARSE_MODE),
                         choices=list(ParseMode), help="Layout of the pasted text")

    importer = subparsers.add_parser("import", help="Store the entries of a text file")
    importer.add_argument("file", help="Text file with pasted timestamps")
    importer.add_argument("--url", required=True, help="YouTube URL of the session video")
    importer.add_argument("--meeting", required=True, help="Session name, e.g. 2025年6月定例会")
    importer.add_argument("--author", required=True, help="E-mail recorded as the poster")
    importer.add_argument("--speaker", help="Speaker name")
    importer.add_argument("--questioner", help="Councillor asking the question")
    importer.add_argument("--mode", type=ParseMode, default=ParseMode(config.DEFAULT_PARSE_MODE),
                          choices=list(ParseMode), help="Layout of the pasted text")

    args = parser.parse_args()

    if args.command == "preview":
        print(dump_json(preview_entries(read_text(args.file), args.url, args.mode)))
        return

    try:
        count = import_entries(args)
    except ArchiveError as e:
        parser.exit(1, f"{e}\n")
    print(f"{count}件保存しました")


if __name__ == "__main__":
    main()
