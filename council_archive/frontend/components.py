"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Any, Callable, Dict, List, Optional

from council_archive.config import config
from council_archive.core.links import format_youtube_link
from council_archive.utils.helpers import date_part, truncate_text


def header():
    """Display the application header."""
    st.set_page_config(
        page_title=config.APP_NAME,
        page_icon="🏛️",
        layout="centered",
    )

    st.markdown(f"<h1 style='text-align: center'>{config.APP_NAME}検索</h1>", unsafe_allow_html=True)


def display_notices(notices: List[Dict[str, str]]):
    """Show queued notices once."""
    for notice in notices:
        if notice["level"] == "error":
            st.error(notice["message"])
        elif notice["level"] == "success":
            st.success(notice["message"])
        else:
            st.info(notice["message"])


def search_box(key: str, on_change: Callable[[], None]):
    """Display the keyword search input."""
    st.text_input(
        "キーワード検索",
        key=key,
        on_change=on_change,
        placeholder="キーワード検索（例：〇〇議員、キャッシュレス、子育て、2025年3月定例会）",
        label_visibility="collapsed",
    )


def question_card(
    record: Dict[str, Any],
    expanded: bool,
    can_delete: bool,
    on_toggle: Callable[[int], None],
    on_delete: Callable[[int], None],
    confirming_delete: bool = False,
    on_confirm_delete: Optional[Callable[[], None]] = None,
    on_cancel_delete: Optional[Callable[[], None]] = None,
):
    """
    Display one archived question.

    Args:
        record: Question as returned by the API
        expanded: Whether the full summary is shown
        can_delete: Whether the signed-in administrator authored the record
        on_toggle: Callback to expand or collapse the summary
        on_delete: Callback asking to delete the record
        confirming_delete: Whether the delete confirmation prompt is open for this record
        on_confirm_delete: Callback run when the deletion is confirmed
        on_cancel_delete: Callback run when the deletion is cancelled
    """
    summary = record["summary"]
    preview_length = config.SUMMARY_PREVIEW_LENGTH
    link = record.get("link") or format_youtube_link(record["youtubeUrl"], record["timestamp"])

    with st.container(border=True):
        st.caption(f"{record['date']}｜{record.get('meeting', '')}｜{record.get('questioner') or ''}｜{record['speaker']}")
        shown = summary if expanded else truncate_text(summary, preview_length)
        st.markdown(f"[{record['timestamp']}]({link})：{shown}".replace("\n", "  \n"))

        if len(summary) > preview_length:
            st.button(
                "閉じる" if expanded else "もっと見る",
                key=f"toggle_{record['id']}",
                on_click=on_toggle,
                args=(record["id"],),
            )

        if record.get("title"):
            st.caption(f"🎬 {record['title']}（投稿日：{date_part(record.get('publishedAt', ''))}）")

        if can_delete and confirming_delete:
            st.warning("この投稿を削除しますか？")
            col1, col2 = st.columns(2)
            with col1:
                st.button("削除する", key=f"confirm_delete_{record['id']}", type="primary", on_click=on_confirm_delete)
            with col2:
                st.button("キャンセル", key=f"cancel_delete_{record['id']}", on_click=on_cancel_delete)
        elif can_delete:
            st.button("削除", key=f"delete_{record['id']}", on_click=on_delete, args=(record["id"],))


def video_meta_caption(meta: Optional[Dict[str, str]]):
    """Display the looked-up video title under the URL input."""
    if meta:
        st.caption(f"🎬 {meta['title']}（投稿日：{date_part(meta['published_at'])}）")


def entries_preview(entries: List[Dict[str, Any]]):
    """Display how the pasted text will be split into questions."""
    if not entries:
        st.caption("タイムスタンプ行が見つかりません")
        return

    st.caption(f"{len(entries)}件の投稿になります")
    for entry in entries:
        timestamp = f"[{entry['timestamp']}]({entry['link']})" if entry.get("link") else entry["timestamp"]
        st.markdown(f"- {timestamp}：{entry['summary']}".replace("\n", "  \n  "))
