"""
Main Streamlit application for the council question archive.
"""

import os
import streamlit as st
from dotenv import load_dotenv

from council_archive.frontend.api_client import ApiClient, ApiError
from council_archive.frontend.components import (
    header, display_notices, search_box, question_card,
    video_meta_caption, entries_preview,
)
from council_archive.frontend.state import (
    FORM_FIELDS,
    ArchiveState,
    DeleteCancelled,
    DeleteConfirmed,
    DeleteRecord,
    DeleteRequested,
    DeleteSucceeded,
    FetchRecords,
    FetchVideoMeta,
    FieldChanged,
    Notify,
    QueryChanged,
    RecordsLoaded,
    SignedIn,
    SignedOut,
    SubmitEntries,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    ToggleExpanded,
    VideoMetaLoaded,
    reduce,
)
from council_archive.utils.logger import logging


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    if "api_client" not in st.session_state:
        st.session_state.api_client = ApiClient(os.getenv("API_URL", "http://localhost:8000"))

    if "notices" not in st.session_state:
        st.session_state.notices = []

    if "archive_state" not in st.session_state:
        st.session_state.archive_state = ArchiveState()
        dispatch_effects([FetchRecords()])


def dispatch(event):
    """Apply an event to the page state, then run the effects it produced."""
    state, effects = reduce(st.session_state.archive_state, event)
    st.session_state.archive_state = state

    # Keep widget values in line with the state, e.g. the cleared text area
    for name in FORM_FIELDS:
        st.session_state[f"form_{name}"] = getattr(state, name)

    dispatch_effects(effects)


def dispatch_effects(effects):
    """Run side effects against the API and feed the outcomes back as events."""
    client = st.session_state.api_client

    for effect in effects:
        if isinstance(effect, Notify):
            st.session_state.notices.append({"level": effect.level, "message": effect.message})

        elif isinstance(effect, FetchRecords):
            try:
                dispatch(RecordsLoaded(records=client.list_questions()))
            except Exception as e:
                logging.error(f"Error loading questions: {str(e)}")
                st.session_state.notices.append({"level": "error", "message": "読み込みに失敗しました"})

        elif isinstance(effect, FetchVideoMeta):
            try:
                meta = client.get_video_meta(effect.youtube_url)
            except Exception as e:
                logging.error(f"YouTube metadata error: {str(e)}")
                meta = None
            dispatch(VideoMetaLoaded(youtube_url=effect.youtube_url, meta=meta))

        elif isinstance(effect, SubmitEntries):
            try:
                result = client.submit_questions(effect.token, effect.form)
            except ApiError as e:
                logging.error(f"Error submitting questions: {e.detail}")
                dispatch(SubmitFailed(message=e.detail if e.status_code == 400 else "保存に失敗しました"))
            except Exception as e:
                logging.error(f"Error submitting questions: {str(e)}")
                dispatch(SubmitFailed())
            else:
                dispatch(SubmitSucceeded(created=result.get("created", 0)))

        elif isinstance(effect, DeleteRecord):
            try:
                client.delete_question(effect.token, effect.record_id)
            except Exception as e:
                logging.error(f"Error deleting question {effect.record_id}: {str(e)}")
                st.session_state.notices.append({"level": "error", "message": "削除に失敗しました"})
            else:
                dispatch(DeleteSucceeded(record_id=effect.record_id))


def on_field_change(name: str):
    dispatch(FieldChanged(field=name, value=st.session_state[f"form_{name}"]))


def on_query_change():
    dispatch(QueryChanged(query=st.session_state.query_text))


def on_login():
    """Resolve the pasted Google ID token to an administrator."""
    token = st.session_state.get("id_token", "").strip()
    try:
        operator = st.session_state.api_client.me(token)
    except Exception as e:
        logging.error(f"Sign-in failed: {str(e)}")
        st.session_state.notices.append({"level": "error", "message": "ログインに失敗しました"})
        return
    dispatch(SignedIn(email=operator["email"], token=token))


def on_logout():
    st.session_state.id_token = ""
    dispatch(SignedOut())


def archive_view(state: ArchiveState):
    """Display the search box and the archived questions."""
    search_box("query_text", on_query_change)

    # Filtering happens on the server so the configured case policy applies
    records = state.records
    if state.query:
        try:
            records = st.session_state.api_client.list_questions(state.query)
        except Exception as e:
            logging.error(f"Error searching questions: {str(e)}")
            display_notices([{"level": "error", "message": "検索に失敗しました"}])

    for record in records:
        question_card(
            record,
            expanded=state.expanded_id == record["id"],
            can_delete=state.operator is not None and state.operator == record.get("author"),
            on_toggle=lambda record_id: dispatch(ToggleExpanded(record_id=record_id)),
            on_delete=lambda record_id: dispatch(DeleteRequested(record_id=record_id)),
            confirming_delete=state.pending_delete_id == record["id"],
            on_confirm_delete=lambda: dispatch(DeleteConfirmed()),
            on_cancel_delete=lambda: dispatch(DeleteCancelled()),
        )


def admin_form(state: ArchiveState):
    """Display the posting form for signed-in administrators."""
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.caption(f"ログイン中：{state.operator}")
        with col2:
            st.button("ログアウト", on_click=on_logout)

        st.subheader("投稿フォーム（管理者専用）")

        st.text_input("YouTube URL", key="form_youtube_url", on_change=on_field_change, args=("youtube_url",),
                      placeholder="YouTube URL を入力")
        video_meta_caption(state.video_meta)
        st.text_input("定例会", key="form_meeting", on_change=on_field_change, args=("meeting",),
                      placeholder="何年何月定例会かを入力（例：2025年6月定例会）")
        st.text_input("質問者", key="form_questioner", on_change=on_field_change, args=("questioner",),
                      placeholder="誰の一般質問か（例：吉川康治議員）")
        st.text_input("発言者", key="form_speaker", on_change=on_field_change, args=("speaker",),
                      placeholder="発言者名（例：町長）")
        st.text_area("要約", key="form_raw_input", on_change=on_field_change, args=("raw_input",), height=180,
                     placeholder="タイムスタンプと要約を貼り付け（例）\n0:02 キャッシュレス対応の質問\n2:01 導入状況の回答")

        if state.raw_input.strip():
            try:
                entries_preview(st.session_state.api_client.preview_entries(state.raw_input, state.youtube_url))
            except Exception as e:
                logging.error(f"Preview failed: {str(e)}")

        st.button("投稿", type="primary", disabled=state.submitting,
                  on_click=lambda: dispatch(SubmitRequested()))


def login_view():
    """Display the administrator sign-in."""
    with st.expander("Googleでログイン（管理者）"):
        st.text_input("Google ID トークン", key="id_token", type="password")
        st.button("ログイン", on_click=on_login)


def main():
    """Main application entry point."""
    header()
    init_session_state()

    display_notices(st.session_state.notices)
    st.session_state.notices = []

    state = st.session_state.archive_state
    archive_view(state)

    st.divider()
    if state.operator:
        admin_form(state)
    else:
        login_view()


if __name__ == "__main__":
    main()
