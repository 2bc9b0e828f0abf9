import streamlit as st
from typing import Dict, Any
from travelhub_admin.config import LANGUAGE_LABELS
from travelhub_admin.utils.preferences import load_language, save_language


def init_session_state():
    """Initialize session state; the language preference is read from disk only once."""
    if "language" not in st.session_state:
        st.session_state.language = load_language()

    if "editing_id" not in st.session_state:
        st.session_state.editing_id = None

    if "confirm_delete_id" not in st.session_state:
        st.session_state.confirm_delete_id = None

    if "amenities" not in st.session_state:
        st.session_state.amenities = []


def language_selector():
    """Sidebar switch for the active display language."""
    codes = list(LANGUAGE_LABELS)
    choice = st.sidebar.radio(
        "Language",
        codes,
        index=codes.index(st.session_state.language),
        format_func=lambda code: LANGUAGE_LABELS[code],
        horizontal=True
    )
    if choice != st.session_state.language:
        st.session_state.language = choice
        save_language(choice)
        st.rerun()


def check_api_response(response: Dict[str, Any]) -> bool:
    """Show a flat notice for any failure and report whether the call succeeded."""
    if response.get("success"):
        return True
    st.error(f"❌ {response.get('error', 'Request failed')}")
    return False


def text_direction(language: str) -> str:
    return "rtl" if language == "ar" else "ltr"
