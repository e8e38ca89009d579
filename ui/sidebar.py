#ui/sidebar.py
import streamlit as st
from core.settings_manager import CARD_COLUMNS_MAX, CARD_COLUMNS_MIN, save_settings


def _sync_display_settings():
    settings = st.session_state.get("user_settings") or {}
    settings["card_columns"] = int(st.session_state.get("ui_card_columns", CARD_COLUMNS_MIN))
    settings["show_key_display"] = bool(st.session_state.get("ui_show_key_display", True))
    st.session_state["user_settings"] = settings
    save_settings(settings)


def render_sidebar(settings: dict):
    st.sidebar.header("Settings")

    # One-time init for the widget keys (must happen BEFORE the widgets are created)
    if "ui_card_columns" not in st.session_state:
        st.session_state["ui_card_columns"] = int(settings.get("card_columns", CARD_COLUMNS_MIN))
    if "ui_show_key_display" not in st.session_state:
        st.session_state["ui_show_key_display"] = bool(settings.get("show_key_display", True))

    with st.sidebar.expander("🖼️ Card Display", expanded=False):
        st.slider(
            "Cards per row",
            min_value=CARD_COLUMNS_MIN,
            max_value=CARD_COLUMNS_MAX,
            step=1,
            key="ui_card_columns",
            on_change=_sync_display_settings,
        )
        st.checkbox(
            "Show last-key display",
            key="ui_show_key_display",
            on_change=_sync_display_settings,
        )

    # Session-only UI controls (do not persist across devices)
    if "ui_compact" not in st.session_state:
        st.session_state["ui_compact"] = False

    with st.sidebar.expander("📱 UI", expanded=False):
        st.checkbox("Compact layout (mobile)", key="ui_compact")
