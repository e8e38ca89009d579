# app.py
import logging
import os

import streamlit as st

from ui.sidebar import render_sidebar
from ui.event_dashboard.render import render as event_dashboard_render
from core.settings_manager import load_settings


logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
_log_level = os.getenv("EVENT_DASHBOARD_LOG_LEVEL", "WARNING").upper()
for _name in ("core", "ui"):
    logging.getLogger(_name).setLevel(getattr(logging, _log_level, logging.WARNING))

st.set_page_config(
    page_title="Smart Event Dashboard",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="auto",
)

st.markdown("""
    <style>
    /* Event cards */
    .event-card h3 {
        margin: 0 0 0.35rem 0;
        font-size: 1.15rem;
        word-break: break-word;
    }
    .event-card-header {
        display: flex;
        flex-wrap: wrap;
        align-items: center;
        gap: 0.5rem;
    }

    /* Category badges */
    .event-badge {
        display: inline-block;
        padding: 0.1rem 0.6rem;
        border-radius: 999px;
        font-size: 0.8rem;
        font-weight: 600;
    }
    .event-badge.conference { background: #e3f2fd; color: #1565c0; }
    .event-badge.webinar    { background: #f3e5f5; color: #6a1b9a; }
    .event-badge.workshop   { background: #fff3e0; color: #e65100; }
    .event-badge.meeting    { background: #e8f5e9; color: #2e7d32; }

    .event-details {
        margin-top: 0.4rem;
        opacity: 0.85;
    }
    .event-description {
        margin-top: 0.5rem;
        white-space: pre-wrap;
        word-break: break-word;
    }

    /* Empty list placeholder */
    .empty-state {
        padding: 2rem 1rem;
        text-align: center;
        opacity: 0.7;
        border: 1px dashed rgba(128, 128, 128, 0.5);
        border-radius: 8px;
    }
    </style>
""", unsafe_allow_html=True)

# --- Initialize Settings ---
if "user_settings" not in st.session_state:
    st.session_state.user_settings = load_settings()

settings = st.session_state.user_settings

render_sidebar(settings)

st.title("📅 Smart Event Dashboard")
event_dashboard_render(settings)
