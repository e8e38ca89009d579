# ui/event_dashboard/render.py
from typing import Any, Dict

import streamlit as st

from ui.event_dashboard.panels.event_form import render_event_form
from ui.event_dashboard.panels.event_list import render_event_list
from ui.event_dashboard.panels.key_display import render_key_display
from ui.event_dashboard.state import get_controller


def _render_message(ctrl) -> None:
    msg = ctrl.take_message()
    if not msg:
        return
    level, text = msg
    if level == "error":
        st.error(text)
    elif level == "warning":
        st.warning(text)
    else:
        st.success(text)


def render(settings: Dict[str, Any]) -> None:
    ctrl = get_controller()

    _render_message(ctrl)

    if not st.session_state.get("ui_compact", False):
        left, right = st.columns([1, 2], gap="large")
        with left:
            render_event_form(ctrl)
            if settings.get("show_key_display", True):
                render_key_display()
        with right:
            render_event_list(ctrl, card_columns=settings.get("card_columns", 1))
    else:
        render_event_form(ctrl)
        render_event_list(ctrl, card_columns=1)
        if settings.get("show_key_display", True):
            render_key_display()
