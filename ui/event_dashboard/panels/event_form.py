from datetime import date, datetime
from typing import Optional

import streamlit as st

from core.errors import ValidationError
from core.models import DEFAULT_EVENT_TYPE, EVENT_TYPES
from core.formatting import DATE_FORMAT, badge_label, icon_for
from ui.event_dashboard.controller import InteractionController


_TITLE_KEY = "event_form_title"
_DATE_KEY = "event_form_date"
_DESCRIPTION_KEY = "event_form_description"
_TYPE_KEY = "event_form_type"
_REVISION_KEY = "event_form_revision"


def _parse_date(raw: str) -> Optional[date]:
    if not raw:
        return None
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        return None


def _sync_form_widgets(ctrl: InteractionController) -> None:
    """Push the controller's form into the widget keys when it has changed.

    Must run before the widgets are created on this pass.
    """
    if st.session_state.get(_REVISION_KEY) == ctrl.form_revision:
        return
    form = ctrl.form
    st.session_state[_TITLE_KEY] = form.title
    st.session_state[_DATE_KEY] = _parse_date(form.date)
    st.session_state[_DESCRIPTION_KEY] = form.description
    st.session_state[_TYPE_KEY] = form.type if form.type in EVENT_TYPES else DEFAULT_EVENT_TYPE
    st.session_state[_REVISION_KEY] = ctrl.form_revision


def _on_submit(ctrl: InteractionController) -> None:
    picked = st.session_state.get(_DATE_KEY)
    try:
        ctrl.submit(
            title=st.session_state.get(_TITLE_KEY, ""),
            date=picked.isoformat() if isinstance(picked, date) else "",
            description=st.session_state.get(_DESCRIPTION_KEY, ""),
            type=st.session_state.get(_TYPE_KEY, DEFAULT_EVENT_TYPE),
        )
    except ValidationError:
        # The controller keeps the message for the next pass; the form keeps its input.
        return


def render_event_form(ctrl: InteractionController) -> None:
    _sync_form_widgets(ctrl)

    st.markdown("### ✏️ Edit Event" if ctrl.mode == "edit" else "### ➕ Add Event")

    with st.form("event_form"):
        st.text_input("Event Title *", key=_TITLE_KEY, placeholder="e.g. Team sync")
        st.date_input("Event Date *", value=None, key=_DATE_KEY, format="YYYY-MM-DD")
        st.selectbox(
            "Event Type",
            options=list(EVENT_TYPES),
            key=_TYPE_KEY,
            format_func=lambda t: f"{icon_for(t)} {badge_label(t)}",
        )
        st.text_area("Description", key=_DESCRIPTION_KEY)

        if ctrl.show_cancel:
            c_submit, c_cancel = st.columns(2)
            with c_submit:
                st.form_submit_button(
                    ctrl.submit_label,
                    type="primary",
                    width="stretch",
                    on_click=_on_submit,
                    args=(ctrl,),
                )
            with c_cancel:
                st.form_submit_button(
                    "Cancel",
                    width="stretch",
                    on_click=ctrl.cancel_edit,
                )
        else:
            st.form_submit_button(
                ctrl.submit_label,
                type="primary",
                width="stretch",
                on_click=_on_submit,
                args=(ctrl,),
            )
