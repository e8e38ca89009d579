import streamlit as st

from ui.event_dashboard.controller import InteractionController


CONTROLLER_KEY = "event_dashboard_controller"


def get_controller() -> InteractionController:
    """Return this session's controller, creating it on first use.

    One controller (and so one `EventStore`) per browser session; reloading
    the page starts a fresh, empty collection.
    """
    ctrl = st.session_state.get(CONTROLLER_KEY)
    if isinstance(ctrl, InteractionController):
        return ctrl
    ctrl = InteractionController()
    st.session_state[CONTROLLER_KEY] = ctrl
    return ctrl
