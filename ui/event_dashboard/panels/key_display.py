import json

import streamlit as st
from streamlit_javascript import st_javascript

from core.key_display import key_label_from_payload
from core.sanitizer import escape


_LABEL_KEY = "key_display_label"
_ARM_KEY = "key_display_arm"

# Resolves once, on the next keydown anywhere on the page.
_JS_AWAIT_KEYDOWN = (
    "await new Promise((resolve) => {"
    "  window.parent.document.addEventListener('keydown', (e) => resolve(JSON.stringify({"
    "    key: e.key, shift: e.shiftKey, ctrl: e.ctrlKey, alt: e.altKey"
    "  })), { once: true });"
    "})"
)


def render_key_display() -> None:
    """Show the name of the last key pressed on the page."""
    arm = int(st.session_state.get(_ARM_KEY, 0))

    raw = st_javascript(_JS_AWAIT_KEYDOWN, key=f"key_display_listener_{arm}")
    if isinstance(raw, str) and raw:
        try:
            payload = json.loads(raw)
        except ValueError:
            payload = None
        label = key_label_from_payload(payload)
        if label is not None:
            st.session_state[_LABEL_KEY] = label
            # A fresh component key re-arms the listener for the next keypress.
            st.session_state[_ARM_KEY] = arm + 1
            st.rerun()

    with st.container(border=True):
        st.caption("⌨️ Last key pressed")
        label = st.session_state.get(_LABEL_KEY) or "None"
        st.markdown(f"<kbd>{escape(label)}</kbd>", unsafe_allow_html=True)
