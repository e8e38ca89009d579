import streamlit as st

from ui.event_dashboard.controller import InteractionController
from ui.event_dashboard.render_cards import (
    CardView,
    EmptyState,
    card_markup,
    empty_state_markup,
    render,
)


def _render_pending_confirmation(ctrl: InteractionController) -> None:
    pending = ctrl.pending
    if pending is None:
        return

    st.warning(pending.prompt)
    col_confirm, col_cancel = st.columns(2)
    with col_confirm:
        st.button("Confirm ✅", key="event_list_confirm", width="stretch", on_click=ctrl.confirm)
    with col_cancel:
        st.button("Cancel ❌", key="event_list_decline", width="stretch", on_click=ctrl.decline)


def _render_card(ctrl: InteractionController, view: CardView) -> None:
    with st.container(border=True):
        st.markdown(card_markup(view), unsafe_allow_html=True)

        c_edit, c_delete = st.columns(2)
        action, record_id = view.edit_action
        with c_edit:
            st.button(
                "✏️ Edit",
                key=f"event_card_{action}::{record_id}",
                width="stretch",
                on_click=ctrl.dispatch,
                args=(action, record_id),
            )
        action, record_id = view.delete_action
        with c_delete:
            st.button(
                "❌ Delete",
                key=f"event_card_{action}::{record_id}",
                width="stretch",
                on_click=ctrl.dispatch,
                args=(action, record_id),
            )


def render_event_list(ctrl: InteractionController, card_columns: int = 1) -> None:
    st.markdown(f"### 📋 Events ({len(ctrl.store)})")

    b_clear, b_sample = st.columns(2)
    with b_clear:
        st.button(
            "🗑️ Clear All",
            key="event_list_clear",
            width="stretch",
            disabled=not len(ctrl.store),
            on_click=ctrl.request_clear,
        )
    with b_sample:
        st.button(
            "📥 Load Sample Events",
            key="event_list_sample",
            width="stretch",
            on_click=ctrl.load_samples,
        )

    _render_pending_confirmation(ctrl)

    # Every pass rebuilds the whole list from the store.
    items = render(ctrl.store)
    if len(items) == 1 and isinstance(items[0], EmptyState):
        st.markdown(empty_state_markup(items[0]), unsafe_allow_html=True)
        return

    cols = st.columns(max(1, int(card_columns)))
    for i, view in enumerate(items):
        with cols[i % len(cols)]:
            _render_card(ctrl, view)
