"""
Connect panel - add someone to "my people" with context.
"""

import streamlit as st

from controllers.relationship_controller import ConnectModalController
from views.helpers.relationships import QUICK_CONTEXTS

CONTEXT_PLACEHOLDER = "e.g., Met at Jazz Night, Friends from work..."


def render_connect_modal(controller: ConnectModalController):
    """Render the panel while it is open."""
    if not controller.is_open():
        return

    other_user = controller.get_other_user()
    if other_user is None:
        return

    context_key = f"connect_context_{other_user.id}"
    pick_key = f"connect_quick_{other_user.id}"

    # The controller owns the text; the widget mirrors it
    st.session_state[context_key] = controller.get_context()

    def _on_context_change():
        controller.update_context(st.session_state[context_key])

    def _on_pick():
        picked = st.session_state[pick_key]
        if picked:
            controller.use_suggestion(picked)

    with st.container(border=True):
        col_title, col_close = st.columns([5, 1])
        with col_title:
            st.markdown(f"#### Stay in touch with {other_user.name}")
        with col_close:
            if st.button("✕", key="connect_modal_close", type="tertiary"):
                controller.close()
                st.rerun()

        st.caption("How do you know each other? This helps you remember later.")

        st.text_area(
            "Context",
            placeholder=CONTEXT_PLACEHOLDER,
            max_chars=255,
            key=context_key,
            on_change=_on_context_change,
            label_visibility="collapsed",
        )

        suggested = controller.get_suggested_context()
        suggestions = [suggested] if suggested else []
        suggestions += [s for s in QUICK_CONTEXTS if s not in suggestions]
        st.pills("Quick picks", suggestions, key=pick_key, on_change=_on_pick)

        error = controller.get_error()
        if error:
            st.error(error)

        col_cancel, col_submit = st.columns(2)
        with col_cancel:
            if st.button("Cancel", key="connect_modal_cancel", width="stretch"):
                controller.close()
                st.rerun()
        with col_submit:
            if st.button(
                "Add to my people",
                key="connect_modal_submit",
                type="primary",
                disabled=not controller.can_submit(),
                width="stretch",
            ):
                controller.submit()
                st.rerun()
