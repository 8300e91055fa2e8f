"""
Username field with availability feedback.
"""

from typing import Callable

import streamlit as st

from controllers.username_controller import UsernameController

STATUS_ICONS = {
    "checking": "⏳",
    "available": "✅",
    "taken": "❌",
    "invalid": "⚠️",
    "error": "⚠️",
}


def render_username_input(controller: UsernameController, on_save: Callable[[str], None]):
    """
    Render the username field, its status line and the save button.

    Args:
        controller: Username controller
        on_save: Callback with the username to save
    """
    with st.form(key="username_form", border=False):
        username = st.text_input(
            "Username",
            value=controller.get_value(),
            max_chars=30,
            placeholder="your-username",
            help="3-30 characters: letters, numbers, underscores and hyphens",
        )
        col_check, col_save = st.columns(2)
        with col_check:
            check_clicked = st.form_submit_button("Check availability", width="stretch")
        with col_save:
            save_clicked = st.form_submit_button("Save", type="primary", width="stretch")

    if check_clicked or save_clicked:
        with st.spinner("Checking username..."):
            controller.check(username)
        if save_clicked and controller.can_save():
            on_save(controller.get_value())
        st.rerun()

    status = controller.get_status()
    message = controller.get_message()
    if status != "idle" and message:
        icon = STATUS_ICONS.get(status, "")
        color = "green" if status == "available" else "red" if status in ("taken", "invalid") else "orange"
        st.markdown(f":{color}[{icon} {message}]")
