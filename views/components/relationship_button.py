"""
"Keep Up" relationship button.
"""

import streamlit as st

from controllers.relationship_controller import RelationshipButtonController
from views.helpers.relationships import (
    button_disabled,
    button_icon,
    button_label,
    button_type,
    connection_tooltip,
    show_button,
)


def render_relationship_button(
    controller: RelationshipButtonController,
    size: str = "md",
    variant: str = "primary",
    show_context: bool = True,
):
    """
    Render the button for one other attendee.

    Args:
        controller: Button controller for the attendee
        size: sm (no icon), md, or lg (full width)
        variant: primary or outline
        show_context: Include how you know them in the tooltip
    """
    is_connected = controller.is_connected()
    permission = controller.get_permission()

    if not show_button(is_connected, permission):
        return

    other_id = controller.other_user.id

    if controller.is_confirming_disconnect():
        st.caption(f"Stop keeping up with {controller.other_user.name}?")
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes", key=f"disconnect_yes_{other_id}", type="primary", width="stretch"):
                controller.confirm_disconnect()
                st.rerun()
        with col_no:
            if st.button("No", key=f"disconnect_no_{other_id}", width="stretch"):
                controller.cancel_disconnect()
                st.rerun()
        return

    clicked = st.button(
        button_label(is_connected, permission),
        key=f"keep_up_{other_id}",
        type=button_type(is_connected, permission, variant),
        icon=None if size == "sm" else button_icon(is_connected, permission),
        help=connection_tooltip(
            is_connected,
            permission,
            controller.get_relationship(),
            show_context=show_context,
            error=controller.get_error(),
        ),
        disabled=button_disabled(is_connected, permission) or controller.data["loading"],
        width="stretch" if size == "lg" else "content",
    )

    if clicked:
        if is_connected:
            controller.disconnect()
        else:
            controller.connect()
        st.rerun()

    error = controller.get_error()
    if error:
        st.caption(f":red[{error}]")
