"""
Event status badge.
"""

from datetime import datetime
from typing import Optional

import streamlit as st

from models.entities import Event
from views.helpers.badges import complete_status_display


def render_status_badge(
    event: Event,
    format: str = "badge",
    show_context: bool = True,
    now: Optional[datetime] = None,
):
    """
    Render the status pill for an event, with its context line below.

    Args:
        event: Event to describe
        format: badge, compact or detailed
        show_context: Show funding progress, deadlines or tickets left
    """
    display = complete_status_display(event, format, now)
    st.badge(f"{display.icon} {display.primary}", color=display.color)
    if show_context and display.has_context:
        st.caption(display.secondary)
