"""
Account sidebar component.
"""

import streamlit as st
from typing import Callable, Optional

from models.entities import User


def render_account_sidebar(
    user: Optional[User],
    can_sign_out: bool,
    on_sign_in: Callable[[], None],
    on_sign_out: Callable[[], None],
):
    """
    Render who is signed in, with demo sign-in for local runs.

    Args:
        user: Signed-in user, or None for visitors
        can_sign_out: Whether the session came from demo sign-in
        on_sign_in: Callback to sign in as the demo user
        on_sign_out: Callback to sign the demo user out
    """
    with st.sidebar:
        st.markdown("**Account**")
        if user:
            st.markdown(f"Signed in as **{user.name}**")
            if user.username:
                st.caption(f"@{user.username}")
            if can_sign_out and st.button("Sign out", width="stretch"):
                on_sign_out()
                st.rerun()
        else:
            st.caption("You're browsing as a guest. Votes are stored until you sign in.")
            if st.button("Sign in (demo)", type="primary", width="stretch"):
                on_sign_in()
                st.rerun()
