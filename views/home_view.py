"""
Home View - Landing page for the Group Planner.

Displays navigation options and feature descriptions.
"""

import streamlit as st

from controllers.planner_controller import PlannerController
from views.components import render_account_sidebar, render_status_badge


class HomeView:
    """View for the home/landing page."""

    def __init__(self):
        self.planner = PlannerController()

    def render(self) -> None:
        """Render the home page."""
        user = self.planner.get_current_user()
        render_account_sidebar(
            user=user,
            can_sign_out=self.planner.is_demo_session(),
            on_sign_in=self.planner.sign_in_demo,
            on_sign_out=self.planner.sign_out_demo,
        )

        st.title("Group Planner")
        st.markdown(f"Welcome back, {user.name}!" if user else "Plan events together")

        st.markdown("---")

        col1, col2 = st.columns(2)

        with col1:
            self._render_polls_card()

        with col2:
            self._render_people_card()

        st.markdown("---")
        self._render_upcoming()

        st.markdown("---")
        st.markdown("*Use the sidebar to navigate between pages.*")

    def _render_polls_card(self) -> None:
        """Render the Polls card."""
        st.markdown("### Vote on Plans")
        st.markdown("""
        Decide together what happens at each event.

        - Suggest movies, songs, places and dates
        - Vote yes/no, approve, rank or rate
        - Confirm every vote before it counts
        """)
        if st.button("Open Polls →", type="primary", width="stretch"):
            st.switch_page("pages/1_🗳️_Polls.py")

    def _render_people_card(self) -> None:
        """Render the People card."""
        st.markdown("### Keep Up")
        st.markdown("""
        Stay in touch with the people you meet.

        - Connect with fellow attendees
        - Remember how you met
        - Respect everyone's connection preferences
        """)
        if st.button("See People →", type="primary", width="stretch"):
            st.switch_page("pages/2_👥_People.py")

    def _render_upcoming(self) -> None:
        st.markdown("### Upcoming")
        for event in self.planner.get_events():
            col_title, col_status = st.columns([3, 2])
            with col_title:
                st.markdown(f"**{event.title}**")
            with col_status:
                render_status_badge(event, format="badge", show_context=False)
        if st.button("All events →"):
            st.switch_page("pages/3_🎉_Events.py")
