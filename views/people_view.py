"""
People View - keep up with the people you meet at events.

Lists an event's attendees with a "Keep Up" button each, plus the
connect panel for adding someone with a note about how you met.
"""

import streamlit as st

from controllers.planner_controller import PlannerController
from controllers.relationship_controller import ConnectModalController, RelationshipButtonController
from models.entities import User
from views.components import render_account_sidebar, render_connect_modal, render_relationship_button
from views.helpers.formatting import format_relative_time
from views.helpers.movies import get_initials
from views.helpers.relationships import show_note_button, suggested_context


class PeopleView:
    """View for attendees and connections."""

    def __init__(self):
        self.planner = PlannerController()
        self.user = self.planner.get_current_user()
        self.repository = self.planner.workspace.relationships
        if "people_view" not in st.session_state:
            st.session_state["people_view"] = {"auth_prompt": None}

    def render(self):
        """Main render method."""
        message = self.planner.pop_flash()
        if message:
            st.toast(message)

        render_account_sidebar(
            user=self.user,
            can_sign_out=self.planner.is_demo_session(),
            on_sign_in=self.planner.sign_in_demo,
            on_sign_out=self.planner.sign_out_demo,
        )

        st.title("👥 People")
        st.markdown("Keep up with the people you meet at events.")

        self._render_auth_prompt()

        events = self.planner.get_events()
        titles = {e.id: e.title for e in events}
        event_id = st.selectbox(
            "Event",
            list(titles),
            format_func=lambda event_id: titles[event_id],
            key="people_view_event",
        )
        event = self.planner.get_event(event_id)

        modal = None
        if self.user:
            modal = ConnectModalController(
                self.user,
                self.repository,
                on_connection_created=self._on_connection_created,
            )
            render_connect_modal(modal)

        st.markdown("### Attendees")
        attendees = [u for u in self.planner.get_attendees(event_id) if not self.user or u.id != self.user.id]
        if not attendees:
            st.info("No one else is attending yet.")

        for other in attendees:
            self._render_attendee(other, event, modal)

    def _render_auth_prompt(self):
        action = st.session_state["people_view"]["auth_prompt"]
        if not action or self.user:
            return
        with st.container(border=True):
            st.markdown("**Sign in to keep up with people**")
            st.caption("Connections are saved to your account.")
            col_sign_in, col_dismiss = st.columns(2)
            with col_sign_in:
                if st.button("Sign in (demo)", key="auth_prompt_sign_in", type="primary", width="stretch"):
                    st.session_state["people_view"]["auth_prompt"] = None
                    self.planner.sign_in_demo()
                    st.rerun()
            with col_dismiss:
                if st.button("Not now", key="auth_prompt_dismiss", width="stretch"):
                    st.session_state["people_view"]["auth_prompt"] = None
                    st.rerun()

    def _render_attendee(self, other: User, event, modal):
        button = RelationshipButtonController(
            self.user,
            other,
            self.repository,
            event=event,
            on_show_auth_modal=self._on_show_auth_modal,
            on_connection_created=self._on_connection_created,
            on_connection_request_sent=self._on_connection_request_sent,
        )

        with st.container(border=True):
            col_avatar, col_name, col_note, col_button = st.columns([0.6, 3, 1.2, 1.6])
            with col_avatar:
                st.markdown(f"### {get_initials(other.name)}")
            with col_name:
                st.markdown(f"**{other.name}**")
                relationship = button.get_relationship()
                if relationship and relationship.context:
                    since = format_relative_time(relationship.created_at)
                    st.caption(f"{relationship.context} · {since}" if since else relationship.context)
                elif other.username:
                    st.caption(f"@{other.username}")
            with col_note:
                if modal and show_note_button(button.get_permission()):
                    if st.button("Add note", key=f"add_note_{other.id}", type="tertiary"):
                        modal.open(other, event, suggested=suggested_context(event))
                        st.rerun()
            with col_button:
                render_relationship_button(button, size="md")

    def _on_show_auth_modal(self, action: str):
        st.session_state["people_view"]["auth_prompt"] = action

    def _on_connection_created(self, other: User):
        self.planner.flash(f"You're now keeping up with {other.name}")

    def _on_connection_request_sent(self, other: User):
        self.planner.flash(f"Introduction sent to {other.name}")
