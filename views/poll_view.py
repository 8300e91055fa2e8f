"""
Poll View - vote on an event's polls and suggest options.

Each poll gets its own VotingController and OptionSearchController; this
view wires their callbacks to the PlannerController, which owns the
polls.
"""

import logging

import streamlit as st

from controllers.option_search_controller import OptionSearchController
from controllers.planner_controller import PlannerController
from controllers.voting_controller import VotingController
from models.entities import Poll, VoteData
from views.components import (
    render_account_sidebar,
    render_movie_details,
    render_option_search,
    render_poll_header,
    render_poll_voting,
    render_venue_details,
    render_venue_hero,
    render_vote_confirmation,
)
from views.helpers.formatting import pluralize
from views.helpers.poll_text import normalize_poll_type

logger = logging.getLogger(__name__)


class PollView:
    """View for an event's polls."""

    def __init__(self):
        self.planner = PlannerController()
        self.user = self.planner.get_current_user()

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

        st.title("🗳️ Polls")

        events = [e for e in self.planner.get_events() if self.planner.get_polls(e.id)]
        if not events:
            st.info("No polls yet.")
            return

        titles = {e.id: e.title for e in events}
        event_id = st.selectbox(
            "Event",
            list(titles),
            format_func=lambda event_id: titles[event_id],
            key="poll_view_event",
        )

        for poll in self.planner.get_polls(event_id):
            st.markdown("---")
            self._render_poll(poll)

    def _render_poll(self, poll: Poll):
        anonymous = self.user is None
        voting = VotingController(
            poll,
            anonymous_mode=anonymous,
            on_vote_confirmed=lambda vote: self._on_vote_confirmed(poll, vote, anonymous),
            on_vote_cancelled=lambda: logger.debug(f"Vote cancelled on poll {poll.id}"),
        )

        render_poll_header(poll)
        st.caption(f"{len(poll.options)} {pluralize('option', len(poll.options))}")

        render_vote_confirmation(voting)
        self._render_stored_votes(voting)
        render_poll_voting(poll, voting)
        self._render_option_details(poll)

        if self.user is None:
            st.caption("Sign in to suggest options.")
            return

        search = OptionSearchController(
            poll,
            rich_data=self.planner.get_rich_data(),
            on_movie_selected=lambda data: self.planner.add_option(poll.id, data),
            on_music_track_selected=lambda data: self.planner.add_option(poll.id, data),
        )
        render_option_search(search, on_add_option=lambda data: self.planner.add_option(poll.id, data))

    def _on_vote_confirmed(self, poll: Poll, vote: VoteData, anonymous: bool):
        if vote.type in ("clear", "clear_all"):
            self.planner.flash("Votes cleared")
        elif anonymous:
            self.planner.flash("Vote stored. Sign in to save it.")
        else:
            self.planner.flash("Vote recorded")
        logger.info(f"{vote.type} vote confirmed on poll {poll.id}")

    def _render_stored_votes(self, voting: VotingController):
        """Offer to save votes cast before signing in."""
        stored = voting.get_temporary_votes()
        if not stored or voting.anonymous_mode:
            return

        count = len(stored)
        col_text, col_save, col_discard = st.columns([3, 1, 1])
        with col_text:
            st.info(f"You have {count} stored {pluralize('vote', count)} from before you signed in.")
        with col_save:
            if st.button("Save", key=f"save_stored_{voting.poll.id}", type="primary", width="stretch"):
                saved = voting.save_temporary_votes()
                self.planner.flash(f"Saved {saved} {pluralize('vote', saved)}")
                st.rerun()
        with col_discard:
            if st.button("Discard", key=f"discard_stored_{voting.poll.id}", width="stretch"):
                voting.clear_temporary_votes()
                st.rerun()

    def _render_option_details(self, poll: Poll):
        poll_type = normalize_poll_type(poll.poll_type)
        if poll_type not in ("movie", "place"):
            return

        for option in poll.options:
            if not option.external_data:
                continue
            icon = "🎬" if poll_type == "movie" else "📍"
            with st.expander(f"{icon} {option.title} details"):
                if poll_type == "movie":
                    render_movie_details(option.external_data)
                else:
                    render_venue_hero(option.external_data)
                    render_venue_details(option.external_data)
