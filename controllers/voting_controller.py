"""
Voting Controller - vote confirmation dialog and the user's votes.

Every vote goes through a confirmation dialog:

    hidden --request_vote--> showing --confirm_vote--> hidden (vote_confirmed)
                                    +--cancel-------> hidden (vote_confirmation_cancelled)

Signed-in users' confirmed votes are recorded in "votes". Anonymous
visitors' votes go to "temporary_votes" until they sign in and save them.
"""

import logging
from typing import Any, Callable, MutableMapping, Optional

import streamlit as st

from models.entities import Poll, PollOption, VoteData

logger = logging.getLogger(__name__)

RANKING_KEY = "__ranking__"


class VotingController:
    """Controller for voting on one poll."""

    def __init__(
        self,
        poll: Poll,
        anonymous_mode: bool = False,
        on_vote_confirmed: Optional[Callable[[VoteData], None]] = None,
        on_vote_cancelled: Optional[Callable[[], None]] = None,
        state: Optional[MutableMapping] = None
    ):
        self.poll = poll
        self.anonymous_mode = anonymous_mode
        self.on_vote_confirmed = on_vote_confirmed
        self.on_vote_cancelled = on_vote_cancelled
        self._state = state if state is not None else st.session_state
        self.key = f"voting_{poll.id}"
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "show_confirmation": False,
                "pending_vote": None,  # VoteData
                "pending_option": None,  # PollOption
                "votes": {},  # option_id -> VoteData, RANKING_KEY -> VoteData
                "temporary_votes": {},
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    # ==========================================
    # Confirmation Dialog
    # ==========================================

    def is_confirming(self) -> bool:
        return self.data["show_confirmation"]

    def get_pending_vote(self) -> Optional[VoteData]:
        return self.data["pending_vote"]

    def get_pending_option(self) -> Optional[PollOption]:
        return self.data["pending_option"]

    def request_vote(self, vote_data: VoteData, option: Optional[PollOption] = None):
        """Open the dialog for a vote."""
        self.data["pending_vote"] = vote_data
        self.data["pending_option"] = option
        self.data["show_confirmation"] = True

    def confirm_vote(self) -> Optional[VoteData]:
        """Confirm the pending vote and tell the parent."""
        if not self.is_confirming():
            return None

        vote_data = self.data["pending_vote"]
        self._close_dialog()
        self.record_vote(vote_data)
        if self.on_vote_confirmed:
            self.on_vote_confirmed(vote_data)
        return vote_data

    def cancel(self):
        """Close the dialog without voting."""
        if not self.is_confirming():
            return
        self._close_dialog()
        if self.on_vote_cancelled:
            self.on_vote_cancelled()

    def _close_dialog(self):
        self.data["show_confirmation"] = False
        self.data["pending_vote"] = None
        self.data["pending_option"] = None

    # ==========================================
    # Votes
    # ==========================================

    def _votes(self) -> dict:
        return self.data["temporary_votes" if self.anonymous_mode else "votes"]

    def record_vote(self, vote_data: VoteData):
        """Apply a confirmed vote to this user's votes."""
        votes = self._votes()
        if vote_data.type == "clear_all":
            votes.clear()
        elif vote_data.type == "clear":
            votes.pop(vote_data.option_id, None)
        elif vote_data.type == "approval" and vote_data.vote != "approve":
            # Withdrawing an approval leaves no vote on the option
            votes.pop(vote_data.option_id, None)
        elif vote_data.type == "ranked":
            votes[RANKING_KEY] = vote_data
        elif vote_data.option_id is not None:
            votes[vote_data.option_id] = vote_data
        else:
            logger.warning(f"Ignoring {vote_data.type} vote without an option on poll {self.poll.id}")

    def get_vote(self, option_id: Any) -> Optional[VoteData]:
        return self._votes().get(option_id)

    def get_ranking(self) -> list[PollOption]:
        ranking = self._votes().get(RANKING_KEY)
        return list(ranking.ranked_options) if ranking else []

    def has_votes(self) -> bool:
        return bool(self._votes())

    def get_temporary_votes(self) -> dict:
        return dict(self.data["temporary_votes"])

    def clear_temporary_votes(self):
        self.data["temporary_votes"] = {}

    def save_temporary_votes(self) -> int:
        """Move anonymous votes to the signed-in votes; returns how many moved."""
        temporary = self.data["temporary_votes"]
        count = len(temporary)
        self.data["votes"].update(temporary)
        self.clear_temporary_votes()
        self.anonymous_mode = False
        return count
