"""
Planner Controller - events, polls and the signed-in user for the pages.

Holds the workspace (events, polls, people) in session state and applies
the changes widgets report back: new poll options, cover images, and
sign-in for the demo user.
"""

import itertools
import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from config.auth import get_current_user, is_authenticated
from models.entities import Event, Poll, PollOption, User
from models.sample_data import Workspace, build_sample_workspace
from services.rich_data_service import RichDataService

logger = logging.getLogger(__name__)

DEMO_USER_ID = "u-alex"

_option_ids = itertools.count(1)


class PlannerController:
    """Controller for planner data shared by all pages."""

    def __init__(self, state: Optional[MutableMapping] = None, workspace: Optional[Workspace] = None):
        self._state = state if state is not None else st.session_state
        self._init_session_state(workspace)

    def _init_session_state(self, workspace: Optional[Workspace]):
        """Initialize session state if not already set."""
        if "planner" not in self._state:
            self._state["planner"] = {
                "workspace": workspace or build_sample_workspace(),
                "demo_user_id": None,
                "flash": None,  # One-shot message for the next render
            }

    @property
    def data(self) -> dict:
        return self._state["planner"]

    @property
    def workspace(self) -> Workspace:
        return self.data["workspace"]

    # ==========================================
    # Current User
    # ==========================================

    def get_current_user(self) -> Optional[User]:
        """Signed-in user (proxy headers, DEV_USER_*, or demo sign-in)."""
        context = get_current_user()
        if context:
            user = self.workspace.users.get_by_id(context.user_id)
            if user is None:
                user = context.to_user()
                self.workspace.users.add(user)
                for event in self.workspace.events.values():
                    self.workspace.relationships.add_participant(event, user)
            return user

        demo_id = self.data["demo_user_id"]
        return self.workspace.users.get_by_id(demo_id) if demo_id else None

    def is_demo_session(self) -> bool:
        return not is_authenticated() and self.data["demo_user_id"] is not None

    def sign_in_demo(self):
        self.data["demo_user_id"] = DEMO_USER_ID
        logger.info("Demo user signed in")

    def sign_out_demo(self):
        self.data["demo_user_id"] = None

    # ==========================================
    # Flash Messages
    # ==========================================

    def flash(self, message: str):
        self.data["flash"] = message

    def pop_flash(self) -> Optional[str]:
        message = self.data["flash"]
        self.data["flash"] = None
        return message

    # ==========================================
    # Events & Polls
    # ==========================================

    def get_events(self) -> list[Event]:
        return sorted(
            self.workspace.events.values(),
            key=lambda e: e.start_at.timestamp() if e.start_at else 0
        )

    def get_event(self, event_id: Any) -> Optional[Event]:
        return self.workspace.events.get(event_id)

    def get_polls(self, event_id: Any = None) -> list[Poll]:
        polls = list(self.workspace.polls.values())
        if event_id is not None:
            polls = [p for p in polls if p.event_id == event_id]
        return polls

    def get_poll(self, poll_id: Any) -> Optional[Poll]:
        return self.workspace.polls.get(poll_id)

    def get_attendees(self, event_id: Any) -> list[User]:
        ids = self.workspace.relationships.participants.get(event_id, set())
        users = [self.workspace.users.get_by_id(user_id) for user_id in ids]
        return sorted((u for u in users if u), key=lambda u: u.name)

    def add_option(self, poll_id: Any, option_data: dict) -> Optional[PollOption]:
        """Add a poll option from a selected search result or the manual form."""
        poll = self.get_poll(poll_id)
        if poll is None:
            logger.warning(f"Option added to unknown poll {poll_id}")
            return None

        external_id = option_data.get("external_id")
        if external_id and any(o.external_id == external_id for o in poll.options):
            self.flash(f"{option_data.get('title')} is already in this poll")
            return None

        option = PollOption(
            id=f"o-new-{next(_option_ids)}",
            title=option_data["title"],
            description=option_data.get("description"),
            image_url=option_data.get("image_url"),
            external_id=external_id,
            external_data=option_data.get("external_data"),
        )
        poll.options.append(option)
        self.flash(f"Added {option.title}")
        return option

    def set_cover_image(self, event_id: Any, url: str, external_image_data: dict):
        event = self.get_event(event_id)
        if event is None:
            return
        event.cover_image_url = url
        event.external_image_data = external_image_data
        self.flash("Cover image updated")

    # ==========================================
    # Users
    # ==========================================

    def update_username(self, user: User, username: str):
        stored = self.workspace.users.get_by_id(user.id)
        if stored:
            stored.username = username
            self.flash(f"Username saved: @{username}")

    # ==========================================
    # Shared Services
    # ==========================================

    def get_rich_data(self) -> RichDataService:
        """One RichDataService per session so details stay cached across reruns."""
        if "rich_data" not in self.data:
            self.data["rich_data"] = RichDataService()
        return self.data["rich_data"]
