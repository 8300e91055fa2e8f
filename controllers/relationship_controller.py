"""
Relationship Controller - the "Keep Up" button and the connect modal.

The button connects the current user with another attendee:
- anonymous visitors are asked to sign in (show_auth_modal)
- people who require requests get a connection request
- everyone else is connected at once, with context from the shared event

Disconnecting asks for confirmation first.

The connect modal collects how the two people know each other before
connecting.
"""

import logging
from typing import Callable, MutableMapping, Optional

import streamlit as st

from models.entities import ConnectPermission, Event, Relationship, User
from models.repositories import RelationshipError, RelationshipRepository
from views.helpers.relationships import format_field_errors, suggested_context

logger = logging.getLogger(__name__)

# The modal connects directly, so only AUTO_ACCEPT may go through it
REFUSED_PERMISSIONS = {
    ConnectPermission.BLOCKED: "You can't connect with this person",
    ConnectPermission.CLOSED: "This person prefers to reach out first",
    ConnectPermission.REQUEST_REQUIRED: "This person reviews introductions first. Use Keep Up to send one.",
    ConnectPermission.PENDING_REQUEST: "Your introduction is waiting for a response",
}


class RelationshipButtonController:
    """Controller for one relationship button."""

    def __init__(
        self,
        current_user: Optional[User],
        other_user: User,
        repository: RelationshipRepository,
        event: Optional[Event] = None,
        on_show_auth_modal: Optional[Callable[[str], None]] = None,
        on_connection_created: Optional[Callable[[User], None]] = None,
        on_connection_request_sent: Optional[Callable[[User], None]] = None,
        state: Optional[MutableMapping] = None
    ):
        self.current_user = current_user
        self.other_user = other_user
        self.repository = repository
        self.event = event
        self.on_show_auth_modal = on_show_auth_modal
        self.on_connection_created = on_connection_created
        self.on_connection_request_sent = on_connection_request_sent
        self._state = state if state is not None else st.session_state
        self.key = f"relationship_{other_user.id}"
        self._init_session_state()
        self.refresh_status()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "loading": False,
                "error": None,
                "confirming_disconnect": False,
                "is_connected": False,
                "relationship": None,
                "permission": None,
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    # ==========================================
    # Status
    # ==========================================

    def refresh_status(self):
        """Reload connection status from the repository."""
        if self.current_user is None:
            self.data.update(is_connected=False, relationship=None, permission=None)
            return

        relationship = self.repository.get_relationship_between(self.current_user, self.other_user)
        if relationship is not None and relationship.status == "active":
            self.data.update(
                is_connected=True,
                relationship=relationship,
                permission=ConnectPermission.ALREADY_CONNECTED,
            )
        else:
            self.data.update(
                is_connected=False,
                relationship=None,
                permission=self.repository.can_connect(self.current_user, self.other_user),
            )

    def is_connected(self) -> bool:
        return self.data["is_connected"]

    def get_relationship(self) -> Optional[Relationship]:
        return self.data["relationship"]

    def get_permission(self) -> Optional[ConnectPermission]:
        return self.data["permission"]

    def get_error(self) -> Optional[str]:
        return self.data["error"]

    def is_confirming_disconnect(self) -> bool:
        return self.data["confirming_disconnect"]

    # ==========================================
    # Events
    # ==========================================

    def connect(self):
        """Handle a click on the button while not connected."""
        if self.current_user is None:
            if self.on_show_auth_modal:
                self.on_show_auth_modal("connect")
            return

        if self.get_permission() == ConnectPermission.REQUEST_REQUIRED:
            self._create_connection_request()
            return

        self.connect_with_context(suggested_context(self.event))
        if self.is_connected() and self.on_connection_created:
            self.on_connection_created(self.other_user)

    def connect_with_context(self, context: str):
        """Create the relationship with the given context."""
        self.data.update(loading=True, error=None)
        try:
            if self.event is not None:
                relationship = self.repository.create_from_shared_event(
                    self.current_user, self.other_user, self.event, context
                )
            else:
                relationship = self.repository.create_manual(self.current_user, self.other_user, context)
        except RelationshipError as e:
            error = format_field_errors(e.field_errors) if e.field_errors else "Could not connect. Please try again."
            logger.warning(f"Connect with user {self.other_user.id} failed: {e.reason}")
            self.data.update(loading=False, error=error)
            return

        self.data.update(
            is_connected=True,
            relationship=relationship,
            permission=ConnectPermission.ALREADY_CONNECTED,
            loading=False,
            error=None,
        )

    def _create_connection_request(self):
        self.data.update(loading=True, error=None)
        try:
            self.repository.create_connection_request(
                self.current_user, self.other_user, event=self.event
            )
        except RelationshipError as e:
            if e.reason == "already_connected":
                self.data.update(
                    is_connected=True,
                    permission=ConnectPermission.ALREADY_CONNECTED,
                    loading=False,
                )
                self.data["relationship"] = self.repository.get_relationship_between(
                    self.current_user, self.other_user
                )
            elif e.reason == "pending_request":
                self.data.update(permission=ConnectPermission.PENDING_REQUEST, loading=False)
            elif e.field_errors:
                self.data.update(loading=False, error=format_field_errors(e.field_errors))
            else:
                logger.warning(f"Connection request to user {self.other_user.id} failed: {e.reason}")
                self.data.update(loading=False, error="Could not send request. Please try again.")
            return

        self.data.update(permission=ConnectPermission.PENDING_REQUEST, loading=False, error=None)
        if self.on_connection_request_sent:
            self.on_connection_request_sent(self.other_user)

    def disconnect(self):
        """Ask for confirmation before disconnecting."""
        self.data["confirming_disconnect"] = True

    def confirm_disconnect(self):
        self.data.update(confirming_disconnect=False, loading=True, error=None)
        self.repository.remove_relationship(self.current_user, self.other_user)
        self.data.update(is_connected=False, relationship=None, loading=False)
        self.data["permission"] = self.repository.can_connect(self.current_user, self.other_user)

    def cancel_disconnect(self):
        self.data["confirming_disconnect"] = False


class ConnectModalController:
    """Controller for the connect-with-context modal."""

    def __init__(
        self,
        current_user: User,
        repository: RelationshipRepository,
        on_connection_created: Optional[Callable[[User], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        state: Optional[MutableMapping] = None
    ):
        self.current_user = current_user
        self.repository = repository
        self.on_connection_created = on_connection_created
        self.on_close = on_close
        self._state = state if state is not None else st.session_state
        self.key = "connect_modal"
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "show": False,
                "other_user": None,
                "event": None,
                "suggested_context": "",
                "context": "",
                "loading": False,
                "error": None,
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    def is_open(self) -> bool:
        return self.data["show"]

    def get_context(self) -> str:
        return self.data["context"]

    def get_error(self) -> Optional[str]:
        return self.data["error"]

    def can_submit(self) -> bool:
        return not self.data["loading"] and bool(self.data["context"].strip())

    def open(self, other_user: User, event: Optional[Event] = None, suggested: Optional[str] = None):
        """Show the modal; a fresh open pre-fills the suggested context."""
        suggestion = suggested if suggested is not None else suggested_context(event)
        was_open = self.data["show"]
        self.data.update(
            show=True,
            other_user=other_user,
            event=event,
            suggested_context=suggestion,
        )
        if not was_open:
            self.data.update(context=suggestion, error=None)

    def update_context(self, context: str):
        self.data["context"] = context

    def use_suggestion(self, suggestion: str):
        self.data["context"] = suggestion

    def close(self):
        self.data.update(show=False, context="", error=None)
        if self.on_close:
            self.on_close()

    def submit(self) -> bool:
        """Validate and create the relationship; True on success."""
        context = self.data["context"].strip()
        if not context:
            self.data["error"] = "Please add some context about how you know each other"
            return False

        other_user: User = self.data["other_user"]
        event: Optional[Event] = self.data["event"]
        self.data.update(loading=True, error=None)

        if event is not None:
            if not self.repository.is_participant(event, self.current_user):
                self.data.update(
                    loading=False,
                    error="You must be attending this event to stay in touch with other attendees",
                )
                return False
            if not self.repository.is_participant(event, other_user):
                self.data.update(loading=False, error=f"{other_user.name} is not attending this event")
                return False

        permission = self.repository.can_connect(self.current_user, other_user)
        if permission in REFUSED_PERMISSIONS:
            logger.warning(f"Connect with user {other_user.id} refused: {permission.value}")
            self.data.update(loading=False, error=REFUSED_PERMISSIONS[permission])
            return False

        try:
            if event is not None:
                self.repository.create_from_shared_event(self.current_user, other_user, event, context)
            else:
                self.repository.create_manual(self.current_user, other_user, context)
        except RelationshipError as e:
            error = format_field_errors(e.field_errors) if e.field_errors else "Could not connect. Please try again."
            self.data.update(loading=False, error=error)
            return False

        if self.on_connection_created:
            self.on_connection_created(other_user)
        self.data.update(loading=False, show=False, context="", error=None)
        return True

    def get_other_user(self) -> Optional[User]:
        return self.data["other_user"]

    def get_event(self) -> Optional[Event]:
        return self.data["event"]

    def get_suggested_context(self) -> str:
        return self.data["suggested_context"]
