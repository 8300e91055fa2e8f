"""
Relationship Repository - data access for "keeping up" connections.

Connections are symmetric: connecting A with B stores a relationship in
both directions, and removing one removes both.

RelationshipRepository is the interface the widgets talk to.
InMemoryRelationshipRepository backs local runs and tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional

from models.entities import ConnectPermission, Event, Relationship, User


class RelationshipError(Exception):
    """
    A relationship change was rejected.

    reason is a short code (already_connected, pending_request,
    not_allowed, invalid) and field_errors carries per-field validation
    messages when reason is "invalid".
    """

    def __init__(self, reason: str, field_errors: Optional[dict[str, list[str]]] = None):
        self.reason = reason
        self.field_errors = field_errors or {}
        super().__init__(reason)


class RelationshipRepository(ABC):
    """Interface for relationship persistence."""

    @abstractmethod
    def get_relationship_between(self, user: User, other_user: User) -> Optional[Relationship]:
        """Return the relationship from user to other_user, if any."""
        pass

    @abstractmethod
    def can_connect(self, user: User, other_user: User) -> ConnectPermission:
        """Decide whether user may connect with other_user, and how."""
        pass

    @abstractmethod
    def create_from_shared_event(
        self,
        user: User,
        other_user: User,
        event: Event,
        context: str
    ) -> Relationship:
        """Connect two users who attended the same event."""
        pass

    @abstractmethod
    def create_manual(self, user: User, other_user: User, context: str) -> Relationship:
        """Connect two users without an event."""
        pass

    @abstractmethod
    def create_connection_request(
        self,
        user: User,
        other_user: User,
        message: Optional[str] = None,
        event: Optional[Event] = None
    ) -> None:
        """Ask other_user to accept a connection."""
        pass

    @abstractmethod
    def remove_relationship(self, user: User, other_user: User) -> None:
        """Remove the relationship in both directions."""
        pass

    @abstractmethod
    def is_participant(self, event: Event, user: User) -> bool:
        """Check whether user is attending event."""
        pass


class InMemoryRelationshipRepository(RelationshipRepository):
    """Dict-backed repository for local runs and tests."""

    def __init__(self):
        self.relationships: dict[tuple[Any, Any], Relationship] = {}
        self.pending_requests: dict[tuple[Any, Any], Optional[str]] = {}
        self.blocked: set[tuple[Any, Any]] = set()
        # user_id -> "open", "request" or "closed"
        self.connection_preferences: dict[Any, str] = {}
        # event_id -> set of user ids
        self.participants: dict[Any, set] = {}

    # ==========================================
    # Setup helpers
    # ==========================================

    def set_preference(self, user: User, preference: str):
        """Set how a user accepts connections (open, request, closed)."""
        self.connection_preferences[user.id] = preference

    def block(self, user: User, other_user: User):
        """Record that user blocked other_user."""
        self.blocked.add((user.id, other_user.id))

    def add_participant(self, event: Event, user: User):
        """Mark user as attending event."""
        self.participants.setdefault(event.id, set()).add(user.id)

    # ==========================================
    # Queries
    # ==========================================

    def get_relationship_between(self, user: User, other_user: User) -> Optional[Relationship]:
        return self.relationships.get((user.id, other_user.id))

    def can_connect(self, user: User, other_user: User) -> ConnectPermission:
        if (user.id, other_user.id) in self.blocked or (other_user.id, user.id) in self.blocked:
            return ConnectPermission.BLOCKED
        if (user.id, other_user.id) in self.relationships:
            return ConnectPermission.ALREADY_CONNECTED
        if (user.id, other_user.id) in self.pending_requests:
            return ConnectPermission.PENDING_REQUEST

        preference = self.connection_preferences.get(other_user.id, "open")
        if preference == "closed":
            return ConnectPermission.CLOSED
        if preference == "request":
            return ConnectPermission.REQUEST_REQUIRED
        return ConnectPermission.AUTO_ACCEPT

    def is_participant(self, event: Event, user: User) -> bool:
        return user.id in self.participants.get(event.id, set())

    # ==========================================
    # Changes
    # ==========================================

    def _connect(self, user: User, other_user: User, context: str) -> Relationship:
        if user.id == other_user.id:
            raise RelationshipError("invalid", {"related_user_id": ["can't connect with yourself"]})
        if not context or not context.strip():
            raise RelationshipError("invalid", {"context": ["can't be blank"]})

        now = datetime.now(timezone.utc)
        for a, b in ((user, other_user), (other_user, user)):
            existing = self.relationships.get((a.id, b.id))
            if existing:
                existing.shared_event_count += 1
                existing.status = "active"
            else:
                self.relationships[(a.id, b.id)] = Relationship(
                    user_id=a.id,
                    other_user_id=b.id,
                    context=context,
                    created_at=now,
                )
        self.pending_requests.pop((user.id, other_user.id), None)
        return self.relationships[(user.id, other_user.id)]

    def create_from_shared_event(
        self,
        user: User,
        other_user: User,
        event: Event,
        context: str
    ) -> Relationship:
        return self._connect(user, other_user, context)

    def create_manual(self, user: User, other_user: User, context: str) -> Relationship:
        return self._connect(user, other_user, context)

    def create_connection_request(
        self,
        user: User,
        other_user: User,
        message: Optional[str] = None,
        event: Optional[Event] = None
    ) -> None:
        key = (user.id, other_user.id)
        if key in self.relationships:
            raise RelationshipError("already_connected")
        if key in self.pending_requests:
            raise RelationshipError("pending_request")
        if self.can_connect(user, other_user) in (ConnectPermission.CLOSED, ConnectPermission.BLOCKED):
            raise RelationshipError("not_allowed")
        self.pending_requests[key] = message

    def remove_relationship(self, user: User, other_user: User) -> None:
        self.relationships.pop((user.id, other_user.id), None)
        self.relationships.pop((other_user.id, user.id), None)
