"""
Display entities for the planner widgets.

These are read-only snapshots handed to the views by the persistence
layer. Widgets format them for display and never write them back
directly; changes go through the repositories.

    Event (1) ──> (*) Poll (1) ──> (*) PollOption
      │
      └──> participants ──> User (*) <──> (*) User  (Relationship)
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


@dataclass
class User:
    """A person who can attend events and vote in polls."""
    id: Any
    name: str
    username: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass
class Event:
    """
    An event being planned.

    Status drives the badge shown on event cards:
    draft -> polling -> threshold -> confirmed, or canceled at any point.
    Threshold events wait for enough interest (attendee_count) or enough
    money (revenue, the crowdfunding case) before confirming.
    """
    id: Any
    title: str
    start_at: Optional[datetime] = None
    status: str = "draft"  # draft, polling, threshold, confirmed, canceled
    is_ticketed: bool = False
    taxation_type: Optional[str] = None  # ticketed_event, contribution_collection, ticketless
    threshold_type: Optional[str] = None  # attendee_count, revenue, both
    threshold_count: Optional[int] = None
    threshold_revenue_cents: Optional[int] = None
    current_revenue_cents: Optional[int] = None
    participant_count: int = 0
    available_tickets: int = 0
    polling_deadline: Optional[datetime] = None
    cover_image_url: Optional[str] = None
    external_image_data: Optional[dict] = None


@dataclass
class PollOption:
    """A choice inside a poll (a movie, a track, a date, a place...)."""
    id: Any
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    external_id: Optional[str] = None
    external_data: Optional[dict] = None


@dataclass
class Poll:
    """A poll attached to an event."""
    id: Any
    title: str
    poll_type: str  # movie, music_track, places, date_selection, general, ...
    voting_system: str  # binary, approval, ranked, star
    phase: str = "voting"  # list_building, voting_with_suggestions, voting, closed
    event_id: Any = None
    options: list[PollOption] = field(default_factory=list)


@dataclass
class VoteData:
    """
    A vote waiting for confirmation.

    type is the voting system for a single vote (binary, approval, star,
    ranked) or one of the clearing actions (clear, clear_all).
    """
    type: str
    option_id: Any = None
    vote: Optional[str] = None  # binary: yes / no / maybe, approval: approve / remove
    rating: Optional[int] = None  # star
    ranked_options: list[PollOption] = field(default_factory=list)


@dataclass
class Relationship:
    """A 'keeping up' connection between two users."""
    user_id: Any
    other_user_id: Any
    status: str = "active"  # active, pending, blocked
    context: Optional[str] = None  # "Met at Summer BBQ - June 2025"
    shared_event_count: int = 1
    created_at: Optional[datetime] = None


class ConnectPermission(str, Enum):
    """Whether the current user may connect with another user, and how."""
    AUTO_ACCEPT = "auto_accept"
    REQUEST_REQUIRED = "request_required"
    CLOSED = "closed"
    BLOCKED = "blocked"
    PENDING_REQUEST = "pending_request"
    ALREADY_CONNECTED = "already_connected"
