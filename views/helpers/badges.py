"""
Status badges for events, roles and scores.

Turns technical event status values into friendly messages, adds a line
of context (funding progress, polling deadline, tickets left) and picks
the badge colour and icon.

Formats:
- badge: short label for a pill ("Open for Registration")
- compact: card subtitle ("Registration Open")
- detailed: full sentence for the event page
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from models.entities import Event
from views.helpers.formatting import format_currency, pluralize

FORMATS = ("badge", "compact", "detailed")

_CONFIRMED = {
    "ticketed": ("Open for Registration", "Registration Open", "Event confirmed and open for registration"),
    "default": ("Ready to Go", "Event Ready", "Event confirmed and ready to attend"),
}
_POLLING = ("Getting Feedback", "Collecting Votes", "Collecting feedback from attendees")
_THRESHOLD = {
    "crowdfunding": ("Crowdfunding Active", "Funding in Progress", "Crowdfunding campaign in progress"),
    "interest": ("Validating Interest", "Checking Interest", "Collecting interest from potential attendees"),
    "default": ("Building Momentum", "Pre-Launch", "Building momentum before launch"),
}
_DRAFT = ("In Planning", "Planning Stage", "Event is still being planned")
_CANCELED = ("Canceled", "Event Canceled", "This event has been canceled")

# Streamlit badge colours for the tailwind-style classes below
_BADGE_COLORS = {
    "green": "green",
    "blue": "blue",
    "purple": "violet",
    "yellow": "orange",
    "orange": "orange",
    "red": "red",
    "gray": "gray",
}


@dataclass
class StatusDisplay:
    """Everything a status badge needs."""
    primary: str
    secondary: Optional[str]
    has_context: bool
    css_class: str
    icon: str

    @property
    def color(self) -> str:
        return badge_color(self.css_class)


def is_ticketed(event: Event) -> bool:
    return event.is_ticketed is True or event.taxation_type == "ticketed_event"


def is_crowdfunding(event: Event) -> bool:
    return event.threshold_type == "revenue" and is_ticketed(event)


def is_interest_validation(event: Event) -> bool:
    return event.threshold_type == "attendee_count"


def friendly_status_message(event: Event, format: str = "compact") -> str:
    """User-facing status text for an event."""
    status = event.status
    if status == "confirmed":
        messages = _CONFIRMED["ticketed" if is_ticketed(event) else "default"]
        fallback = "Ready to Go"
    elif status == "polling":
        messages, fallback = _POLLING, "Collecting Votes"
    elif status == "threshold":
        if is_crowdfunding(event):
            messages = _THRESHOLD["crowdfunding"]
        elif is_interest_validation(event):
            messages = _THRESHOLD["interest"]
        else:
            messages = _THRESHOLD["default"]
        fallback = "Building Momentum"
    elif status == "draft":
        messages, fallback = _DRAFT, "Planning Stage"
    elif status == "canceled":
        messages, fallback = _CANCELED, "Canceled"
    else:
        return "Status Unknown"

    if format not in FORMATS:
        return fallback
    return messages[FORMATS.index(format)]


def _people(count: int) -> str:
    return pluralize("people", count, "person")


def _crowdfunding_progress(event: Event) -> str:
    goal_cents = event.threshold_revenue_cents
    current_cents = event.current_revenue_cents
    if goal_cents is not None and current_cents is not None:
        goal = format_currency(goal_cents)
        current = format_currency(current_cents)
        remaining = goal_cents - current_cents
        if remaining > 0:
            return f"Raised {current} of {goal} goal ({format_currency(remaining)} to go)"
        return f"Goal reached! Raised {current} of {goal}"
    if goal_cents is not None:
        return f"Funding goal: {format_currency(goal_cents)}"
    return "Crowdfunding in progress"


def _interest_progress(event: Event) -> str:
    threshold = event.threshold_count
    participants = event.participant_count
    if threshold is not None and participants is not None:
        remaining = threshold - participants
        if remaining > 0:
            return f"Waiting for {remaining} more {_people(remaining)} to sign up"
        return f"Interest goal reached! {participants} {_people(participants)} signed up"
    if threshold is not None:
        return f"Need {threshold} {_people(threshold)} to confirm"
    if participants:
        return f"{participants} {_people(participants)} interested so far"
    return "Collecting interest from potential attendees"


def _threshold_progress(event: Event) -> str:
    if event.threshold_count is not None and event.participant_count is not None:
        remaining = event.threshold_count - event.participant_count
        if remaining > 0:
            return f"Need {remaining} more {_people(remaining)}"
        return "Threshold reached!"
    return "Building momentum"


def polling_deadline_info(deadline: Any, now: Optional[datetime] = None) -> str:
    """Countdown text for a polling deadline (datetime or ISO string)."""
    if isinstance(deadline, str):
        try:
            deadline = datetime.fromisoformat(deadline.replace("Z", "+00:00"))
        except ValueError:
            return "Polling deadline soon"
    if not isinstance(deadline, datetime):
        return "Polling in progress"

    now = now or datetime.now(timezone.utc)
    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff = int((deadline - now).total_seconds())
    if diff <= 0:
        return "Polling has ended"
    if diff < 3600:
        minutes = diff // 60
        return f"Polling closes in {minutes} {pluralize('minute', minutes)}"
    if diff < 86400:
        hours = diff // 3600
        return f"Polling closes in {hours} {pluralize('hour', hours)}"
    days = diff // 86400
    return f"Polling closes in {days} {pluralize('day', days)}"


def contextual_info(event: Event, now: Optional[datetime] = None) -> Optional[str]:
    """One line of context under the status, or None."""
    status = event.status
    if status == "threshold":
        if is_crowdfunding(event):
            return _crowdfunding_progress(event)
        if is_interest_validation(event):
            return _interest_progress(event)
        return _threshold_progress(event)
    if status == "polling":
        if event.polling_deadline:
            return polling_deadline_info(event.polling_deadline, now)
        return "Polling in progress"
    if status == "confirmed":
        if is_ticketed(event) and event.available_tickets > 0:
            return f"{event.available_tickets} tickets remaining"
        if is_ticketed(event):
            return "Registration required"
        if event.participant_count and event.participant_count > 0:
            return f"{event.participant_count} {_people(event.participant_count)} attending"
        return None
    if status == "draft":
        return "Details being finalized"
    if status == "canceled":
        return "Event will not take place"
    return None


def status_css_class(event: Event) -> str:
    status = event.status
    if status == "confirmed":
        return "bg-green-100 text-green-800"
    if status == "polling":
        return "bg-blue-100 text-blue-800"
    if status == "threshold":
        if is_crowdfunding(event):
            return "bg-purple-100 text-purple-800"
        return "bg-yellow-100 text-yellow-800"
    if status == "canceled":
        return "bg-red-100 text-red-800"
    return "bg-gray-100 text-gray-800"


def status_icon(event: Event) -> str:
    status = event.status
    if status == "confirmed":
        return "✓"
    if status == "polling":
        return "📊"
    if status == "threshold":
        return "💰" if is_crowdfunding(event) else "🎯"
    if status == "draft":
        return "📝"
    if status == "canceled":
        return "❌"
    return "❓"


def complete_status_display(
    event: Event,
    format: str = "compact",
    now: Optional[datetime] = None
) -> StatusDisplay:
    """Friendly message, context line, colour and icon together."""
    secondary = contextual_info(event, now)
    return StatusDisplay(
        primary=friendly_status_message(event, format),
        secondary=secondary,
        has_context=secondary is not None,
        css_class=status_css_class(event),
        icon=status_icon(event),
    )


def role_badge_class(role: Optional[str]) -> str:
    """Group member role badge: admins stand out, everyone else is gray."""
    if role == "admin":
        return "bg-blue-100 text-blue-800"
    return "bg-gray-100 text-gray-800"


def success_rate_badge_class(rate: Any) -> str:
    """Percentage badge: >=95 green, >=80 yellow, otherwise red."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return "bg-gray-100 text-gray-800"
    if rate >= 95:
        return "bg-green-100 text-green-800"
    if rate >= 80:
        return "bg-yellow-100 text-yellow-800"
    return "bg-red-100 text-red-800"


def confidence_badge_class(score: Any) -> str:
    """Match confidence badge for a 0-1 score."""
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return "bg-gray-100 text-gray-800"
    if score >= 0.9:
        return "bg-green-100 text-green-800"
    if score >= 0.7:
        return "bg-yellow-100 text-yellow-800"
    if score >= 0.5:
        return "bg-orange-100 text-orange-800"
    return "bg-red-100 text-red-800"


def badge_color(css_class: str) -> str:
    """Map a "bg-<colour>-100 ..." class to a Streamlit badge colour."""
    for token in css_class.split():
        if token.startswith("bg-"):
            name = token.split("-")[1]
            return _BADGE_COLORS.get(name, "gray")
    return "gray"
