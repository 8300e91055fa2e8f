"""
Display rules for the "Keep Up" relationship button and connect modal.
"""

from datetime import datetime
from typing import Optional

from models.entities import ConnectPermission, Event, Relationship

# Quick picks offered under the context box
QUICK_CONTEXTS = ("Friends", "Colleagues", "Met at an event")

BUTTON_SIZES = ("sm", "md", "lg")
BUTTON_VARIANTS = ("primary", "outline")


def show_button(is_connected: bool, permission: Optional[ConnectPermission]) -> bool:
    """Blocked users never see the button."""
    return permission != ConnectPermission.BLOCKED


def show_note_button(permission: Optional[ConnectPermission]) -> bool:
    """The connect-with-note panel connects directly, so only open profiles get it."""
    return permission == ConnectPermission.AUTO_ACCEPT


def button_disabled(is_connected: bool, permission: Optional[ConnectPermission]) -> bool:
    """Visible but not clickable while closed or waiting on a request."""
    if is_connected:
        return False
    return permission in (ConnectPermission.CLOSED, ConnectPermission.PENDING_REQUEST)


def connection_tooltip(
    is_connected: bool,
    permission: Optional[ConnectPermission],
    relationship: Optional[Relationship],
    show_context: bool = True,
    error: Optional[str] = None
) -> str:
    if error:
        return error
    if not is_connected:
        if permission == ConnectPermission.CLOSED:
            return "This person prefers to reach out first"
        if permission == ConnectPermission.REQUEST_REQUIRED:
            return "Send an introduction"
        if permission == ConnectPermission.PENDING_REQUEST:
            return "Waiting for response"
        return "Keep up with their events"

    if show_context and relationship is not None and relationship.context:
        if relationship.shared_event_count > 1:
            return f"{relationship.context} ({relationship.shared_event_count} events together)"
        return relationship.context
    return "You're keeping up with them"


def button_label(is_connected: bool, permission: Optional[ConnectPermission]) -> str:
    if is_connected:
        return "Keeping Up"
    if permission == ConnectPermission.PENDING_REQUEST:
        return "Request sent"
    return "Keep Up"


def button_type(
    is_connected: bool,
    permission: Optional[ConnectPermission],
    variant: str = "primary"
) -> str:
    """Streamlit button type: primary, secondary or tertiary."""
    if is_connected:
        return "primary"
    if permission in (ConnectPermission.CLOSED, ConnectPermission.PENDING_REQUEST):
        return "tertiary"
    if variant == "outline":
        return "secondary"
    return "primary"


def button_icon(is_connected: bool, permission: Optional[ConnectPermission]) -> str:
    if is_connected:
        return ":material/check:"
    if permission == ConnectPermission.PENDING_REQUEST:
        return ":material/schedule:"
    return ":material/person_add:"


def suggested_context(event: Optional[Event]) -> str:
    """"Met at Summer BBQ - June 2025" for an event, "" without one."""
    if event is None:
        return ""
    if isinstance(event.start_at, datetime):
        return f"Met at {event.title} - {event.start_at.strftime('%B %Y')}"
    return f"Met at {event.title}"


def format_field_errors(field_errors: dict[str, list[str]]) -> str:
    """{"context": ["can't be blank"]} -> "context: can't be blank"."""
    return "; ".join(
        f"{field_name}: {', '.join(messages)}"
        for field_name, messages in field_errors.items()
    )
