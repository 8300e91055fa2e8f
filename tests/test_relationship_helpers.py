from datetime import datetime

from models.entities import ConnectPermission, Event, Relationship
from views.helpers.relationships import (
    button_disabled,
    button_icon,
    button_label,
    button_type,
    connection_tooltip,
    format_field_errors,
    show_button,
    show_note_button,
    suggested_context,
)


def test_blocked_users_never_see_the_button():
    assert show_button(False, ConnectPermission.BLOCKED) is False
    assert show_button(False, ConnectPermission.AUTO_ACCEPT) is True


def test_disabled_states():
    assert button_disabled(False, ConnectPermission.CLOSED) is True
    assert button_disabled(False, ConnectPermission.PENDING_REQUEST) is True
    assert button_disabled(False, ConnectPermission.REQUEST_REQUIRED) is False
    assert button_disabled(True, ConnectPermission.CLOSED) is False


def test_tooltips():
    assert connection_tooltip(False, ConnectPermission.CLOSED, None) == "This person prefers to reach out first"
    assert connection_tooltip(False, ConnectPermission.REQUEST_REQUIRED, None) == "Send an introduction"
    assert connection_tooltip(False, ConnectPermission.AUTO_ACCEPT, None) == "Keep up with their events"
    assert connection_tooltip(False, None, None, error="Boom") == "Boom"

    relationship = Relationship(user_id=1, other_user_id=2, context="Met at BBQ", shared_event_count=3)
    assert connection_tooltip(True, ConnectPermission.ALREADY_CONNECTED, relationship) == "Met at BBQ (3 events together)"
    relationship.shared_event_count = 1
    assert connection_tooltip(True, ConnectPermission.ALREADY_CONNECTED, relationship) == "Met at BBQ"
    assert connection_tooltip(True, None, relationship, show_context=False) == "You're keeping up with them"


def test_label_type_and_icon():
    assert button_label(True, None) == "Keeping Up"
    assert button_label(False, ConnectPermission.PENDING_REQUEST) == "Request sent"
    assert button_label(False, ConnectPermission.AUTO_ACCEPT) == "Keep Up"
    assert button_type(False, ConnectPermission.AUTO_ACCEPT, "outline") == "secondary"
    assert button_type(False, ConnectPermission.CLOSED) == "tertiary"
    assert button_type(True, None, "outline") == "primary"
    assert button_icon(True, None) == ":material/check:"
    assert button_icon(False, ConnectPermission.PENDING_REQUEST) == ":material/schedule:"


def test_suggested_context():
    event = Event(id=1, title="Summer BBQ", start_at=datetime(2025, 6, 14))
    assert suggested_context(event) == "Met at Summer BBQ - June 2025"
    assert suggested_context(Event(id=2, title="Jazz Night")) == "Met at Jazz Night"
    assert suggested_context(None) == ""


def test_format_field_errors():
    errors = {"context": ["can't be blank"], "user": ["is invalid", "is blocked"]}
    assert format_field_errors(errors) == "context: can't be blank; user: is invalid, is blocked"


def test_note_button_only_for_open_profiles():
    assert show_note_button(ConnectPermission.AUTO_ACCEPT) is True
    for permission in (
        ConnectPermission.BLOCKED,
        ConnectPermission.CLOSED,
        ConnectPermission.REQUEST_REQUIRED,
        ConnectPermission.PENDING_REQUEST,
        ConnectPermission.ALREADY_CONNECTED,
        None,
    ):
        assert show_note_button(permission) is False
