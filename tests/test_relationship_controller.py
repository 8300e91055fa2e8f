from unittest.mock import MagicMock

import pytest

from controllers.relationship_controller import ConnectModalController, RelationshipButtonController
from models.entities import ConnectPermission, User
from models.repositories import InMemoryRelationshipRepository, RelationshipError


@pytest.fixture
def repository(alex, sam, summer_bbq):
    repo = InMemoryRelationshipRepository()
    repo.add_participant(summer_bbq, alex)
    repo.add_participant(summer_bbq, sam)
    return repo


def make_button(current, other, repository, event=None, **callbacks):
    return RelationshipButtonController(current, other, repository, event=event, state={}, **callbacks)


def test_anonymous_click_asks_for_sign_in(sam, repository):
    show_auth = MagicMock()
    button = make_button(None, sam, repository, on_show_auth_modal=show_auth)

    button.connect()

    show_auth.assert_called_once_with("connect")
    assert button.is_connected() is False
    assert button.get_permission() is None


def test_connect_uses_event_context(alex, sam, repository, summer_bbq):
    created = MagicMock()
    button = make_button(alex, sam, repository, event=summer_bbq, on_connection_created=created)
    assert button.get_permission() == ConnectPermission.AUTO_ACCEPT

    button.connect()

    created.assert_called_once_with(sam)
    assert button.is_connected() is True
    assert button.get_relationship().context == "Met at Summer BBQ - June 2025"
    # Both directions exist
    assert repository.get_relationship_between(sam, alex) is not None


def test_request_required_sends_request(alex, sam, repository):
    repository.set_preference(sam, "request")
    sent = MagicMock()
    button = make_button(alex, sam, repository, on_connection_request_sent=sent)

    button.connect()

    sent.assert_called_once_with(sam)
    assert button.get_permission() == ConnectPermission.PENDING_REQUEST
    assert button.is_connected() is False


def test_request_already_pending(alex, sam, repository):
    repository.set_preference(sam, "request")
    repository.create_connection_request(alex, sam)
    button = make_button(alex, sam, repository)
    assert button.get_permission() == ConnectPermission.PENDING_REQUEST


def test_request_race_with_existing_pending(alex, sam):
    repository = MagicMock()
    repository.get_relationship_between.return_value = None
    repository.can_connect.return_value = ConnectPermission.REQUEST_REQUIRED
    repository.create_connection_request.side_effect = RelationshipError("pending_request")
    button = make_button(alex, sam, repository)

    button.connect()

    assert button.get_permission() == ConnectPermission.PENDING_REQUEST
    assert button.get_error() is None


def test_connect_failure_shows_field_errors(alex, sam):
    repository = MagicMock()
    repository.get_relationship_between.return_value = None
    repository.can_connect.return_value = ConnectPermission.AUTO_ACCEPT
    repository.create_manual.side_effect = RelationshipError("invalid", {"context": ["can't be blank"]})
    button = make_button(alex, sam, repository)

    button.connect()

    assert button.get_error() == "context: can't be blank"
    assert button.is_connected() is False


def test_blocked_and_closed(alex, sam, repository):
    repository.block(sam, alex)
    assert make_button(alex, sam, repository).get_permission() == ConnectPermission.BLOCKED

    other = User(id="u3", name="Casey")
    repository.set_preference(other, "closed")
    assert make_button(alex, other, repository).get_permission() == ConnectPermission.CLOSED


def test_disconnect_needs_confirmation(alex, sam, repository, summer_bbq):
    button = make_button(alex, sam, repository, event=summer_bbq)
    button.connect()

    button.disconnect()
    assert button.is_confirming_disconnect() is True
    button.cancel_disconnect()
    assert button.is_connected() is True

    button.disconnect()
    button.confirm_disconnect()
    assert button.is_connected() is False
    assert button.get_permission() == ConnectPermission.AUTO_ACCEPT
    assert repository.get_relationship_between(sam, alex) is None


def test_status_is_refreshed_from_repository(alex, sam, repository, summer_bbq):
    state = {}
    RelationshipButtonController(alex, sam, repository, state=state)
    repository.create_from_shared_event(alex, sam, summer_bbq, "Met at Summer BBQ")

    button = RelationshipButtonController(alex, sam, repository, state=state)
    assert button.is_connected() is True


def make_modal(current, repository, **callbacks):
    return ConnectModalController(current, repository, state={}, **callbacks)


def test_modal_prefills_suggestion_on_fresh_open(alex, sam, repository, summer_bbq):
    modal = make_modal(alex, repository)
    modal.open(sam, summer_bbq)
    assert modal.get_context() == "Met at Summer BBQ - June 2025"

    modal.update_context("Neighbours")
    modal.open(sam, summer_bbq)
    assert modal.get_context() == "Neighbours"


def test_modal_submit_creates_relationship(alex, sam, repository, summer_bbq):
    created, closed = MagicMock(), MagicMock()
    modal = make_modal(alex, repository, on_connection_created=created, on_close=closed)
    modal.open(sam, summer_bbq)
    modal.use_suggestion("Friends")

    assert modal.submit() is True

    created.assert_called_once_with(sam)
    assert modal.is_open() is False
    assert repository.get_relationship_between(alex, sam).context == "Friends"
    closed.assert_not_called()


def test_modal_requires_context(alex, sam, repository):
    modal = make_modal(alex, repository)
    modal.open(sam)
    modal.update_context("   ")

    assert modal.can_submit() is False
    assert modal.submit() is False
    assert modal.get_error() == "Please add some context about how you know each other"


def test_modal_requires_both_attendees(alex, sam, repository, summer_bbq):
    stranger = User(id="u9", name="Pat Stranger")
    modal = make_modal(stranger, repository)
    modal.open(sam, summer_bbq)
    assert modal.submit() is False
    assert modal.get_error() == "You must be attending this event to stay in touch with other attendees"

    modal = make_modal(alex, repository)
    modal.open(stranger, summer_bbq)
    assert modal.submit() is False
    assert modal.get_error() == "Pat Stranger is not attending this event"


def test_modal_without_event_connects_manually(alex, sam, repository):
    modal = make_modal(alex, repository)
    modal.open(sam, suggested="Colleagues")
    assert modal.submit() is True
    assert repository.get_relationship_between(sam, alex).context == "Colleagues"


def test_modal_close(alex, sam, repository):
    closed = MagicMock()
    modal = make_modal(alex, repository, on_close=closed)
    modal.open(sam, suggested="Friends")
    modal.close()
    closed.assert_called_once_with()
    assert modal.is_open() is False
    assert modal.get_context() == ""


@pytest.mark.parametrize("setup, message", [
    (lambda repo, me, other: repo.block(other, me), "You can't connect with this person"),
    (lambda repo, me, other: repo.set_preference(other, "closed"), "This person prefers to reach out first"),
    (
        lambda repo, me, other: repo.set_preference(other, "request"),
        "This person reviews introductions first. Use Keep Up to send one.",
    ),
    (
        lambda repo, me, other: (repo.set_preference(other, "request"), repo.create_connection_request(me, other)),
        "Your introduction is waiting for a response",
    ),
])
def test_modal_respects_connect_permission(alex, sam, repository, summer_bbq, setup, message):
    setup(repository, alex, sam)
    created = MagicMock()
    modal = make_modal(alex, repository, on_connection_created=created)
    modal.open(sam, summer_bbq)

    assert modal.submit() is False

    assert modal.get_error() == message
    assert repository.get_relationship_between(alex, sam) is None
    created.assert_not_called()
    assert modal.is_open() is True
