import pytest

from models.entities import ConnectPermission, User
from models.repositories import InMemoryRelationshipRepository, InMemoryUserRepository, RelationshipError


@pytest.fixture
def repository():
    return InMemoryRelationshipRepository()


def test_connections_are_symmetric(repository, alex, sam, summer_bbq):
    relationship = repository.create_from_shared_event(alex, sam, summer_bbq, "Met at Summer BBQ")

    assert relationship.context == "Met at Summer BBQ"
    assert relationship.created_at is not None
    assert repository.get_relationship_between(sam, alex).context == "Met at Summer BBQ"
    assert repository.can_connect(sam, alex) == ConnectPermission.ALREADY_CONNECTED

    repository.remove_relationship(sam, alex)
    assert repository.get_relationship_between(alex, sam) is None


def test_reconnecting_counts_shared_events(repository, alex, sam, summer_bbq):
    repository.create_from_shared_event(alex, sam, summer_bbq, "Met at Summer BBQ")
    repository.create_manual(sam, alex, "Neighbours")

    relationship = repository.get_relationship_between(alex, sam)
    assert relationship.shared_event_count == 2
    assert relationship.context == "Met at Summer BBQ"


@pytest.mark.parametrize("context", ["", "   "])
def test_blank_context_rejected(repository, alex, sam, context):
    with pytest.raises(RelationshipError) as exc_info:
        repository.create_manual(alex, sam, context)
    assert exc_info.value.reason == "invalid"
    assert exc_info.value.field_errors == {"context": ["can't be blank"]}


def test_cannot_connect_with_self(repository, alex):
    with pytest.raises(RelationshipError):
        repository.create_manual(alex, alex, "Me")


def test_connection_requests(repository, alex, sam):
    repository.set_preference(sam, "request")
    assert repository.can_connect(alex, sam) == ConnectPermission.REQUEST_REQUIRED

    repository.create_connection_request(alex, sam, message="Hi!")
    assert repository.can_connect(alex, sam) == ConnectPermission.PENDING_REQUEST

    with pytest.raises(RelationshipError) as exc_info:
        repository.create_connection_request(alex, sam)
    assert exc_info.value.reason == "pending_request"

    # Accepting clears the request
    repository.create_manual(alex, sam, "Friends")
    assert (alex.id, sam.id) not in repository.pending_requests


def test_requests_rejected_when_closed_or_connected(repository, alex, sam):
    repository.set_preference(sam, "closed")
    with pytest.raises(RelationshipError) as exc_info:
        repository.create_connection_request(alex, sam)
    assert exc_info.value.reason == "not_allowed"

    repository.create_manual(alex, sam, "Friends")
    with pytest.raises(RelationshipError) as exc_info:
        repository.create_connection_request(alex, sam)
    assert exc_info.value.reason == "already_connected"


def test_block_applies_both_ways(repository, alex, sam):
    repository.block(alex, sam)
    assert repository.can_connect(alex, sam) == ConnectPermission.BLOCKED
    assert repository.can_connect(sam, alex) == ConnectPermission.BLOCKED


def test_participants(repository, alex, sam, summer_bbq):
    repository.add_participant(summer_bbq, alex)
    assert repository.is_participant(summer_bbq, alex) is True
    assert repository.is_participant(summer_bbq, sam) is False


def test_username_lookup_is_case_insensitive(alex, sam):
    users = InMemoryUserRepository([alex, sam])
    assert users.is_username_taken("ALEX") is True
    assert users.is_username_taken("alex", exclude_user_id="u1") is False
    assert users.is_username_taken("nobody") is False
    assert users.get_by_id("u2") is sam


def test_users_without_username_never_match():
    users = InMemoryUserRepository([User(id="u1", name="No Name")])
    assert users.is_username_taken("") is False
