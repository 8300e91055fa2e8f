from unittest.mock import MagicMock

from controllers.voting_controller import VotingController
from models.entities import PollOption, VoteData


def test_confirm_records_and_notifies(binary_poll):
    confirmed = MagicMock()
    controller = VotingController(binary_poll, on_vote_confirmed=confirmed, state={})
    vote = VoteData(type="binary", option_id="o1", vote="yes")

    controller.request_vote(vote, binary_poll.options[0])
    assert controller.is_confirming() is True
    assert controller.get_pending_option().title == "Saturday, June 14"

    assert controller.confirm_vote() is vote
    confirmed.assert_called_once_with(vote)
    assert controller.is_confirming() is False
    assert controller.get_pending_vote() is None
    assert controller.get_vote("o1") is vote


def test_cancel_notifies_without_recording(binary_poll):
    cancelled = MagicMock()
    controller = VotingController(binary_poll, on_vote_cancelled=cancelled, state={})
    controller.request_vote(VoteData(type="binary", option_id="o1", vote="no"))

    controller.cancel()

    cancelled.assert_called_once_with()
    assert controller.has_votes() is False


def test_confirm_and_cancel_do_nothing_when_hidden(binary_poll):
    confirmed, cancelled = MagicMock(), MagicMock()
    controller = VotingController(binary_poll, on_vote_confirmed=confirmed, on_vote_cancelled=cancelled, state={})

    assert controller.confirm_vote() is None
    controller.cancel()

    confirmed.assert_not_called()
    cancelled.assert_not_called()


def test_clear_and_clear_all(binary_poll):
    controller = VotingController(binary_poll, state={})
    controller.record_vote(VoteData(type="binary", option_id="o1", vote="yes"))
    controller.record_vote(VoteData(type="binary", option_id="o2", vote="no"))

    controller.record_vote(VoteData(type="clear", option_id="o1"))
    assert controller.get_vote("o1") is None
    assert controller.get_vote("o2") is not None

    controller.record_vote(VoteData(type="clear_all"))
    assert controller.has_votes() is False


def test_ranking(music_poll):
    options = [PollOption(id=1, title="A"), PollOption(id=2, title="B")]
    controller = VotingController(music_poll, state={})
    controller.record_vote(VoteData(type="ranked", ranked_options=options))
    assert [o.title for o in controller.get_ranking()] == ["A", "B"]


def test_anonymous_votes_are_temporary_until_saved(binary_poll):
    state = {}
    anonymous = VotingController(binary_poll, anonymous_mode=True, state=state)
    anonymous.request_vote(VoteData(type="binary", option_id="o1", vote="yes"))
    anonymous.confirm_vote()

    assert list(anonymous.get_temporary_votes()) == ["o1"]

    signed_in = VotingController(binary_poll, state=state)
    assert signed_in.get_vote("o1") is None
    assert signed_in.save_temporary_votes() == 1
    assert signed_in.get_vote("o1").vote == "yes"
    assert signed_in.get_temporary_votes() == {}


def test_removing_approval_drops_the_vote(movie_poll):
    option = PollOption(id="o1", title="Inception")
    controller = VotingController(movie_poll, state={})

    controller.request_vote(VoteData(type="approval", option_id="o1", vote="approve"), option)
    controller.confirm_vote()
    assert controller.get_vote("o1").vote == "approve"

    controller.request_vote(VoteData(type="approval", option_id="o1", vote="remove"), option)
    controller.confirm_vote()

    assert controller.get_vote("o1") is None
    assert controller.has_votes() is False
