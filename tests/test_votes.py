from models.entities import PollOption, VoteData
from views.helpers.votes import confirm_button_label, describe_vote, option_image_url


def test_binary_vote():
    text = describe_vote(VoteData(type="binary", option_id=1, vote="maybe"), "binary")
    assert text.lead == "You are about to vote Maybe for:"
    assert text.emphasis == "Maybe"
    assert text.shows_option is True
    assert text.note is None


def test_approval_vote_wording():
    approve = describe_vote(VoteData(type="approval", option_id=1, vote="approved"), "approval")
    assert approve.lead == "You are about to approve:"
    remove = describe_vote(VoteData(type="approval", option_id=1, vote="remove"), "approval")
    assert remove.lead == "You are about to remove your approval from:"


def test_star_vote():
    assert describe_vote(VoteData(type="star", option_id=1, rating=1), "star").emphasis == "1 star"
    assert describe_vote(VoteData(type="star", option_id=1, rating=4), "star").emphasis == "4 stars"


def test_ranked_vote_lists_titles():
    options = [PollOption(id=1, title="Up"), PollOption(id=2, title="Coco")]
    text = describe_vote(VoteData(type="ranked", ranked_options=options), "ranked")
    assert text.ranked_titles == ["1. Up", "2. Coco"]
    assert text.shows_option is False


def test_clear_all_names_the_voting_system():
    text = describe_vote(VoteData(type="clear_all"), "approval")
    assert text.lead == "You are about to clear all your selections for this poll."
    assert text.warning == "This action cannot be undone."


def test_anonymous_note_uses_vote_noun():
    text = describe_vote(VoteData(type="star", option_id=1, rating=3), "star", anonymous_mode=True)
    assert text.note.startswith("This rating will be stored temporarily.")
    # Clearing never gets the note
    assert describe_vote(VoteData(type="clear", option_id=1), "star", anonymous_mode=True).note is None


def test_unknown_vote_type():
    assert describe_vote(VoteData(type="mystery"), "binary").lead == "Are you sure you want to proceed with this vote?"


def test_button_label_and_image():
    assert confirm_button_label(True) == "Store Vote"
    assert confirm_button_label(False) == "Confirm Vote"

    movie = PollOption(id=1, title="Up", external_data={"poster_path": "/up.jpg"})
    assert option_image_url(movie, "movie") == "https://image.tmdb.org/t/p/w500/up.jpg"
    assert option_image_url(movie, "general") is None
    assert option_image_url(None, "movie") is None
