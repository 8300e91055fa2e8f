"""
Wording for the vote confirmation dialog.

describe_vote() turns pending vote data into the sentences the dialog
shows; the component only lays them out.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.entities import PollOption, VoteData
from views.helpers.movies import get_image_url

BINARY_LABELS = {"yes": "Yes", "no": "No", "maybe": "Maybe"}

CLEAR_ALL_NAMES = {
    "binary": "votes",
    "approval": "selections",
    "ranked": "ranking",
    "star": "ratings",
}

# What an anonymous vote of each type is called in the "stored temporarily" note
ANONYMOUS_NOUNS = {
    "binary": "vote",
    "approval": "selection",
    "star": "rating",
    "ranked": "ranking",
}


@dataclass
class VoteConfirmationText:
    """Sentences for the confirmation dialog."""
    lead: str
    emphasis: Optional[str] = None  # Part of lead to highlight
    shows_option: bool = False
    ranked_titles: list[str] = field(default_factory=list)
    note: Optional[str] = None
    warning: Optional[str] = None


def describe_vote(
    vote_data: VoteData,
    voting_system: str,
    anonymous_mode: bool = False
) -> VoteConfirmationText:
    """Build the dialog text for a pending vote."""
    vote_type = vote_data.type

    if vote_type == "binary":
        label = BINARY_LABELS.get(vote_data.vote, (vote_data.vote or "").capitalize())
        text = VoteConfirmationText(
            lead=f"You are about to vote {label} for:",
            emphasis=label,
            shows_option=True,
        )
    elif vote_type == "approval":
        action = "approve" if vote_data.vote in ("approved", "approve") else "remove your approval from"
        text = VoteConfirmationText(
            lead=f"You are about to {action}:",
            emphasis=action,
            shows_option=True,
        )
    elif vote_type == "star":
        stars = "star" if vote_data.rating == 1 else "stars"
        emphasis = f"{vote_data.rating} {stars}"
        text = VoteConfirmationText(
            lead=f"You are about to rate this option {emphasis}:",
            emphasis=emphasis,
            shows_option=True,
        )
    elif vote_type == "ranked":
        text = VoteConfirmationText(
            lead="You are about to submit this ranking:",
            ranked_titles=[
                f"{index}. {option.title}"
                for index, option in enumerate(vote_data.ranked_options or [], start=1)
            ],
        )
    elif vote_type == "clear":
        return VoteConfirmationText(
            lead="You are about to clear your vote for:",
            shows_option=True,
        )
    elif vote_type == "clear_all":
        name = CLEAR_ALL_NAMES.get(voting_system, "votes")
        return VoteConfirmationText(
            lead=f"You are about to clear all your {name} for this poll.",
            emphasis=name,
            warning="This action cannot be undone.",
        )
    else:
        return VoteConfirmationText(lead="Are you sure you want to proceed with this vote?")

    if anonymous_mode:
        noun = ANONYMOUS_NOUNS[vote_type]
        text.note = (
            f"This {noun} will be stored temporarily. "
            "You'll need to save your votes later to participate in the poll."
        )
    return text


def confirm_button_label(anonymous_mode: bool) -> str:
    return "Store Vote" if anonymous_mode else "Confirm Vote"


def option_image_url(option: Optional[PollOption], poll_type: str) -> Optional[str]:
    """Poster for movie polls, the option's own image otherwise."""
    if option is None:
        return None
    if poll_type == "movie":
        return get_image_url(option)
    return option.image_url
