"""
Poll voting components.

Every vote action opens the confirmation panel through
VotingController.request_vote; nothing is recorded until confirmed.
"""

import streamlit as st

from controllers.voting_controller import VotingController
from models.entities import Poll, PollOption, VoteData
from views.helpers.movies import build_enhanced_description
from views.helpers.poll_text import (
    empty_state_description,
    empty_state_guidance,
    empty_state_title,
    phase_display_name,
)
from views.helpers.votes import option_image_url

BINARY_CHOICES = (("yes", "👍 Yes"), ("maybe", "🤔 Maybe"), ("no", "👎 No"))


def render_poll_header(poll: Poll):
    col_title, col_phase = st.columns([4, 1])
    with col_title:
        st.subheader(poll.title)
    with col_phase:
        st.badge(phase_display_name(poll.phase), color="blue")


def render_poll_empty_state(poll: Poll):
    st.info(
        f"**{empty_state_title(poll.poll_type)}**\n\n"
        f"{empty_state_description(poll.poll_type, poll.voting_system)}\n\n"
        f"{empty_state_guidance(poll.poll_type)}"
    )


def render_poll_voting(poll: Poll, controller: VotingController):
    """
    Render the options of a poll with the controls for its voting system.

    Args:
        poll: Poll to render
        controller: Voting controller for the poll
    """
    if not poll.options:
        render_poll_empty_state(poll)
        return

    voting_open = poll.phase != "closed"

    if poll.voting_system == "ranked":
        _render_ranked(poll, controller, voting_open)
    else:
        for option in poll.options:
            _render_option_row(poll, option, controller, voting_open)

    if voting_open and controller.has_votes():
        if st.button("Clear all my votes", key=f"clear_all_{poll.id}", type="tertiary"):
            controller.request_vote(VoteData(type="clear_all"))
            st.rerun()


def _render_option_summary(poll: Poll, option: PollOption):
    image_url = option_image_url(option, poll.poll_type)
    col_image, col_text = st.columns([1, 5])
    with col_image:
        if image_url:
            st.image(image_url, width=60)
    with col_text:
        st.markdown(f"**{option.title}**")
        details = option.external_data or {}
        line = build_enhanced_description(details) if poll.poll_type == "movie" else ""
        if line:
            st.caption(line)
        elif option.description:
            st.caption(option.description)


def _render_option_row(poll: Poll, option: PollOption, controller: VotingController, voting_open: bool):
    current = controller.get_vote(option.id)

    with st.container(border=True):
        col_option, col_vote = st.columns([3, 2])
        with col_option:
            _render_option_summary(poll, option)

        with col_vote:
            if not voting_open:
                return
            if poll.voting_system == "binary":
                _render_binary(poll, option, controller, current)
            elif poll.voting_system == "approval":
                _render_approval(poll, option, controller, current)
            elif poll.voting_system == "star":
                _render_star(poll, option, controller, current)

            if current and st.button("Clear", key=f"clear_{poll.id}_{option.id}", type="tertiary"):
                controller.request_vote(VoteData(type="clear", option_id=option.id), option)
                st.rerun()


def _render_binary(poll, option, controller, current):
    columns = st.columns(len(BINARY_CHOICES))
    for column, (value, label) in zip(columns, BINARY_CHOICES):
        with column:
            selected = current is not None and current.vote == value
            if st.button(
                label,
                key=f"binary_{poll.id}_{option.id}_{value}",
                type="primary" if selected else "secondary",
                width="stretch",
            ):
                controller.request_vote(VoteData(type="binary", option_id=option.id, vote=value), option)
                st.rerun()


def _render_approval(poll, option, controller, current):
    approved = current is not None and current.vote == "approve"
    label = "✅ Approved" if approved else "Approve"
    if st.button(
        label,
        key=f"approve_{poll.id}_{option.id}",
        type="primary" if approved else "secondary",
        width="stretch",
    ):
        vote = "remove" if approved else "approve"
        controller.request_vote(VoteData(type="approval", option_id=option.id, vote=vote), option)
        st.rerun()


def _render_star(poll, option, controller, current):
    columns = st.columns(5)
    for rating, column in enumerate(columns, start=1):
        with column:
            selected = current is not None and current.rating == rating
            if st.button(
                f"{rating}⭐",
                key=f"star_{poll.id}_{option.id}_{rating}",
                type="primary" if selected else "secondary",
                width="stretch",
            ):
                controller.request_vote(
                    VoteData(type="star", option_id=option.id, rating=rating),
                    option
                )
                st.rerun()


def _render_ranked(poll: Poll, controller: VotingController, voting_open: bool):
    for option in poll.options:
        with st.container(border=True):
            _render_option_summary(poll, option)

    if not voting_open:
        return

    by_title = {option.title: option for option in poll.options}
    current = [option.title for option in controller.get_ranking() if option.title in by_title]

    ranked = st.multiselect(
        "Pick options in order of preference",
        options=list(by_title),
        default=current,
        key=f"ranking_{poll.id}",
    )
    if st.button("Submit ranking", key=f"submit_ranking_{poll.id}", disabled=not ranked):
        controller.request_vote(
            VoteData(type="ranked", ranked_options=[by_title[title] for title in ranked])
        )
        st.rerun()
