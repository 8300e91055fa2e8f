"""
Vote confirmation panel.
"""

import streamlit as st

from controllers.voting_controller import VotingController
from views.helpers.votes import confirm_button_label, describe_vote, option_image_url


def render_vote_confirmation(controller: VotingController):
    """
    Render the confirmation panel for the pending vote, if any.

    Confirm records the vote and fires vote_confirmed; Cancel fires
    vote_confirmation_cancelled.
    """
    if not controller.is_confirming():
        return

    vote_data = controller.get_pending_vote()
    if vote_data is None:
        return

    poll = controller.poll
    option = controller.get_pending_option()
    text = describe_vote(vote_data, poll.voting_system, controller.anonymous_mode)

    with st.container(border=True):
        st.markdown("#### Confirm Your Vote")

        lead = text.lead
        if text.emphasis:
            lead = lead.replace(text.emphasis, f"**{text.emphasis}**", 1)
        st.markdown(lead)

        if text.shows_option and option is not None:
            col_image, col_title = st.columns([1, 4])
            with col_image:
                image_url = option_image_url(option, poll.poll_type)
                if image_url:
                    st.image(image_url, width=64)
            with col_title:
                st.markdown(f"**{option.title}**")
                if option.description:
                    st.caption(option.description)

        if text.ranked_titles:
            st.markdown("\n".join(f"- {title}" for title in text.ranked_titles))

        if text.warning:
            st.warning(text.warning)
        if text.note:
            st.info(text.note)

        col_cancel, col_confirm = st.columns(2)
        with col_cancel:
            if st.button("Cancel", key=f"cancel_vote_{poll.id}", width="stretch"):
                controller.cancel()
                st.rerun()
        with col_confirm:
            if st.button(
                confirm_button_label(controller.anonymous_mode),
                key=f"confirm_vote_{poll.id}",
                type="primary",
                width="stretch",
            ):
                controller.confirm_vote()
                st.rerun()
