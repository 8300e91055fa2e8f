"""
Option suggestion components for a poll.

Movie and music polls get a provider search box with pick buttons; every
poll type gets the manual entry form. Results are handed back through
the controller callbacks, manual entries through on_add_option.
"""

from datetime import date
from typing import Callable

import streamlit as st

from controllers.option_search_controller import OptionSearchController
from models.option_data import OptionData
from views.helpers.poll_text import (
    format_date_for_option_title,
    normalize_poll_type,
    option_description_placeholder,
    option_title_label,
    option_title_placeholder,
    phase_suggestion_message,
    suggest_button_text,
    suggestions_allowed_for_phase,
)


def render_option_search(
    controller: OptionSearchController,
    on_add_option: Callable[[dict], None],
):
    """
    Render the suggestion area for one poll.

    Args:
        controller: Search controller for the poll
        on_add_option: Callback with option data (dict) for manual entries
    """
    poll = controller.poll

    if not suggestions_allowed_for_phase(poll.phase):
        message = phase_suggestion_message(poll.phase)
        if message:
            st.caption(message)
        return

    if controller.uses_api_search():
        _render_search_box(controller)

    with st.expander(f"➕ {suggest_button_text(poll.poll_type)} manually"):
        _render_manual_form(poll.id, poll.poll_type, on_add_option)


def _render_search_box(controller: OptionSearchController):
    poll = controller.poll

    with st.form(key=f"search_form_{poll.id}", clear_on_submit=False, border=False):
        col_query, col_submit = st.columns([4, 1])
        with col_query:
            query = st.text_input(
                option_title_label(poll.poll_type),
                value=controller.get_query(),
                placeholder=option_title_placeholder(poll.poll_type),
                label_visibility="collapsed",
            )
        with col_submit:
            submitted = st.form_submit_button("Search", width="stretch")

    if submitted:
        with st.spinner("Searching..."):
            controller.search(query)
        st.rerun()

    error = controller.get_error()
    if error:
        st.warning(error)

    results = controller.get_results()
    if not results:
        if controller.get_query() and not error:
            st.caption("No results yet. Try a different search.")
        return

    is_movie = poll.poll_type == "movie"
    for item in results:
        col_image, col_text, col_pick = st.columns([1, 5, 1.5])
        with col_image:
            if item.image_url:
                st.image(item.image_url, width=48)
            else:
                st.markdown("🎬" if is_movie else "🎵")
        with col_text:
            year = (item.metadata.get("release_date") or "")[:4]
            title = f"**{item.title}**" + (f" ({year})" if year else "")
            st.markdown(title)
            if item.description:
                st.caption(item.description[:140])
        with col_pick:
            if st.button("Add", key=f"pick_{poll.id}_{item.id}", width="stretch"):
                if is_movie:
                    with st.spinner("Loading movie details..."):
                        controller.select_movie(item.id)
                else:
                    controller.select_music_track(item)
                st.rerun()

    if st.button("Clear results", key=f"clear_search_{poll.id}", type="tertiary"):
        controller.clear_search()
        st.rerun()


def _render_manual_form(poll_id, poll_type: str, on_add_option: Callable[[dict], None]):
    is_date = normalize_poll_type(poll_type) == "date_selection"

    with st.form(key=f"manual_option_{poll_id}", clear_on_submit=True):
        if is_date:
            picked = st.date_input(option_title_label(poll_type), value=date.today())
            title = format_date_for_option_title(picked.isoformat()) if picked else ""
        else:
            title = st.text_input(
                option_title_label(poll_type),
                placeholder=option_title_placeholder(poll_type),
            )
        description = st.text_area(
            "Description (optional)",
            placeholder=option_description_placeholder(poll_type),
            height=80,
        )
        submitted = st.form_submit_button(suggest_button_text(poll_type), type="primary")

    if submitted:
        if not title or not title.strip():
            st.warning("Please enter a title")
            return
        option = OptionData(title=title.strip(), description=description.strip() or None)
        on_add_option(option.to_dict())
        st.rerun()
