"""
Movie details panel for movie poll options.

Reads the normalized TMDB details stored on the option (external_data).
"""

import streamlit as st

from views.helpers.formatting import format_runtime
from views.helpers.movies import (
    filter_external_links,
    format_link_text,
    get_backdrop_url,
    get_director,
    get_genres,
    get_initials,
    get_poster_url,
    get_producers,
    get_profile_url,
    get_release_year,
    get_title,
    get_top_cast,
    get_writers,
    has_key_personnel,
    rating_pills,
)

CAST_COLUMNS = 6


def render_movie_details(data: dict, show_backdrop: bool = True):
    """Render hero, overview, key people, cast and links for a movie."""
    if not data:
        st.caption("No movie details available.")
        return

    backdrop = get_backdrop_url(data)
    if show_backdrop and backdrop:
        st.image(backdrop, width="stretch")

    _render_hero(data)

    overview = data.get("description") or data.get("overview")
    if overview:
        st.markdown("**Overview**")
        st.write(overview)

    if has_key_personnel(data):
        _render_key_personnel(data)

    cast = get_top_cast(data)
    if cast:
        _render_cast(cast)

    links = filter_external_links(data.get("external_urls"))
    if links:
        st.markdown(" · ".join(f"[{format_link_text(key)}]({url})" for key, url in links.items()))


def _render_hero(data: dict):
    col_poster, col_info = st.columns([1, 3])
    with col_poster:
        poster = get_poster_url(data)
        if poster:
            st.image(poster, width="stretch")
        else:
            st.markdown("## 🎬")

    with col_info:
        year = get_release_year(data)
        title = get_title(data)
        st.markdown(f"### {title}" + (f" ({year})" if year else ""))

        tagline = data.get("tagline")
        if tagline:
            st.markdown(f"*{tagline}*")

        facts = []
        runtime = format_runtime(data.get("runtime"))
        if runtime:
            facts.append(runtime)
        genres = get_genres(data)
        if genres:
            facts.append(genres)
        if facts:
            st.caption(" • ".join(facts))

        pills = rating_pills(data)
        if pills:
            st.markdown("  ".join(f"`{pill}`" for pill in pills))


def _render_key_personnel(data: dict):
    st.markdown("**Key People**")
    rows = []
    director = get_director(data)
    if director:
        rows.append(f"- **Director:** {director}")
    writers = get_writers(data)
    if writers:
        rows.append(f"- **Writers:** {', '.join(w['name'] for w in writers if w.get('name'))}")
    producers = get_producers(data)
    if producers:
        rows.append(f"- **Producers:** {', '.join(p['name'] for p in producers if p.get('name'))}")
    st.markdown("\n".join(rows))


def _render_cast(cast: list[dict]):
    st.markdown("**Cast**")
    columns = st.columns(CAST_COLUMNS)
    for index, person in enumerate(cast):
        with columns[index % CAST_COLUMNS]:
            photo = get_profile_url(person)
            if photo:
                st.image(photo, width="stretch")
            else:
                st.markdown(f"### {get_initials(person.get('name'))}")
            st.markdown(f"**{person.get('name', '')}**")
            if person.get("character"):
                st.caption(person["character"])
