"""
Venue panels for place poll options.
"""

from typing import Optional

import streamlit as st

from views.helpers.formatting import format_place_type, format_rating, format_ratings_count
from views.helpers.venues import (
    extract_venue_details,
    hero_price_level,
    hero_rating,
    hero_ratings_count,
    hero_types,
    price_level_description,
)


def render_venue_hero(rich_data: Optional[dict]):
    """Banner with name, rating, price level and main categories."""
    venue = extract_venue_details(rich_data)

    if venue.photo_url:
        st.image(venue.photo_url, width="stretch")
    st.markdown(f"### {venue.title}")

    facts = [f"⭐ {hero_rating(venue.rating)}"]
    reviews = hero_ratings_count(venue.ratings_total)
    if reviews:
        facts.append(reviews)
    price = hero_price_level(venue.price_level)
    if price:
        facts.append(price)
    st.markdown(" · ".join(facts))

    types = hero_types(venue.types)
    if types:
        st.caption(" · ".join(format_place_type(t) for t in types))


def render_venue_details(rich_data: Optional[dict]):
    """Contact details, ratings and opening hours."""
    venue = extract_venue_details(rich_data)

    if venue.status_label:
        st.badge(venue.status_label, color="green" if venue.business_status == "OPERATIONAL" else "red")

    if venue.has_contact_info:
        st.markdown("**Contact**")
        if venue.address:
            st.markdown(f"📍 {venue.address}")
        if venue.phone:
            st.markdown(f"📞 {venue.phone}")
        if venue.website:
            st.markdown(f"🌐 [Website]({venue.website})")
    if venue.maps_url:
        st.markdown(f"[View on Google Maps]({venue.maps_url})")

    if venue.has_rating_info:
        st.markdown("**Rating**")
        line = f"⭐ {format_rating(venue.rating)}"
        reviews = format_ratings_count(venue.ratings_total)
        if reviews:
            line += f" ({reviews})"
        st.markdown(line)
        price = price_level_description(venue.price_level)
        if price:
            st.caption(price)

    if venue.opening_hours:
        label = "Hours"
        if venue.is_open_now is True:
            label += " · :green[Open now]"
        elif venue.is_open_now is False:
            label += " · :red[Closed now]"
        with st.expander(label):
            for line in venue.opening_hours:
                st.markdown(f"- {line}")
