"""
Reusable UI components.
"""

from views.components.connect_modal import render_connect_modal
from views.components.image_picker import render_image_picker
from views.components.movie_details import render_movie_details
from views.components.option_search import render_option_search
from views.components.poll_card import render_poll_empty_state, render_poll_header, render_poll_voting
from views.components.relationship_button import render_relationship_button
from views.components.sidebar import render_account_sidebar
from views.components.status_badge import render_status_badge
from views.components.username_input import render_username_input
from views.components.venue_details import render_venue_details, render_venue_hero
from views.components.vote_confirmation import render_vote_confirmation

__all__ = [
    # Polls
    "render_option_search",
    "render_poll_header",
    "render_poll_empty_state",
    "render_poll_voting",
    "render_vote_confirmation",
    # Rich data
    "render_movie_details",
    "render_venue_hero",
    "render_venue_details",
    # People
    "render_relationship_button",
    "render_connect_modal",
    # Sidebar
    "render_account_sidebar",
    # Events & settings
    "render_status_badge",
    "render_image_picker",
    "render_username_input",
]
