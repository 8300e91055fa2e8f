"""
Wording for the option suggestion form, per poll type and phase.
"""

from datetime import date, datetime
from typing import Optional

API_SEARCH_TYPES = ("movie", "music")

SUGGEST_BUTTON_TEXT = {
    "date_selection": "Add Date",
    "movie": "Add Movie",
    "music": "Add Song",
    "place": "Add Place",
    "book": "Add Book",
    "general": "Add Option",
}

TITLE_LABELS = {
    "date_selection": "Date",
    "movie": "Movie Title",
    "music": "Song Title",
    "place": "Place Name",
    "book": "Book Title",
    "general": "Option",
}

TITLE_PLACEHOLDERS = {
    "date_selection": "Select a date...",
    "movie": "Search for a movie...",
    "music": "Search for a song...",
    "place": "Enter a place name...",
    "book": "Enter a book title...",
    "general": "Enter your suggestion...",
}

DESCRIPTION_PLACEHOLDERS = {
    "date_selection": "Add details about this date...",
    "movie": "Why should we watch this movie?",
    "music": "Why should we listen to this song?",
    "place": "What makes this place special?",
    "book": "Why should we read this book?",
    "general": "Add more details about this option...",
}

OPTION_TYPE_TEXT = {
    "date_selection": "date",
    "movie": "movie",
    "music": "song",
    "place": "place",
    "book": "book",
    "general": "option",
}

EMPTY_STATE_GUIDANCE = {
    "date_selection": "Use the calendar to select available dates and times.",
    "movie": "Search for movies or add custom entries.",
    "music": "Search for songs or add custom entries.",
    "place": "Search for places or add custom locations.",
    "book": "Add book titles and authors.",
    "general": "Add any options you want people to choose between.",
}

VOTING_ACTIONS = {
    "binary": "vote yes or no on",
    "approval": "approve",
    "ranked": "rank",
    "star": "rate",
}

PHASE_NAMES = {
    "list_building": "Building List",
    "voting_with_suggestions": "Voting (with suggestions)",
    "voting_only": "Voting Only",
    "voting": "Voting",
    "closed": "Closed",
}

SUGGESTION_PHASES = ("list_building", "voting_with_suggestions", "voting")


def normalize_poll_type(poll_type: str) -> str:
    """Stored music polls use "music_track"; the wording tables use "music"."""
    if poll_type == "music_track":
        return "music"
    if poll_type == "places":
        return "place"
    return poll_type


def should_use_api_search(poll_type: str) -> bool:
    return normalize_poll_type(poll_type) in API_SEARCH_TYPES


def suggest_button_text(poll_type: str) -> str:
    key = normalize_poll_type(poll_type)
    return SUGGEST_BUTTON_TEXT.get(key, f"Add {key.capitalize()}")


def option_title_label(poll_type: str) -> str:
    key = normalize_poll_type(poll_type)
    return TITLE_LABELS.get(key, key.capitalize())


def option_title_placeholder(poll_type: str) -> str:
    key = normalize_poll_type(poll_type)
    return TITLE_PLACEHOLDERS.get(key, f"Enter {key}...")


def option_description_placeholder(poll_type: str) -> str:
    return DESCRIPTION_PLACEHOLDERS.get(normalize_poll_type(poll_type), "Add more details...")


def option_type_text(poll_type: str) -> str:
    key = normalize_poll_type(poll_type)
    return OPTION_TYPE_TEXT.get(key, key)


def empty_state_title(poll_type: str) -> str:
    return f"No {option_type_text(poll_type)}s added yet"


def empty_state_description(poll_type: str, voting_system: str) -> str:
    action = VOTING_ACTIONS.get(voting_system, "vote on")
    return f"Start by adding {option_type_text(poll_type)}s that people can {action}."


def empty_state_guidance(poll_type: str) -> str:
    key = normalize_poll_type(poll_type)
    return EMPTY_STATE_GUIDANCE.get(key, f"Add {key} options for people to choose from.")


def suggestions_allowed_for_phase(phase: str) -> bool:
    return phase in SUGGESTION_PHASES


def phase_suggestion_message(phase: str) -> Optional[str]:
    """Why the suggestion form is hidden, if it is."""
    if phase == "voting_only":
        return "Suggestions disabled during voting-only phase"
    if phase == "closed":
        return "Poll is closed - no more suggestions allowed"
    return None


def phase_display_name(phase: str) -> str:
    return PHASE_NAMES.get(phase, phase.capitalize())


def format_deadline(deadline: Optional[datetime]) -> str:
    if not isinstance(deadline, datetime):
        return "Invalid deadline"
    return deadline.strftime("%B %d, %Y at %I:%M %p")


def format_date_for_option_title(value: str) -> str:
    """"2025-06-14" -> "Saturday, June 14"; other text is returned as is."""
    try:
        parsed = date.fromisoformat(value)
    except (TypeError, ValueError):
        return value
    return parsed.strftime("%A, %B %d")
