"""
Option Search Controller - provider search for adding poll options.

Movie polls search TMDB and music polls search Spotify. The controller
keeps the query, results and loading flag for one poll and hands the
chosen result to the poll view through a callback.

Other poll types have no API search; their events are ignored.
"""

import json
import logging
from typing import Any, Callable, MutableMapping, Optional

import streamlit as st

from config.settings import get_settings
from models.entities import Poll
from models.option_data import OptionData
from services.rich_data_service import RichDataService
from services.search_apis import SearchItem
from views.helpers.poll_text import should_use_api_search

logger = logging.getLogger(__name__)


class OptionSearchController:
    """Controller for the option search box of one poll."""

    def __init__(
        self,
        poll: Poll,
        rich_data: Optional[RichDataService] = None,
        on_movie_selected: Optional[Callable[[dict], None]] = None,
        on_music_track_selected: Optional[Callable[[dict], None]] = None,
        state: Optional[MutableMapping] = None
    ):
        self.poll = poll
        self.rich_data = rich_data or RichDataService()
        self.on_movie_selected = on_movie_selected
        self.on_music_track_selected = on_music_track_selected
        self.settings = get_settings()
        self._state = state if state is not None else st.session_state
        self.key = f"option_search_{poll.id}"
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "search_query": "",
                "search_results": [],  # list[SearchItem]
                "search_loading": False,
                "error": None,
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    # ==========================================
    # Session State
    # ==========================================

    def get_query(self) -> str:
        return self.data["search_query"]

    def get_results(self) -> list[SearchItem]:
        return self.data["search_results"]

    def is_loading(self) -> bool:
        return self.data["search_loading"]

    def get_error(self) -> Optional[str]:
        return self.data["error"]

    def uses_api_search(self) -> bool:
        return should_use_api_search(self.poll.poll_type)

    # ==========================================
    # Events
    # ==========================================

    def search(self, query: str):
        """Run a provider search for the query."""
        if not self.uses_api_search():
            return

        self.data["search_query"] = query
        self.data["error"] = None

        if len(query.strip()) < self.settings.search_min_chars:
            self.data["search_results"] = []
            self.data["search_loading"] = False
            return

        provider = self.rich_data.provider_for_poll_type(self.poll.poll_type)
        self.data["search_loading"] = True
        try:
            responses = self.rich_data.search(
                query.strip(),
                providers=[provider],
                limit=self.settings.search_limit
            )
            response = responses.get(provider)
            if response and response.success:
                self.data["search_results"] = response.items
            else:
                self.data["search_results"] = []
                self.data["error"] = response.error if response else "Search failed"
        except Exception as e:
            logger.error(f"Option search failed for poll {self.poll.id}: {e}")
            self.data["search_results"] = []
            self.data["error"] = "Search failed. Please try again."
        finally:
            self.data["search_loading"] = False

    def select_movie(self, movie_id: Any) -> Optional[dict]:
        """
        Pick a movie from the results.

        Full TMDB details are fetched for the option; when that fails the
        option is built from the search result alone. Returns the data
        sent to the parent, or None when nothing was selected.
        """
        if self.poll.poll_type != "movie":
            return None

        movie = self._find_result(movie_id)
        if movie is None:
            logger.warning(f"Selected movie {movie_id} is not in the current results")
            return None

        details = self.rich_data.get_cached_details("tmdb", movie.id, "movie")
        if details.success and details.data:
            option = self.rich_data.prepare_movie_option_data(movie.id, details.data)
        else:
            option = OptionData(
                title=movie.title,
                description=movie.description or None,
                external_id=str(movie.id),
            )

        payload = option.to_dict()
        if self.on_movie_selected:
            self.on_movie_selected(payload)
        self._reset_search()
        return payload

    def select_music_track(self, track: Any) -> Optional[dict]:
        """Pick a track (a SearchItem, a dict, or a JSON string of one)."""
        if self.poll.poll_type not in ("music_track", "music"):
            return None

        if isinstance(track, str):
            try:
                track = json.loads(track)
            except json.JSONDecodeError:
                logger.warning("Ignoring malformed track selection")
                return None

        if isinstance(track, SearchItem):
            track_data = {
                "id": track.id,
                "title": track.title,
                "description": track.description,
                "image_url": track.image_url,
                **track.metadata,
            }
        elif isinstance(track, dict):
            track_data = track
        else:
            return None

        title = track_data.get("title") or track_data.get("name")
        if not title:
            return None

        option = OptionData(
            title=title,
            description=track_data.get("description") or None,
            external_id=str(track_data.get("id")) if track_data.get("id") is not None else None,
            image_url=track_data.get("image_url"),
            external_data={"source": "spotify", "type": "track", **track_data},
        )

        payload = option.to_dict()
        if self.on_music_track_selected:
            self.on_music_track_selected(payload)
        self._reset_search()
        return payload

    def clear_search(self):
        self._reset_search()
        self.data["search_loading"] = False
        self.data["error"] = None

    def _reset_search(self):
        self.data["search_query"] = ""
        self.data["search_results"] = []

    def _find_result(self, item_id: Any) -> Optional[SearchItem]:
        wanted = str(item_id)
        for item in self.get_results():
            if str(item.id) == wanted:
                return item
        return None
