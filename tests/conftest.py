"""
Shared fixtures.

Controllers take a plain dict as their session state and API clients
take an httpx MockTransport, so nothing here needs a running Streamlit
server or network access.
"""

from datetime import datetime, timezone

import pytest

from config.settings import Settings, get_settings
from models.entities import Event, Poll, PollOption, User


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        tmdb_api_key="tmdb-key",
        spotify_client_id="spotify-id",
        spotify_client_secret="spotify-secret",
        unsplash_access_key="unsplash-key",
    )


@pytest.fixture
def unconfigured_settings():
    return Settings(
        _env_file=None,
        tmdb_api_key="",
        spotify_client_id="",
        spotify_client_secret="",
        unsplash_access_key="",
    )


@pytest.fixture
def now():
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def alex():
    return User(id="u1", name="Alex Rivera", username="alex")


@pytest.fixture
def sam():
    return User(id="u2", name="Sam Chen", username="samc")


@pytest.fixture
def summer_bbq():
    return Event(
        id="e1",
        title="Summer BBQ",
        start_at=datetime(2025, 6, 14, 18, 0, tzinfo=timezone.utc),
        status="confirmed",
    )


@pytest.fixture
def movie_poll():
    return Poll(id="p1", title="Movie night", poll_type="movie", voting_system="approval")


@pytest.fixture
def music_poll():
    return Poll(id="p2", title="Playlist", poll_type="music_track", voting_system="ranked")


@pytest.fixture
def binary_poll():
    return Poll(
        id="p3",
        title="Saturday?",
        poll_type="date_selection",
        voting_system="binary",
        options=[
            PollOption(id="o1", title="Saturday, June 14"),
            PollOption(id="o2", title="Saturday, June 21"),
        ],
    )
