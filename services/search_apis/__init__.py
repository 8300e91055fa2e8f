"""
Third-party search providers for poll options and cover images.

Currently supported:
- TMDB (movies, TV, people, collections)
- Spotify (tracks)
- Unsplash (photos)
"""

from services.search_apis.base import (
    SearchProviderBase,
    SearchItem,
    SearchResponse,
    DetailsResult,
)
from services.search_apis.tmdb import TMDBAPI, tmdb_image_url
from services.search_apis.spotify import SpotifyAPI
from services.search_apis.unsplash import UnsplashAPI

__all__ = [
    "SearchProviderBase",
    "SearchItem",
    "SearchResponse",
    "DetailsResult",
    "TMDBAPI",
    "tmdb_image_url",
    "SpotifyAPI",
    "UnsplashAPI",
]
