"""
Rich Data Service - searches and details from external content providers.

Poll options for movies and songs are picked from provider search
results. This service fans a query out to the requested providers,
caches details lookups, and prepares the data stored on a new option.
"""

import logging
import time
from typing import Any, Optional

from config.settings import get_settings
from models.option_data import OptionData
from services.search_apis import (
    DetailsResult,
    SearchProviderBase,
    SearchResponse,
    SpotifyAPI,
    TMDBAPI,
)
from views.helpers.movies import build_enhanced_description, get_image_url, get_title

logger = logging.getLogger(__name__)

# Which provider backs API search for each poll type
POLL_TYPE_PROVIDERS = {
    "movie": "tmdb",
    "music_track": "spotify",
    "music": "spotify",
}


class RichDataService:
    """Service for provider search and details."""

    def __init__(
        self,
        providers: Optional[dict[str, SearchProviderBase]] = None,
        cache_ttl: Optional[int] = None
    ):
        settings = get_settings()
        self.providers = providers if providers is not None else {
            "tmdb": TMDBAPI(),
            "spotify": SpotifyAPI(),
        }
        self.cache_ttl = cache_ttl if cache_ttl is not None else settings.details_cache_ttl
        # (provider, id, content_type) -> (stored_at, DetailsResult)
        self._details_cache: dict[tuple, tuple[float, DetailsResult]] = {}

    def provider_for_poll_type(self, poll_type: str) -> Optional[str]:
        return POLL_TYPE_PROVIDERS.get(poll_type)

    def search(
        self,
        query: str,
        providers: list[str],
        limit: int = 5
    ) -> dict[str, SearchResponse]:
        """
        Search each named provider.

        Unknown provider names get a failed response rather than an
        exception, so one bad name does not hide other results.
        """
        results = {}
        for name in providers:
            provider = self.providers.get(name)
            if provider is None:
                results[name] = SearchResponse(
                    success=False,
                    provider=name,
                    query=query,
                    items=[],
                    error=f"Unknown provider: {name}"
                )
                continue

            response = provider.search(query, limit=limit)
            if not response.success:
                logger.warning(f"{name} search for {query!r} failed: {response.error}")
            results[name] = response
        return results

    def get_cached_details(
        self,
        provider: str,
        item_id: Any,
        content_type: Optional[str] = None
    ) -> DetailsResult:
        """Details lookup, reusing successful results for cache_ttl seconds."""
        key = (provider, str(item_id), content_type)
        cached = self._details_cache.get(key)
        if cached and time.monotonic() - cached[0] < self.cache_ttl:
            return cached[1]

        source = self.providers.get(provider)
        if source is None:
            return DetailsResult(success=False, provider=provider, error=f"Unknown provider: {provider}")

        result = source.get_details(str(item_id), content_type)
        if result.success:
            self._details_cache[key] = (time.monotonic(), result)
        else:
            logger.warning(f"{provider} details for {item_id} failed: {result.error}")
        return result

    def clear_cache(self):
        self._details_cache.clear()

    def prepare_movie_option_data(self, movie_id: Any, details: dict) -> OptionData:
        """Turn TMDB movie details into the data for a new poll option."""
        description = build_enhanced_description(details) or details.get("description") or None
        return OptionData(
            title=get_title(details),
            description=description,
            external_id=str(movie_id),
            image_url=get_image_url(details),
            external_data={"source": "tmdb", "type": "movie", **details},
        )
