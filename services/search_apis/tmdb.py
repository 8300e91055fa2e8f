"""
TMDB API client for movie search, multi search and movie details.

TMDB API Documentation: https://developer.themoviedb.org/docs

Authentication: api_key query parameter (v3)

Endpoints used:
- GET /search/movie - Movie polls
- GET /search/multi - Cover image picker (movies, TV, people, collections)
- GET /movie/{id} - Details with credits, images, external ids and videos
"""

import logging
from typing import Any, Optional

import httpx

from config.settings import Settings, get_settings
from services.search_apis.base import (
    DetailsResult,
    SearchItem,
    SearchProviderBase,
    SearchResponse,
)

logger = logging.getLogger(__name__)

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"

# Multi-search media types the picker can show, with their labels
MEDIA_TYPE_LABELS = {
    "movie": "Movie",
    "tv": "TV Show",
    "person": "Person",
    "collection": "Collection",
}


def tmdb_image_url(path: Optional[str], size: str = "w500") -> Optional[str]:
    """Build a TMDB CDN URL for an image path like '/abc.jpg'."""
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


class TMDBAPI(SearchProviderBase):
    """TMDB client for movie search and details."""

    BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    @property
    def provider_id(self) -> str:
        return "tmdb"

    @property
    def provider_name(self) -> str:
        return "The Movie Database"

    def is_configured(self) -> bool:
        return bool(self.settings.tmdb_api_key)

    def _get(self, path: str, params: dict) -> dict:
        """GET a TMDB endpoint and return the decoded JSON body."""
        params = {"api_key": self.settings.tmdb_api_key.strip(), **params}
        with httpx.Client(timeout=30.0, transport=self._transport) as client:
            response = client.get(f"{self.BASE_URL}{path}", params=params)
            response.raise_for_status()
        return response.json()

    # ==========================================
    # Search
    # ==========================================

    def search(self, query: str, limit: int = 5, page: int = 1) -> SearchResponse:
        """Search movies (movie polls)."""
        return self.search_movies(query, limit=limit, page=page)

    def search_movies(self, query: str, limit: int = 5, page: int = 1) -> SearchResponse:
        """Search TMDB movies, returning at most `limit` results."""
        if not self.is_configured():
            return self._failure(query, "TMDB API key not configured")

        try:
            data = self._get(
                "/search/movie",
                {"query": query, "page": page, "include_adult": "false"}
            )
        except httpx.HTTPStatusError as e:
            logger.error(f"TMDB movie search failed: {e.response.status_code} - {e.response.text}")
            return self._failure(query, f"TMDB API error: {e.response.status_code}")
        except httpx.ConnectError:
            logger.error("Could not connect to TMDB API")
            return self._failure(query, "Could not connect to TMDB. Check your network connection.")
        except httpx.TimeoutException:
            logger.error("TMDB API request timed out")
            return self._failure(query, "TMDB request timed out. Please try again.")
        except Exception as e:
            logger.error(f"TMDB search error: {e}")
            return self._failure(query, str(e))

        items = [self._parse_movie(result) for result in data.get("results", [])[:limit]]
        return SearchResponse(
            success=True,
            provider=self.provider_id,
            query=query,
            items=items,
            total_pages=data.get("total_pages", 1),
        )

    def search_multi(self, query: str, page: int = 1) -> SearchResponse:
        """
        Search movies, TV shows, people and collections at once.

        Only results with a poster (or a profile photo for people) are
        returned, since the image picker has nothing to show otherwise.
        """
        if not self.is_configured():
            return self._failure(query, "TMDB API key not configured")

        try:
            data = self._get(
                "/search/multi",
                {"query": query, "page": page, "include_adult": "false"}
            )
        except httpx.HTTPStatusError as e:
            logger.error(f"TMDB multi search failed: {e.response.status_code} - {e.response.text}")
            return self._failure(query, f"TMDB API error: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"TMDB multi search error: {e}")
            return self._failure(query, "Could not reach TMDB. Please try again.")

        items = []
        for result in data.get("results", []):
            item = self._parse_multi(result)
            if item:
                items.append(item)

        return SearchResponse(
            success=True,
            provider=self.provider_id,
            query=query,
            items=items,
            total_pages=data.get("total_pages", 1),
        )

    def _parse_movie(self, result: dict) -> SearchItem:
        """Parse a /search/movie result."""
        poster_path = result.get("poster_path")
        return SearchItem(
            provider=self.provider_id,
            id=str(result.get("id")),
            type="movie",
            title=result.get("title") or "Unknown Title",
            description=result.get("overview") or "",
            image_url=tmdb_image_url(poster_path, "w200"),
            metadata={
                "tmdb_id": result.get("id"),
                "release_date": result.get("release_date"),
                "poster_path": poster_path,
                "vote_average": result.get("vote_average"),
                "media_type": "movie",
            },
        )

    def _parse_multi(self, result: dict) -> Optional[SearchItem]:
        """Parse a /search/multi result, skipping ones without an image."""
        media_type = result.get("media_type", "movie")
        if media_type not in MEDIA_TYPE_LABELS:
            return None

        image_path = result.get("profile_path") if media_type == "person" else result.get("poster_path")
        if not image_path:
            return None

        return SearchItem(
            provider=self.provider_id,
            id=str(result.get("id")),
            type=media_type,
            title=result.get("title") or result.get("name") or "Unknown",
            description=result.get("overview") or "",
            image_url=tmdb_image_url(image_path),
            metadata={
                "tmdb_id": result.get("id"),
                "media_type": media_type,
                "type_label": MEDIA_TYPE_LABELS[media_type],
                "image_path": image_path,
                "release_date": result.get("release_date") or result.get("first_air_date"),
            },
        )

    # ==========================================
    # Details
    # ==========================================

    def get_details(self, item_id: str, content_type: Optional[str] = None) -> DetailsResult:
        if content_type not in (None, "movie"):
            return DetailsResult(
                success=False,
                provider=self.provider_id,
                error=f"Unsupported content type: {content_type}"
            )
        return self.get_movie_details(item_id)

    def get_movie_details(self, movie_id: Any) -> DetailsResult:
        """Fetch a movie with credits, images, external ids and videos."""
        if not self.is_configured():
            return DetailsResult(
                success=False,
                provider=self.provider_id,
                error="TMDB API key not configured"
            )

        try:
            data = self._get(
                f"/movie/{movie_id}",
                {"append_to_response": "credits,images,external_ids,videos"}
            )
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error = "Movie not found" if status == 404 else f"TMDB API error: {status}"
            logger.error(f"TMDB details failed for {movie_id}: {status}")
            return DetailsResult(success=False, provider=self.provider_id, error=error)
        except httpx.HTTPError as e:
            logger.error(f"TMDB details error for {movie_id}: {e}")
            return DetailsResult(
                success=False,
                provider=self.provider_id,
                error="Could not reach TMDB. Please try again."
            )

        return DetailsResult(
            success=True,
            provider=self.provider_id,
            data=self._normalize_movie_details(data)
        )

    def _normalize_movie_details(self, data: dict) -> dict:
        """Flatten a /movie/{id} response into the shape the views read."""
        credits = data.get("credits") or {}
        images = data.get("images") or {}
        external_ids = data.get("external_ids") or {}
        tmdb_id = data.get("id")

        external_urls = {
            "tmdb_url": f"https://www.themoviedb.org/movie/{tmdb_id}",
            "homepage": data.get("homepage") or None,
        }
        if data.get("imdb_id"):
            external_urls["imdb_url"] = f"https://www.imdb.com/title/{data['imdb_id']}"
        for key, base in (
            ("facebook", "https://www.facebook.com/"),
            ("twitter", "https://twitter.com/"),
            ("instagram", "https://www.instagram.com/"),
        ):
            handle = external_ids.get(f"{key}_id")
            if handle:
                external_urls[f"{key}_url"] = f"{base}{handle}"

        return {
            "id": tmdb_id,
            "type": "movie",
            "title": data.get("title"),
            "description": data.get("overview") or "",
            "tagline": data.get("tagline"),
            "release_date": data.get("release_date"),
            "runtime": data.get("runtime"),
            "genres": [g.get("name") for g in data.get("genres", []) if g.get("name")],
            "vote_average": data.get("vote_average"),
            "vote_count": data.get("vote_count"),
            "poster_path": data.get("poster_path"),
            "backdrop_path": data.get("backdrop_path"),
            "imdb_id": data.get("imdb_id"),
            "cast": [
                {
                    "name": c.get("name"),
                    "character": c.get("character"),
                    "profile_path": c.get("profile_path"),
                    "order": c.get("order", 999),
                }
                for c in credits.get("cast", [])
            ],
            "crew": [
                {
                    "name": c.get("name"),
                    "job": c.get("job"),
                    "department": c.get("department"),
                }
                for c in credits.get("crew", [])
            ],
            "images": [
                tmdb_image_url(p.get("file_path"), "original")
                for p in images.get("posters", [])
                if p.get("file_path")
            ],
            "external_urls": external_urls,
        }
