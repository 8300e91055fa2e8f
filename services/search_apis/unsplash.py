"""
Unsplash API client for cover image search.

Unsplash API Documentation: https://unsplash.com/documentation

Authentication: "Authorization: Client-ID <access key>" header

Endpoints used:
- GET /search/photos - Paginated photo search
"""

import logging
from typing import Optional

import httpx

from config.settings import Settings, get_settings
from services.search_apis.base import SearchItem, SearchProviderBase, SearchResponse

logger = logging.getLogger(__name__)


class UnsplashAPI(SearchProviderBase):
    """Unsplash client for photo search."""

    BASE_URL = "https://api.unsplash.com"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    @property
    def provider_id(self) -> str:
        return "unsplash"

    @property
    def provider_name(self) -> str:
        return "Unsplash"

    def is_configured(self) -> bool:
        return bool(self.settings.unsplash_access_key)

    def search(self, query: str, limit: int = 20, page: int = 1) -> SearchResponse:
        return self.search_photos(query, page=page, per_page=limit)

    def search_photos(self, query: str, page: int = 1, per_page: int = 20) -> SearchResponse:
        """Search photos; Unsplash allows at most 30 per page."""
        if not self.is_configured():
            return self._failure(query, "Unsplash access key not configured")

        try:
            with httpx.Client(timeout=30.0, transport=self._transport) as client:
                response = client.get(
                    f"{self.BASE_URL}/search/photos",
                    headers={
                        "Accept-Version": "v1",
                        "Authorization": f"Client-ID {self.settings.unsplash_access_key.strip()}"
                    },
                    params={
                        "query": query,
                        "page": page,
                        "per_page": min(per_page, 30),
                    }
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Unsplash search failed: {e.response.status_code} - {e.response.text}")
            return self._failure(query, f"Unsplash API error: {e.response.status_code}")
        except httpx.ConnectError:
            logger.error("Could not connect to Unsplash API")
            return self._failure(query, "Could not connect to Unsplash. Check your network connection.")
        except httpx.TimeoutException:
            logger.error("Unsplash API request timed out")
            return self._failure(query, "Unsplash request timed out. Please try again.")

        data = response.json()
        return SearchResponse(
            success=True,
            provider=self.provider_id,
            query=query,
            items=[self._parse_photo(photo) for photo in data.get("results", [])],
            total_pages=data.get("total_pages", 1),
        )

    def _parse_photo(self, photo: dict) -> SearchItem:
        urls = photo.get("urls") or {}
        user = photo.get("user") or {}
        return SearchItem(
            provider=self.provider_id,
            id=str(photo.get("id")),
            type="photo",
            title=photo.get("description") or photo.get("alt_description") or "Unsplash photo",
            description=photo.get("alt_description") or "",
            image_url=urls.get("regular"),
            metadata={
                "thumb_url": urls.get("small") or urls.get("thumb"),
                "color": photo.get("color"),
                "width": photo.get("width"),
                "height": photo.get("height"),
                "photographer": user.get("name"),
                "photographer_url": (user.get("links") or {}).get("html"),
                "download_location": (photo.get("links") or {}).get("download_location"),
            },
        )
