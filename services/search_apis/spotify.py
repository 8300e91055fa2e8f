"""
Spotify Web API client for music poll track search.

Spotify API Documentation: https://developer.spotify.com/documentation/web-api

Authentication: OAuth2 Client Credentials flow
- Obtain access token using client_id and client_secret
- Token is valid for 1 hour

Endpoints used:
- POST https://accounts.spotify.com/api/token - Get access token
- GET /search?type=track - Search tracks
- GET /tracks/{id} - Track details
"""

import base64
import logging
import time
from typing import Optional

import httpx

from config.settings import Settings, get_settings
from services.search_apis.base import (
    DetailsResult,
    SearchItem,
    SearchProviderBase,
    SearchResponse,
)
from views.helpers.formatting import format_duration_ms

logger = logging.getLogger(__name__)


class SpotifyAuthError(Exception):
    """No usable access token."""


class SpotifyAPI(SearchProviderBase):
    """Spotify client for track search."""

    BASE_URL = "https://api.spotify.com/v1"
    TOKEN_URL = "https://accounts.spotify.com/api/token"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._access_token: Optional[str] = None
        self._token_expires_at: float = 0
        self._last_auth_error: Optional[str] = None

    @property
    def provider_id(self) -> str:
        return "spotify"

    @property
    def provider_name(self) -> str:
        return "Spotify"

    def is_configured(self) -> bool:
        return bool(
            self.settings.spotify_client_id and
            self.settings.spotify_client_secret
        )

    def _get_access_token(self) -> Optional[str]:
        """Get a valid access token, refreshing when it is about to expire."""
        self._last_auth_error = None

        # Cached token is reused until 60s before expiry
        if self._access_token and time.time() < (self._token_expires_at - 60):
            return self._access_token

        if not self.is_configured():
            self._last_auth_error = "Spotify API credentials not configured"
            logger.error(self._last_auth_error)
            return None

        client_id = self.settings.spotify_client_id.strip()
        client_secret = self.settings.spotify_client_secret.strip()
        encoded = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()

        try:
            with httpx.Client(timeout=30.0, transport=self._transport) as client:
                response = client.post(
                    self.TOKEN_URL,
                    headers={
                        "Content-Type": "application/x-www-form-urlencoded",
                        "Authorization": f"Basic {encoded}"
                    },
                    data={"grant_type": "client_credentials"}
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status in (400, 401):
                self._last_auth_error = (
                    "Invalid Spotify API credentials. Check SPOTIFY_CLIENT_ID "
                    "and SPOTIFY_CLIENT_SECRET."
                )
            else:
                self._last_auth_error = f"Spotify API error (HTTP {status})"
            logger.error(f"Spotify auth failed: {status} - {e.response.text}")
            return None
        except httpx.ConnectError:
            self._last_auth_error = "Could not connect to Spotify. Check your network connection."
            logger.error(self._last_auth_error)
            return None
        except httpx.TimeoutException:
            self._last_auth_error = "Spotify request timed out. Please try again."
            logger.error(self._last_auth_error)
            return None

        token_data = response.json()
        self._access_token = token_data["access_token"]
        self._token_expires_at = time.time() + token_data.get("expires_in", 3600)
        logger.info("Spotify access token obtained")
        return self._access_token

    def _authorized_get(self, path: str, params: Optional[dict] = None) -> dict:
        token = self._get_access_token()
        if not token:
            raise SpotifyAuthError(self._last_auth_error or "Failed to authenticate with Spotify")

        with httpx.Client(timeout=30.0, transport=self._transport) as client:
            response = client.get(
                f"{self.BASE_URL}{path}",
                headers={
                    "Accept": "application/json",
                    "Authorization": f"Bearer {token}"
                },
                params=params
            )
            response.raise_for_status()
        return response.json()

    def search(self, query: str, limit: int = 5, page: int = 1) -> SearchResponse:
        return self.search_tracks(query, limit=limit)

    def search_tracks(self, query: str, limit: int = 5) -> SearchResponse:
        """Search tracks, returning at most `limit` results (Spotify caps at 50)."""
        if not self.is_configured():
            return self._failure(query, "Spotify API credentials not configured")

        try:
            data = self._authorized_get(
                "/search",
                {"q": query, "type": "track", "limit": min(limit, 50)}
            )
        except SpotifyAuthError as e:
            return self._failure(query, str(e))
        except httpx.HTTPStatusError as e:
            logger.error(f"Spotify search failed: {e.response.status_code} - {e.response.text}")
            return self._failure(query, f"Spotify API error: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Spotify search error: {e}")
            return self._failure(query, "Could not reach Spotify. Please try again.")

        tracks = (data.get("tracks") or {}).get("items", [])
        return SearchResponse(
            success=True,
            provider=self.provider_id,
            query=query,
            items=[self._parse_track(track) for track in tracks],
        )

    def get_details(self, item_id: str, content_type: Optional[str] = None) -> DetailsResult:
        return self.get_track(item_id)

    def get_track(self, track_id: str) -> DetailsResult:
        """Fetch one track."""
        try:
            data = self._authorized_get(f"/tracks/{track_id}")
        except SpotifyAuthError as e:
            return DetailsResult(success=False, provider=self.provider_id, error=str(e))
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            error = "Track not found" if status == 404 else f"Spotify API error: {status}"
            logger.error(f"Spotify track lookup failed for {track_id}: {status}")
            return DetailsResult(success=False, provider=self.provider_id, error=error)
        except httpx.HTTPError as e:
            logger.error(f"Spotify track lookup error for {track_id}: {e}")
            return DetailsResult(
                success=False,
                provider=self.provider_id,
                error="Could not reach Spotify. Please try again."
            )

        item = self._parse_track(data)
        return DetailsResult(
            success=True,
            provider=self.provider_id,
            data={
                "id": item.id,
                "title": item.title,
                "description": item.description,
                "image_url": item.image_url,
                **item.metadata,
            }
        )

    def _parse_track(self, track: dict) -> SearchItem:
        """Parse a Spotify track object."""
        album = track.get("album") or {}
        artist = ", ".join(a.get("name", "") for a in track.get("artists", []) if a.get("name"))
        album_name = album.get("name")

        # Album images come large, medium, small; prefer medium
        images = album.get("images") or []
        if len(images) >= 2:
            image_url = images[1].get("url")
        elif images:
            image_url = images[0].get("url")
        else:
            image_url = None

        description = " - ".join(part for part in (artist, album_name) if part)

        return SearchItem(
            provider=self.provider_id,
            id=str(track.get("id")),
            type="track",
            title=track.get("name") or "Unknown Track",
            description=description,
            image_url=image_url,
            metadata={
                "artist": artist,
                "album": album_name,
                "duration_ms": track.get("duration_ms"),
                "duration_formatted": format_duration_ms(track.get("duration_ms")),
                "preview_url": track.get("preview_url"),
                "popularity": track.get("popularity"),
                "external_url": (track.get("external_urls") or {}).get("spotify"),
            },
        )
