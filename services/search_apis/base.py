"""
Base class for third-party search providers.

Movie polls search TMDB, music polls search Spotify and the cover image
picker searches Unsplash and TMDB. Every provider returns the same
SearchResponse shape so widgets can treat them alike.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SearchItem:
    """A single normalized search hit."""
    provider: str  # "tmdb", "spotify", "unsplash"
    id: str
    type: str  # "movie", "tv", "person", "collection", "track", "photo"
    title: str
    description: str = ""
    image_url: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResponse:
    """Result of a provider search."""
    success: bool
    provider: str
    query: str
    items: list[SearchItem]
    total_pages: int = 1
    error: Optional[str] = None


@dataclass
class DetailsResult:
    """Result of a provider details lookup."""
    success: bool
    provider: str
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None


class SearchProviderBase(ABC):
    """Abstract base class for search providers."""

    @property
    @abstractmethod
    def provider_id(self) -> str:
        """Short provider key used in results (e.g., 'tmdb')."""
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the API credentials are configured."""
        pass

    @abstractmethod
    def search(self, query: str, limit: int = 5, page: int = 1) -> SearchResponse:
        """
        Search the provider.

        Args:
            query: Free-text search
            limit: Maximum number of results to return
            page: 1-based page for providers that paginate

        Returns:
            SearchResponse with normalized items or error
        """
        pass

    def get_details(self, item_id: str, content_type: Optional[str] = None) -> DetailsResult:
        """Fetch full details for one item. Providers without details say so."""
        return DetailsResult(
            success=False,
            provider=self.provider_id,
            error=f"{self.provider_name} does not provide details"
        )

    def _failure(self, query: str, error: str) -> SearchResponse:
        return SearchResponse(
            success=False,
            provider=self.provider_id,
            query=query,
            items=[],
            error=error
        )
