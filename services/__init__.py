"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.rich_data_service import RichDataService
from services.image_search_service import (
    ImageSearchService,
    DefaultImageCatalog,
    DefaultImage,
    UnifiedSearchResult,
)
from services.username_service import UsernameService, UsernameCheckResult
from services.search_apis import (
    TMDBAPI,
    SpotifyAPI,
    UnsplashAPI,
    SearchItem,
    SearchResponse,
    DetailsResult,
)

__all__ = [
    "RichDataService",
    "ImageSearchService",
    "DefaultImageCatalog",
    "DefaultImage",
    "UnifiedSearchResult",
    "UsernameService",
    "UsernameCheckResult",
    "TMDBAPI",
    "SpotifyAPI",
    "UnsplashAPI",
    "SearchItem",
    "SearchResponse",
    "DetailsResult",
]
