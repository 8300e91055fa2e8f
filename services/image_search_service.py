"""
Image Search Service - cover images for events.

Two sources feed the cover image picker:
- a catalog of bundled default images, grouped in category folders
- a unified search over Unsplash photos and TMDB posters
"""

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from config.settings import get_settings
from services.search_apis import SearchItem, TMDBAPI, UnsplashAPI

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".svg"}


@dataclass
class DefaultImage:
    """A bundled cover image."""
    category: str
    filename: str
    url: str  # Served by Streamlit static file serving
    path: str = ""  # Local file, for st.image

    @property
    def title(self) -> str:
        return Path(self.filename).stem.replace("_", " ").replace("-", " ").title()


@dataclass
class ImageCategory:
    name: str
    display_name: str
    image_count: int


@dataclass
class UnifiedSearchResult:
    """Results of one search across image providers."""
    success: bool
    query: str
    page: int
    unsplash: list[SearchItem] = field(default_factory=list)
    tmdb: list[SearchItem] = field(default_factory=list)
    has_more: bool = False
    error: Optional[str] = None


class DefaultImageCatalog:
    """Bundled images, one folder per category."""

    def __init__(self, images_dir: Optional[str] = None, url_prefix: Optional[str] = None):
        settings = get_settings()
        self.images_dir = Path(images_dir or settings.default_images_dir)
        self.url_prefix = (url_prefix or settings.default_images_url_prefix).rstrip("/")

    def get_categories(self) -> list[ImageCategory]:
        """Categories with at least one image, sorted by name."""
        if not self.images_dir.is_dir():
            logger.warning(f"Default images folder not found: {self.images_dir}")
            return []

        categories = []
        for folder in sorted(p for p in self.images_dir.iterdir() if p.is_dir()):
            count = len(self._image_files(folder))
            if count:
                categories.append(ImageCategory(
                    name=folder.name,
                    display_name=folder.name.replace("_", " ").title(),
                    image_count=count,
                ))
        return categories

    def get_images_for_category(self, category: str) -> list[DefaultImage]:
        folder = self.images_dir / category
        # Category names come from the UI; stay inside the images folder
        if not folder.is_dir() or folder.resolve().parent != self.images_dir.resolve():
            return []
        return [
            DefaultImage(
                category=category,
                filename=path.name,
                url=f"{self.url_prefix}/{category}/{path.name}",
                path=str(path),
            )
            for path in self._image_files(folder)
        ]

    def get_random_image(self, rng: Optional[random.Random] = None) -> Optional[DefaultImage]:
        """A random image from any category, for new events."""
        images = [
            image
            for category in self.get_categories()
            for image in self.get_images_for_category(category.name)
        ]
        if not images:
            return None
        return (rng or random).choice(images)

    def _image_files(self, folder: Path) -> list[Path]:
        return sorted(
            p for p in folder.iterdir()
            if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
        )


class ImageSearchService:
    """Unified Unsplash and TMDB image search."""

    def __init__(
        self,
        unsplash: Optional[UnsplashAPI] = None,
        tmdb: Optional[TMDBAPI] = None
    ):
        self.unsplash = unsplash or UnsplashAPI()
        self.tmdb = tmdb or TMDBAPI()

    def unified_search(self, query: str, page: int = 1, per_page: int = 20) -> UnifiedSearchResult:
        """
        Search both providers.

        A provider that is not configured is skipped. The search fails only
        when every configured provider fails.
        """
        sources = [api for api in (self.unsplash, self.tmdb) if api.is_configured()]
        if not sources:
            return UnifiedSearchResult(
                success=False,
                query=query,
                page=page,
                error="No image search providers are configured"
            )

        result = UnifiedSearchResult(success=True, query=query, page=page)
        errors = []

        if self.unsplash.is_configured():
            photos = self.unsplash.search_photos(query, page=page, per_page=per_page)
            if photos.success:
                result.unsplash = photos.items
                result.has_more = result.has_more or page < photos.total_pages
            else:
                errors.append(photos.error)

        if self.tmdb.is_configured():
            posters = self.tmdb.search_multi(query, page=page)
            if posters.success:
                result.tmdb = posters.items
                result.has_more = result.has_more or page < posters.total_pages
            else:
                errors.append(posters.error)

        if len(errors) == len(sources):
            logger.error(f"Image search for {query!r} failed: {'; '.join(errors)}")
            result.success = False
            result.error = "; ".join(errors)
        return result
