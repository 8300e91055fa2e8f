"""
Image Picker Controller - choosing an event cover image.

Two ways to pick:
- browse bundled default images by category
- search Unsplash and TMDB, with "load more" paging

Selecting an image sends (cover_image_url, external_image_data) to the
parent and closes the picker.
"""

import logging
from typing import Callable, MutableMapping, Optional

import streamlit as st

from config.settings import get_settings
from models.option_data import ExternalImageData
from services.image_search_service import DefaultImage, DefaultImageCatalog, ImageSearchService
from services.search_apis import SearchItem

logger = logging.getLogger(__name__)

SEARCH_ERROR = "Error searching APIs."


class ImagePickerController:
    """Controller for the cover image picker."""

    def __init__(
        self,
        catalog: Optional[DefaultImageCatalog] = None,
        search_service: Optional[ImageSearchService] = None,
        on_image_selected: Optional[Callable[[str, dict], None]] = None,
        key: str = "image_picker",
        state: Optional[MutableMapping] = None
    ):
        self.catalog = catalog or DefaultImageCatalog()
        self.search_service = search_service or ImageSearchService()
        self.on_image_selected = on_image_selected
        self.per_page = get_settings().image_per_page
        self._state = state if state is not None else st.session_state
        self.key = key
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "show": False,
                "selected_category": "general",
                "default_images": [],  # list[DefaultImage]
                "search_query": "",
                "search_results": {"unsplash": [], "tmdb": []},
                "page": 1,
                "has_more": False,
                "loading": False,
                "error": None,
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    # ==========================================
    # Session State
    # ==========================================

    def is_open(self) -> bool:
        return self.data["show"]

    def get_selected_category(self) -> str:
        return self.data["selected_category"]

    def get_default_images(self) -> list[DefaultImage]:
        return self.data["default_images"]

    def get_query(self) -> str:
        return self.data["search_query"]

    def get_search_results(self) -> dict[str, list[SearchItem]]:
        return self.data["search_results"]

    def has_search_results(self) -> bool:
        results = self.get_search_results()
        return bool(results["unsplash"] or results["tmdb"])

    def get_page(self) -> int:
        return self.data["page"]

    def get_error(self) -> Optional[str]:
        return self.data["error"]

    def empty_state_message(self) -> Optional[str]:
        """What to show when there is nothing to pick from."""
        query = self.get_query()
        if query:
            if not self.has_search_results() and not self.data["loading"] and not self.get_error():
                return f'No results found for "{query}"'
            return None
        if not self.get_default_images():
            return "No images available in this category"
        return None

    # ==========================================
    # Events
    # ==========================================

    def open(self):
        self.data["show"] = True
        if not self.data["default_images"]:
            self.data["default_images"] = self.catalog.get_images_for_category(
                self.data["selected_category"]
            )

    def close(self):
        self.data["show"] = False

    def select_category(self, category: str):
        """Show a category's default images and clear any search."""
        self.data.update(
            selected_category=category,
            default_images=self.catalog.get_images_for_category(category),
            search_query="",
            search_results={"unsplash": [], "tmdb": []},
            page=1,
            has_more=False,
            error=None,
        )

    def search(self, query: str):
        """New search from page 1; a blank query clears results."""
        query = (query or "").strip()
        if not query:
            self.data.update(
                search_query="",
                search_results={"unsplash": [], "tmdb": []},
                page=1,
                has_more=False,
                error=None,
            )
            return

        self.data.update(search_query=query, page=1)
        self._run_search(query, page=1, append=False)

    def load_more(self):
        """Fetch the next page: Unsplash photos append, TMDB results replace."""
        query = self.get_query()
        if not query:
            return
        self._run_search(query, page=self.get_page() + 1, append=True)

    def can_load_more(self) -> bool:
        return bool(self.get_query()) and self.data["has_more"]

    def _run_search(self, query: str, page: int, append: bool):
        self.data.update(loading=True, error=None)
        try:
            result = self.search_service.unified_search(query, page=page, per_page=self.per_page)
        except Exception as e:
            logger.error(f"Image search failed for {query!r}: {e}")
            self.data.update(loading=False, error=SEARCH_ERROR)
            return

        if not result.success:
            logger.warning(f"Image search for {query!r} returned an error: {result.error}")
            self.data.update(loading=False, error=SEARCH_ERROR)
            return

        current = self.data["search_results"]
        unsplash = current["unsplash"] + result.unsplash if append and page > 1 else result.unsplash
        self.data.update(
            search_results={"unsplash": unsplash, "tmdb": result.tmdb},
            page=page,
            has_more=result.has_more,
            loading=False,
        )

    def select_default_image(self, image: DefaultImage):
        external = ExternalImageData(
            source="default",
            url=image.url,
            category=image.category,
            metadata={"filename": image.filename, "path": image.path},
        )
        self._select(image.url, external)

    def select_search_image(self, source: str, image: SearchItem):
        """Pick an Unsplash or TMDB result."""
        known = source if source in ("unsplash", "tmdb") else "unknown"
        external = ExternalImageData(
            source=known,
            url=image.image_url,
            id=image.id,
            metadata=dict(image.metadata),
        )
        self._select(image.image_url, external)

    def _select(self, url: Optional[str], external: ExternalImageData):
        if not url:
            logger.warning(f"Ignoring {external.source} image without a URL")
            return
        if self.on_image_selected:
            self.on_image_selected(url, external.to_dict())
        self.close()
