from unittest.mock import MagicMock

import pytest

from controllers.image_picker_controller import SEARCH_ERROR, ImagePickerController
from services.image_search_service import DefaultImage, UnifiedSearchResult
from services.search_apis import SearchItem

PARK = DefaultImage(
    category="outdoors",
    filename="park.jpg",
    url="app/static/images/events/outdoors/park.jpg",
    path="static/images/events/outdoors/park.jpg",
)
PHOTO_1 = SearchItem(provider="unsplash", id="ph1", type="image", title="Beach", image_url="https://u/1.jpg")
PHOTO_2 = SearchItem(provider="unsplash", id="ph2", type="image", title="Dunes", image_url="https://u/2.jpg")
POSTER = SearchItem(provider="tmdb", id="603", type="movie", title="The Matrix", image_url="https://t/603.jpg")


@pytest.fixture
def catalog():
    catalog = MagicMock()
    catalog.get_images_for_category.side_effect = lambda category: [PARK] if category == "outdoors" else []
    return catalog


@pytest.fixture
def search_service():
    service = MagicMock()
    service.unified_search.side_effect = [
        UnifiedSearchResult(success=True, query="beach", page=1, unsplash=[PHOTO_1], tmdb=[POSTER], has_more=True),
        UnifiedSearchResult(success=True, query="beach", page=2, unsplash=[PHOTO_2], tmdb=[], has_more=False),
    ]
    return service


@pytest.fixture
def picker(catalog, search_service):
    return ImagePickerController(catalog=catalog, search_service=search_service, state={})


def test_open_loads_default_category(picker, catalog):
    picker.open()
    assert picker.is_open() is True
    catalog.get_images_for_category.assert_called_once_with("general")
    assert picker.empty_state_message() == "No images available in this category"


def test_select_category_clears_search(picker):
    picker.search("beach")
    picker.select_category("outdoors")

    assert picker.get_default_images() == [PARK]
    assert picker.get_query() == ""
    assert picker.has_search_results() is False
    assert picker.empty_state_message() is None


def test_search_and_load_more(picker, search_service):
    picker.search("  beach ")

    search_service.unified_search.assert_called_with("beach", page=1, per_page=20)
    assert picker.get_search_results() == {"unsplash": [PHOTO_1], "tmdb": [POSTER]}
    assert picker.can_load_more() is True

    picker.load_more()

    search_service.unified_search.assert_called_with("beach", page=2, per_page=20)
    # Photos accumulate, movie results are replaced
    assert picker.get_search_results() == {"unsplash": [PHOTO_1, PHOTO_2], "tmdb": []}
    assert picker.get_page() == 2
    assert picker.can_load_more() is False


def test_blank_search_resets(picker, search_service):
    picker.search("beach")
    picker.search("   ")
    assert picker.get_query() == ""
    assert picker.has_search_results() is False
    assert search_service.unified_search.call_count == 1


def test_load_more_without_query_does_nothing(picker, search_service):
    picker.load_more()
    search_service.unified_search.assert_not_called()


def test_no_results_message(catalog):
    service = MagicMock()
    service.unified_search.return_value = UnifiedSearchResult(success=True, query="zzz", page=1)
    picker = ImagePickerController(catalog=catalog, search_service=service, state={})

    picker.search("zzz")

    assert picker.empty_state_message() == 'No results found for "zzz"'


@pytest.mark.parametrize("outcome", [
    RuntimeError("network down"),
    UnifiedSearchResult(success=False, query="beach", page=1, error="boom"),
])
def test_search_errors(catalog, outcome):
    service = MagicMock()
    if isinstance(outcome, Exception):
        service.unified_search.side_effect = outcome
    else:
        service.unified_search.return_value = outcome
    picker = ImagePickerController(catalog=catalog, search_service=service, state={})

    picker.search("beach")

    assert picker.get_error() == SEARCH_ERROR
    assert picker.empty_state_message() is None


def test_select_default_image(catalog, search_service):
    selected = MagicMock()
    picker = ImagePickerController(
        catalog=catalog, search_service=search_service, on_image_selected=selected, state={}
    )
    picker.open()

    picker.select_default_image(PARK)

    selected.assert_called_once_with(
        PARK.url,
        {
            "source": "default",
            "url": PARK.url,
            "category": "outdoors",
            "metadata": {"filename": "park.jpg", "path": PARK.path},
        },
    )
    assert picker.is_open() is False


def test_select_search_image(catalog, search_service):
    selected = MagicMock()
    picker = ImagePickerController(
        catalog=catalog, search_service=search_service, on_image_selected=selected, state={}
    )

    picker.select_search_image("tmdb", POSTER)
    url, data = selected.call_args.args
    assert url == "https://t/603.jpg"
    assert data["source"] == "tmdb"
    assert data["id"] == "603"

    picker.select_search_image("flickr", PHOTO_1)
    assert selected.call_args.args[1]["source"] == "unknown"


def test_image_without_url_is_ignored(catalog, search_service):
    selected = MagicMock()
    picker = ImagePickerController(
        catalog=catalog, search_service=search_service, on_image_selected=selected, state={}
    )
    picker.open()
    picker.select_search_image("unsplash", SearchItem(provider="unsplash", id="x", type="image", title="No URL"))

    selected.assert_not_called()
    assert picker.is_open() is True


def test_failed_load_more_keeps_page(catalog):
    service = MagicMock()
    service.unified_search.side_effect = [
        UnifiedSearchResult(success=True, query="beach", page=1, unsplash=[PHOTO_1], has_more=True),
        UnifiedSearchResult(success=False, query="beach", page=2, error="rate limited"),
        UnifiedSearchResult(success=True, query="beach", page=2, unsplash=[PHOTO_2], has_more=False),
    ]
    picker = ImagePickerController(catalog=catalog, search_service=service, state={})
    picker.search("beach")

    picker.load_more()

    assert picker.get_page() == 1
    assert picker.get_error() == SEARCH_ERROR
    assert picker.get_search_results()["unsplash"] == [PHOTO_1]
    assert picker.can_load_more() is True

    picker.load_more()

    service.unified_search.assert_called_with("beach", page=2, per_page=20)
    assert picker.get_page() == 2
    assert picker.get_error() is None
    assert picker.get_search_results()["unsplash"] == [PHOTO_1, PHOTO_2]
