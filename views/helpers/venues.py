"""
Venue (place) details extraction for the venue panel and hero.

Place data arrives in one of two shapes: the standardized rich data
format (rating/sections/external_urls keys) or the older flat format
with everything under "metadata". Both are read here so the components
only deal with VenueDetails.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from views.helpers.formatting import (
    filter_relevant_types,
    format_business_status,
    format_number_with_commas,
    format_price_level,
)

HERO_PRICE_LEVELS = {
    0: "💸 Free",
    1: "💰 Inexpensive",
    2: "💰💰 Moderate",
    3: "💰💰💰 Expensive",
    4: "💰💰💰💰 Very Expensive",
}


@dataclass
class VenueDetails:
    """Display-ready venue fields."""
    title: str
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    maps_url: Optional[str] = None
    rating: Optional[float] = None
    ratings_total: Optional[int] = None
    price_level: Optional[int] = None
    business_status: Optional[str] = None
    types: list[str] = field(default_factory=list)
    is_open_now: Optional[bool] = None
    opening_hours: list[str] = field(default_factory=list)
    photo_url: Optional[str] = None

    @property
    def has_contact_info(self) -> bool:
        return bool(self.address or self.phone or self.website)

    @property
    def has_rating_info(self) -> bool:
        return self.rating is not None

    @property
    def status_label(self) -> Optional[str]:
        return format_business_status(self.business_status)


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def extract_venue_details(rich_data: Optional[dict]) -> VenueDetails:
    """Read venue fields from either rich data shape."""
    data = rich_data or {}
    metadata = data.get("metadata") or {}

    status = data.get("status")
    if status == "open":
        status = "OPERATIONAL"
    elif status == "closed":
        status = "CLOSED_TEMPORARILY"
    elif isinstance(status, str):
        status = status.upper()
    else:
        status = _first(_dig(data, "sections", "hero", "status"), metadata.get("business_status"))

    hours = _first(_dig(data, "sections", "details", "opening_hours"), _dig(data, "additional_data", "opening_hours")) or {}

    types = data.get("categories")
    if not isinstance(types, list):
        types = metadata.get("types") if isinstance(metadata.get("types"), list) else []

    title = data.get("title")
    return VenueDetails(
        title=title if isinstance(title, str) else "Unknown Place",
        address=_first(_dig(data, "sections", "details", "formatted_address"), metadata.get("address")),
        phone=_first(_dig(data, "sections", "details", "phone"), metadata.get("formatted_phone_number")),
        website=_first(
            _dig(data, "external_urls", "official"),
            _dig(data, "sections", "details", "website"),
            _dig(data, "external_urls", "website"),
        ),
        maps_url=_first(_dig(data, "external_urls", "maps"), _dig(data, "external_urls", "google_maps")),
        rating=_first(_dig(data, "rating", "value"), metadata.get("rating")),
        ratings_total=_first(_dig(data, "rating", "count"), metadata.get("user_ratings_total")),
        price_level=_first(_dig(data, "sections", "hero", "price_level"), metadata.get("price_level")),
        business_status=status,
        types=types,
        is_open_now=hours.get("open_now"),
        opening_hours=hours.get("weekday_text", []),
        photo_url=_dig(data, "primary_image", "url"),
    )


def hero_rating(rating: Any) -> str:
    """Rating for the hero banner, "N/A" when missing."""
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return "N/A"
    return f"{float(rating):.1f}"


def hero_ratings_count(count: Any) -> str:
    """Full review count for the hero banner: 1234 -> "1,234+ reviews"."""
    if isinstance(count, bool) or not isinstance(count, int):
        return ""
    if count > 1:
        return f"{format_number_with_commas(count)}+ reviews"
    if count == 1:
        return "1 review"
    return ""


def hero_price_level(level: Any) -> Optional[str]:
    """Price level with money emoji for the hero banner."""
    if isinstance(level, bool):
        return None
    return HERO_PRICE_LEVELS.get(level)


def hero_types(types: list[str]) -> list[str]:
    return filter_relevant_types(types, limit=4)


def price_level_description(level: Any) -> Optional[str]:
    return format_price_level(level)
