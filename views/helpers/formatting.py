"""
Display formatting for prices, ratings, runtimes and venue details.

Every function is total: bad or missing input gives a neutral value
("$0", None, "") rather than an exception, so templates can call them
on whatever the data layer hands over.
"""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

# Currencies written after the amount
SUFFIX_CURRENCIES = {
    "PLN": "zł",
}

# Currencies without minor units
ZERO_DECIMAL_CURRENCIES = {"JPY"}

PRICE_LEVELS = {
    0: "Free",
    1: "Inexpensive",
    2: "Moderate",
    3: "Expensive",
    4: "Very Expensive",
}

GENERIC_PLACE_TYPES = {"establishment", "point_of_interest"}


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def format_currency(amount_cents: Any) -> str:
    """Whole-dollar amount from cents: 1250 -> "$12", -1250 -> "-$12"."""
    cents = _to_int(amount_cents)
    if cents is None:
        return "$0"
    if cents < 0:
        return f"-${-cents // 100}"
    return f"${cents // 100}"


def format_price(amount: Any, currency: str = "USD") -> Optional[str]:
    """Price with currency symbol: (12.5, "USD") -> "$12.50"."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None

    code = (currency or "USD").upper()
    number = f"{value:,.0f}" if code in ZERO_DECIMAL_CURRENCIES else f"{value:,.2f}"

    if code in CURRENCY_SYMBOLS:
        return f"{CURRENCY_SYMBOLS[code]}{number}"
    if code in SUFFIX_CURRENCIES:
        return f"{number} {SUFFIX_CURRENCIES[code]}"
    return f"{code} {number}"


def _currency_prefix(currency: str) -> str:
    return CURRENCY_SYMBOLS.get((currency or "USD").upper(), "$")


def format_price_range(min_price: Any, max_price: Any, currency: str = "USD") -> str:
    """Ticket price range for event cards."""
    symbol = _currency_prefix(currency)
    has_min = min_price is not None
    has_max = max_price is not None

    if has_min and has_max:
        if min_price == max_price:
            return f"{symbol}{min_price}"
        return f"{symbol}{min_price} - {symbol}{max_price}"
    if has_min:
        return f"From {symbol}{min_price}"
    if has_max:
        return f"Up to {symbol}{max_price}"
    return "Price not available"


def format_rating(rating: Any) -> Optional[str]:
    """One decimal place: 7.456 -> "7.5"."""
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return None
    return f"{float(rating):.1f}"


def format_runtime(minutes: Any) -> Optional[str]:
    """Movie runtime: 135 -> "2h 15m", 120 -> "2h", 45 -> "45m"."""
    if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes <= 0:
        return None
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours}h {mins}m"
    if hours:
        return f"{hours}h"
    return f"{mins}m"


def format_duration_ms(milliseconds: Any) -> Optional[str]:
    """Track length: 215000 -> "3:35"."""
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int) or milliseconds < 0:
        return None
    seconds = milliseconds // 1000
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_number_with_commas(number: Any) -> str:
    """1234567 -> "1,234,567"."""
    value = _to_int(number)
    if value is None:
        return str(number) if number is not None else ""
    return f"{value:,}"


def format_ratings_count(count: Any) -> str:
    """Compact review count: 2400 -> "2k+ reviews", 1 -> "1 review"."""
    value = _to_int(count)
    if value is None or value <= 0:
        return ""
    if value >= 1000:
        return f"{value // 1000}k+ reviews"
    if value == 1:
        return "1 review"
    return f"{value} reviews"


def format_price_level(level: Any) -> Optional[str]:
    """Venue price level 0-4 to words."""
    value = _to_int(level)
    return PRICE_LEVELS.get(value) if value is not None else None


def format_business_status(status: Optional[str]) -> Optional[str]:
    """OPERATIONAL -> "Operational", CLOSED_TEMPORARILY -> "Temporarily Closed"."""
    if not status:
        return None
    if status == "CLOSED_TEMPORARILY":
        return "Temporarily Closed"
    if status == "CLOSED_PERMANENTLY":
        return "Permanently Closed"
    return status.replace("_", " ").capitalize()


def filter_relevant_types(types: Optional[list[str]], limit: int = 6) -> list[str]:
    """Drop generic place types and keep the first `limit`."""
    relevant = [t for t in types or [] if t not in GENERIC_PLACE_TYPES]
    return relevant[:limit]


def format_place_type(place_type: str) -> str:
    """night_club -> "Night Club"."""
    return place_type.replace("_", " ").title()


def pluralize(word: str, count: int, singular: Optional[str] = None) -> str:
    """
    Pick the word form for a count.

    pluralize("people", 1, "person") -> "person"
    pluralize("minute", 2) -> "minutes"
    """
    if word == "people":
        return singular if count == 1 and singular else "people"
    if count == 1:
        return singular or word
    return f"{word}s"


def format_relative_time(moment: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Short "time ago" text for activity lists."""
    if moment is None:
        return ""
    now = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - moment).total_seconds())
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        minutes = seconds // 60
        return f"{minutes} {pluralize('minute', minutes)} ago"
    if seconds < 86400:
        hours = seconds // 3600
        return f"{hours} {pluralize('hour', hours)} ago"
    if seconds < 7 * 86400:
        days = seconds // 86400
        return f"{days} {pluralize('day', days)} ago"
    return moment.strftime("%b %d, %Y")
