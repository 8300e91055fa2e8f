"""
Movie data helpers for poll options and the movie details panel.

Movie data comes from TMDB details (see services.search_apis.tmdb), from
stored poll options, or from older records that keep fields under
"metadata". The getters below read all of them and never raise.
"""

from typing import Any, Optional

from models.entities import PollOption

TMDB_IMAGE_BASE = "https://image.tmdb.org/t/p"

WRITER_JOBS = ("Writer", "Screenplay", "Story")
PRODUCER_JOBS = ("Producer", "Executive Producer")

LINK_LABELS = {
    "tmdb_url": "TMDB",
    "imdb_url": "IMDb",
    "homepage": "Official Site",
    "facebook_url": "Facebook",
    "twitter_url": "Twitter",
    "instagram_url": "Instagram",
}


def tmdb_image_url(path: Optional[str], size: str = "w500") -> Optional[str]:
    if not path:
        return None
    return f"{TMDB_IMAGE_BASE}/{size}{path}"


def _field(data: Any, key: str) -> Any:
    """Read key from the top level, then from "metadata"."""
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if value is None and isinstance(data.get("metadata"), dict):
        value = data["metadata"].get(key)
    return value


def get_image_url(data: Any) -> Optional[str]:
    """Best poster URL for a poll option or a movie data dict."""
    if isinstance(data, PollOption):
        if data.image_url:
            return data.image_url
        external = data.external_data if isinstance(data.external_data, dict) else None
        if external is None:
            return None
        posters = ((external.get("media") or {}).get("images") or {}).get("posters")
        if isinstance(posters, list) and posters and isinstance(posters[0], dict):
            path = posters[0].get("file_path")
            if isinstance(path, str):
                return tmdb_image_url(path)
        return get_image_url(external)

    if not isinstance(data, dict):
        return None

    poster = data.get("poster_path")
    if isinstance(poster, dict) and poster.get("url"):
        return poster["url"]
    if isinstance(poster, str) and poster:
        return tmdb_image_url(poster)

    images = data.get("images")
    if isinstance(images, list) and images:
        first = images[0]
        if isinstance(first, dict):
            return first.get("url")
        if isinstance(first, str):
            return first
    return None


def get_release_year(data: Any) -> Optional[int]:
    """2023 from "2023-05-15"."""
    release_date = _field(data, "release_date")
    if not isinstance(release_date, str) or not release_date:
        return None
    year = release_date.split("-")[0]
    return int(year) if year.isdigit() else None


def get_title(data: Any) -> str:
    if not isinstance(data, dict):
        return "Unknown Title"
    metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
    return (
        data.get("title")
        or data.get("name")
        or metadata.get("title")
        or metadata.get("original_title")
        or "Unknown Title"
    )


def _crew(data: Any) -> list[dict]:
    crew = _field(data, "crew")
    return [c for c in crew if isinstance(c, dict)] if isinstance(crew, list) else []


def get_director(data: Any) -> Optional[str]:
    for member in _crew(data):
        if member.get("job") == "Director":
            return member.get("name")
    return None


def get_writers(data: Any) -> list[dict]:
    """Up to three writers (Writer, Screenplay or Story credits)."""
    return [m for m in _crew(data) if m.get("job") in WRITER_JOBS][:3]


def get_producers(data: Any) -> list[dict]:
    """Up to two producers."""
    return [m for m in _crew(data) if m.get("job") in PRODUCER_JOBS][:2]


def has_key_personnel(data: Any) -> bool:
    return bool(get_director(data) or get_writers(data) or get_producers(data))


def get_top_cast(data: Any, limit: int = 6) -> list[dict]:
    """Billing-ordered cast."""
    cast = _field(data, "cast")
    if not isinstance(cast, list):
        return []
    members = [c for c in cast if isinstance(c, dict)]
    return sorted(members, key=lambda c: c.get("order", 999))[:limit]


def get_genres(data: Any) -> str:
    """Comma-joined genre names ("Action, Adventure")."""
    genres = _field(data, "genres")
    if not isinstance(genres, list):
        return ""
    names = []
    for genre in genres:
        if isinstance(genre, dict):
            genre = genre.get("name")
        if isinstance(genre, str) and genre:
            names.append(genre)
    return ", ".join(names)


def build_enhanced_description(data: Any) -> str:
    """Year, director and genres on one line: "2010 • Dir: Christopher Nolan • Sci-Fi"."""
    year = get_release_year(data)
    director = get_director(data)
    genres = get_genres(data)

    parts = []
    if year:
        parts.append(str(year))
    if director:
        parts.append(f"Dir: {director}")
    if genres:
        parts.append(genres)
    return " • ".join(parts)


def get_poster_url(data: Any, size: str = "w500") -> Optional[str]:
    path = _field(data, "poster_path")
    return tmdb_image_url(path, size) if isinstance(path, str) else None


def get_backdrop_url(data: Any, size: str = "w1280") -> Optional[str]:
    path = _field(data, "backdrop_path")
    return tmdb_image_url(path, size) if isinstance(path, str) else None


def get_profile_url(person: dict, size: str = "w185") -> Optional[str]:
    path = person.get("profile_path") if isinstance(person, dict) else None
    return tmdb_image_url(path, size) if isinstance(path, str) else None


def get_initials(name: Any) -> str:
    """"Christopher Nolan" -> "CN"; placeholder for people without a photo."""
    if not isinstance(name, str):
        return "?"
    words = name.split()
    if not words:
        return "?"
    return "".join(word[0] for word in words[:2]).upper()


def filter_external_links(links: Any) -> dict[str, str]:
    """Keep only links that have a URL."""
    if not isinstance(links, dict):
        return {}
    return {key: url for key, url in links.items() if isinstance(url, str) and url}


def format_link_text(key: str) -> str:
    return LINK_LABELS.get(key, "Website")


def rating_pills(data: Any) -> list[str]:
    """
    Rating badges for the movie hero.

    Aggregated ratings (under "ratings": tmdb, imdb, rottenTomatoes,
    metacritic) each get a pill; otherwise the TMDB vote average is shown
    out of ten.
    """
    ratings = data.get("ratings") if isinstance(data, dict) else None
    ratings = ratings if isinstance(ratings, dict) else {}
    pills = []

    if ratings.get("tmdb") is not None:
        pills.append(f"⭐ {_one_decimal(ratings['tmdb'])} TMDB")
    if ratings.get("imdb") is not None:
        pills.append(f"🎬 {_one_decimal(ratings['imdb'])} IMDb")
    if ratings.get("rottenTomatoes") is not None:
        pills.append(f"🍅 {ratings['rottenTomatoes']}% RT")
    if ratings.get("metacritic") is not None:
        pills.append(f"📰 {ratings['metacritic']} MC")
    if pills:
        return pills

    vote_average = _field(data, "vote_average")
    if isinstance(vote_average, (int, float)) and not isinstance(vote_average, bool) and vote_average:
        return [f"⭐ {_one_decimal(vote_average)}/10"]
    return []


def _one_decimal(value: Any) -> str:
    try:
        return f"{float(value):.1f}"
    except (TypeError, ValueError):
        return str(value)
