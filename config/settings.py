from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # TMDB (movie polls, cover images)
    tmdb_api_key: str = ""

    # Spotify (music polls), client credentials flow
    spotify_client_id: str = ""
    spotify_client_secret: str = ""

    # Unsplash (cover images)
    unsplash_access_key: str = ""

    # Search tuning
    search_min_chars: int = 2
    search_limit: int = 5
    image_per_page: int = 20
    details_cache_ttl: int = 3600  # Seconds

    # Default cover images (one subfolder per category)
    default_images_dir: str = "static/images/events"
    default_images_url_prefix: str = "app/static/images/events"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


def get_tmdb_config_issues(settings: Settings | None = None) -> list[str]:
    """Return a list of missing TMDB settings (empty when configured)."""
    settings = settings or get_settings()
    issues = []
    if not settings.tmdb_api_key:
        issues.append("TMDB_API_KEY is not set")
    return issues


def get_spotify_config_issues(settings: Settings | None = None) -> list[str]:
    """Return a list of missing Spotify settings (empty when configured)."""
    settings = settings or get_settings()
    issues = []
    if not settings.spotify_client_id:
        issues.append("SPOTIFY_CLIENT_ID is not set")
    if not settings.spotify_client_secret:
        issues.append("SPOTIFY_CLIENT_SECRET is not set")
    return issues


def get_unsplash_config_issues(settings: Settings | None = None) -> list[str]:
    """Return a list of missing Unsplash settings (empty when configured)."""
    settings = settings or get_settings()
    issues = []
    if not settings.unsplash_access_key:
        issues.append("UNSPLASH_ACCESS_KEY is not set")
    return issues
