from config.settings import (
    Settings,
    get_spotify_config_issues,
    get_tmdb_config_issues,
    get_unsplash_config_issues,
)


def test_declared_settings():
    assert set(Settings.model_fields) == {
        "tmdb_api_key",
        "spotify_client_id",
        "spotify_client_secret",
        "unsplash_access_key",
        "search_min_chars",
        "search_limit",
        "image_per_page",
        "details_cache_ttl",
        "default_images_dir",
        "default_images_url_prefix",
        "log_level",
    }


def test_configured_providers_have_no_issues(settings):
    assert get_tmdb_config_issues(settings) == []
    assert get_spotify_config_issues(settings) == []
    assert get_unsplash_config_issues(settings) == []


def test_missing_keys_are_listed(unconfigured_settings):
    assert get_tmdb_config_issues(unconfigured_settings) == ["TMDB_API_KEY is not set"]
    assert get_spotify_config_issues(unconfigured_settings) == [
        "SPOTIFY_CLIENT_ID is not set",
        "SPOTIFY_CLIENT_SECRET is not set",
    ]
    assert get_unsplash_config_issues(unconfigured_settings) == ["UNSPLASH_ACCESS_KEY is not set"]
