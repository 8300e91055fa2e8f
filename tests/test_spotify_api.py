import httpx

from services.search_apis import SpotifyAPI

TRACK = {
    "id": "4uLU6hMCjMI75M1A2tKUQC",
    "name": "Never Gonna Give You Up",
    "artists": [{"name": "Rick Astley"}],
    "album": {
        "name": "Whenever You Need Somebody",
        "images": [{"url": "https://i/large.jpg"}, {"url": "https://i/medium.jpg"}, {"url": "https://i/small.jpg"}],
    },
    "duration_ms": 213573,
    "preview_url": None,
    "popularity": 80,
    "external_urls": {"spotify": "https://open.spotify.com/track/4uLU"},
}


class FakeSpotify:
    """Token endpoint plus search and track endpoints."""

    def __init__(self, token_status=200):
        self.token_requests = 0
        self.token_status = token_status
        self.requests = []

    def __call__(self, request):
        if request.url.host == "accounts.spotify.com":
            self.token_requests += 1
            if self.token_status != 200:
                return httpx.Response(self.token_status, text="invalid_client")
            return httpx.Response(200, json={"access_token": "token-1", "expires_in": 3600})

        self.requests.append(request)
        assert request.headers["Authorization"] == "Bearer token-1"
        if request.url.path == "/v1/search":
            return httpx.Response(200, json={"tracks": {"items": [TRACK]}})
        if request.url.path == "/v1/tracks/missing":
            return httpx.Response(404)
        return httpx.Response(200, json=TRACK)


def make_api(settings, fake):
    return SpotifyAPI(settings=settings, transport=httpx.MockTransport(fake))


def test_search_tracks(settings):
    fake = FakeSpotify()
    response = make_api(settings, fake).search_tracks("rick astley", limit=100)

    assert response.success is True
    assert fake.requests[0].url.params["type"] == "track"
    assert fake.requests[0].url.params["limit"] == "50"
    track = response.items[0]
    assert track.title == "Never Gonna Give You Up"
    assert track.description == "Rick Astley - Whenever You Need Somebody"
    assert track.image_url == "https://i/medium.jpg"
    assert track.metadata["duration_formatted"] == "3:33"
    assert track.metadata["external_url"] == "https://open.spotify.com/track/4uLU"


def test_token_is_reused(settings):
    fake = FakeSpotify()
    api = make_api(settings, fake)
    api.search_tracks("one")
    api.search_tracks("two")
    assert fake.token_requests == 1


def test_invalid_credentials(settings):
    response = make_api(settings, FakeSpotify(token_status=401)).search_tracks("x")
    assert response.success is False
    assert "Invalid Spotify API credentials" in response.error


def test_not_configured(unconfigured_settings):
    response = make_api(unconfigured_settings, FakeSpotify()).search_tracks("x")
    assert response.success is False
    assert response.error == "Spotify API credentials not configured"


def test_get_track(settings):
    api = make_api(settings, FakeSpotify())
    result = api.get_details("4uLU6hMCjMI75M1A2tKUQC")
    assert result.success is True
    assert result.data["artist"] == "Rick Astley"
    assert api.get_track("missing").error == "Track not found"


def test_single_album_image_is_used():
    track = dict(TRACK, album={"name": "Single", "images": [{"url": "https://i/only.jpg"}]})
    api = SpotifyAPI(settings=None, transport=None)
    assert api._parse_track(track).image_url == "https://i/only.jpg"
