import httpx

from services.search_apis import TMDBAPI

MOVIE_DETAILS = {
    "id": 27205,
    "title": "Inception",
    "overview": "A thief who steals corporate secrets...",
    "tagline": "Your mind is the scene of the crime.",
    "release_date": "2010-07-15",
    "runtime": 148,
    "genres": [{"id": 28, "name": "Action"}, {"id": 878, "name": "Science Fiction"}],
    "vote_average": 8.4,
    "vote_count": 35000,
    "poster_path": "/inception.jpg",
    "backdrop_path": "/backdrop.jpg",
    "imdb_id": "tt1375666",
    "homepage": "",
    "credits": {
        "cast": [{"name": "Leonardo DiCaprio", "character": "Cobb", "profile_path": "/leo.jpg", "order": 0}],
        "crew": [{"name": "Christopher Nolan", "job": "Director", "department": "Directing"}],
    },
    "images": {"posters": [{"file_path": "/p1.jpg"}, {"file_path": None}]},
    "external_ids": {"twitter_id": "inception", "facebook_id": None},
}


def make_api(settings, handler):
    return TMDBAPI(settings=settings, transport=httpx.MockTransport(handler))


def test_search_movies_limits_results_and_sends_key(settings):
    seen = {}

    def handler(request):
        seen["url"] = request.url
        results = [
            {"id": i, "title": f"Movie {i}", "overview": "", "poster_path": f"/{i}.jpg", "release_date": "2020-01-01"}
            for i in range(8)
        ]
        return httpx.Response(200, json={"results": results, "total_pages": 3})

    response = make_api(settings, handler).search_movies("movie", limit=5)

    assert response.success is True
    assert len(response.items) == 5
    assert response.total_pages == 3
    assert seen["url"].path == "/3/search/movie"
    assert seen["url"].params["api_key"] == "tmdb-key"
    first = response.items[0]
    assert first.id == "0"
    assert first.image_url == "https://image.tmdb.org/t/p/w200/0.jpg"
    assert first.metadata["release_date"] == "2020-01-01"


def test_search_without_key_fails_without_request(unconfigured_settings):
    def handler(request):
        raise AssertionError("no request expected")

    response = make_api(unconfigured_settings, handler).search_movies("inception")
    assert response.success is False
    assert response.error == "TMDB API key not configured"


def test_search_reports_http_errors(settings):
    response = make_api(settings, lambda request: httpx.Response(401, text="bad key")).search_movies("x")
    assert response.success is False
    assert response.error == "TMDB API error: 401"


def test_search_reports_connection_errors(settings):
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    response = make_api(settings, handler).search_movies("x")
    assert response.success is False
    assert "Could not connect to TMDB" in response.error


def test_search_multi_skips_results_without_images(settings):
    def handler(request):
        return httpx.Response(200, json={
            "results": [
                {"id": 1, "media_type": "movie", "title": "Up", "poster_path": "/up.jpg"},
                {"id": 2, "media_type": "person", "name": "Pete Docter", "profile_path": "/pete.jpg"},
                {"id": 3, "media_type": "tv", "name": "No Poster"},
                {"id": 4, "media_type": "company", "name": "Pixar", "poster_path": "/pixar.jpg"},
            ],
            "total_pages": 1,
        })

    response = make_api(settings, handler).search_multi("pixar")

    assert [item.title for item in response.items] == ["Up", "Pete Docter"]
    assert response.items[1].metadata["type_label"] == "Person"
    assert response.items[1].image_url == "https://image.tmdb.org/t/p/w500/pete.jpg"


def test_movie_details_are_normalized(settings):
    seen = {}

    def handler(request):
        seen["params"] = request.url.params
        return httpx.Response(200, json=MOVIE_DETAILS)

    result = make_api(settings, handler).get_details("27205", "movie")

    assert result.success is True
    assert seen["params"]["append_to_response"] == "credits,images,external_ids,videos"
    data = result.data
    assert data["title"] == "Inception"
    assert data["description"].startswith("A thief")
    assert data["genres"] == ["Action", "Science Fiction"]
    assert data["cast"][0]["character"] == "Cobb"
    assert data["crew"][0]["job"] == "Director"
    assert data["images"] == ["https://image.tmdb.org/t/p/original/p1.jpg"]
    assert data["external_urls"]["imdb_url"] == "https://www.imdb.com/title/tt1375666"
    assert data["external_urls"]["twitter_url"] == "https://twitter.com/inception"
    assert "facebook_url" not in data["external_urls"]
    assert data["external_urls"]["homepage"] is None


def test_movie_details_not_found(settings):
    result = make_api(settings, lambda request: httpx.Response(404)).get_movie_details(1)
    assert result.success is False
    assert result.error == "Movie not found"


def test_details_reject_other_content_types(settings):
    result = make_api(settings, lambda request: httpx.Response(200, json={})).get_details("1", "tv")
    assert result.success is False
    assert result.error == "Unsupported content type: tv"
