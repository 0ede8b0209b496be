"""Unit tests for app.services.star_wars with httpx.MockTransport in place of the network."""

import unittest
from unittest.mock import MagicMock

import httpx

from app.core.exceptions import StarWarsApiError
from app.services.star_wars import fetch_films

FILM = {
    "title": "A New Hope",
    "episode_id": 4,
    "opening_crawl": "It is a period of civil war.",
    "director": "George Lucas",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1977-05-25",
    "url": "https://swapi.dev/api/films/1/",
    "characters": ["https://swapi.dev/api/people/1/"],
    "created": "2014-12-10T14:23:31.880000Z",
}


def _settings() -> MagicMock:
    settings = MagicMock()
    settings.STAR_WARS_URL = "https://swapi.test/api"
    settings.STAR_WARS_REQUEST_TIMEOUT_SEC = 5.0
    return settings


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestFetchFilms(unittest.TestCase):
    def test_returns_films_and_ignores_extra_keys(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"count": 1, "results": [FILM]})

        with _client(handler) as client:
            films = fetch_films(_settings(), client=client)

        self.assertEqual(len(films), 1)
        self.assertEqual(films[0].title, "A New Hope")
        self.assertEqual(films[0].episode_id, 4)
        self.assertNotIn("characters", films[0].model_dump())
        self.assertEqual(str(seen[0].url), "https://swapi.test/api/films")
        self.assertEqual(seen[0].method, "GET")

    def test_non_200_is_400(self) -> None:
        with _client(lambda request: httpx.Response(503, text="down")) as client:
            with self.assertRaises(StarWarsApiError) as ctx:
                fetch_films(_settings(), client=client)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Request processed with errors")

    def test_unreachable_is_500(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with self.assertRaises(StarWarsApiError) as ctx:
                fetch_films(_settings(), client=client)
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIn("unreachable", ctx.exception.message)
        self.assertIsInstance(ctx.exception.__cause__, httpx.ConnectError)

    def test_timeout_is_500(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with _client(handler) as client:
            with self.assertRaises(StarWarsApiError) as ctx:
                fetch_films(_settings(), client=client)
        self.assertEqual(ctx.exception.status_code, 500)
        self.assertIn("timed out", ctx.exception.message)

    def test_missing_results_is_500(self) -> None:
        with _client(lambda request: httpx.Response(200, json={"detail": "Not found"})) as client:
            with self.assertRaises(StarWarsApiError) as ctx:
                fetch_films(_settings(), client=client)
        self.assertEqual(ctx.exception.status_code, 500)

    def test_invalid_film_is_500(self) -> None:
        bad = dict(FILM, episode_id="four")
        with _client(lambda request: httpx.Response(200, json={"results": [bad]})) as client:
            with self.assertRaises(StarWarsApiError) as ctx:
                fetch_films(_settings(), client=client)
        self.assertEqual(ctx.exception.status_code, 500)

    def test_empty_results(self) -> None:
        with _client(lambda request: httpx.Response(200, json={"results": []})) as client:
            self.assertEqual(fetch_films(_settings(), client=client), [])


if __name__ == "__main__":
    unittest.main()
