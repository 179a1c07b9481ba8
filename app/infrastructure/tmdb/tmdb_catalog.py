from __future__ import annotations

import logging
import random
from typing import Any

import httpx

from app.application.exceptions import EmptyResultError, NetworkError, ParseError, UnrecognizedGenreError
from app.application.ports.movie_catalog import MovieCatalogPort
from app.domain.entities.movie import Genre, Movie


POPULAR_PATH = "/movie/popular"
DISCOVER_PATH = "/discover/movie"

# TMDB genre ids; "all" uses the popular list instead of a filter.
GENRE_IDS = {
    Genre.ROMANCE: 10749,
    Genre.COMEDY: 35,
    Genre.HORROR: 27,
}


class TmdbMovieCatalog(MovieCatalogPort):
    def __init__(
        self,
        api_key: str,
        base_url: str,
        language: str,
        timeout: float = 10.0,
        rng: random.Random | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._rng = rng or random.Random()
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def build_request(self, genre: Genre | str) -> tuple[str, dict[str, Any]]:
        try:
            genre = Genre(genre)
        except ValueError:
            raise UnrecognizedGenreError(f"genre not recognized: {genre!r}") from None

        params: dict[str, Any] = {"api_key": self._api_key, "language": self._language}
        if genre == Genre.ALL:
            return f"{self._base_url}{POPULAR_PATH}", params
        params["with_genres"] = GENRE_IDS[genre]
        return f"{self._base_url}{DISCOVER_PATH}", params

    def fetch_random_movie(self, genre: Genre | str) -> Movie:
        url, params = self.build_request(genre)

        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(f"catalog answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"catalog unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError("catalog body is not JSON") from e

        movies = parse_movies(data)
        if not movies:
            raise EmptyResultError("no movies found")

        movie = self._rng.choice(movies)
        self._logger.info("Movie picked", extra={"genre": Genre(genre).value, "result_count": len(movies)})
        return movie

    def close(self) -> None:
        self._client.close()


def parse_movies(data: Any) -> list[Movie]:
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise ParseError("catalog body has no results list")

    movies: list[Movie] = []
    for item in data["results"]:
        if not isinstance(item, dict):
            raise ParseError("catalog result is not an object")
        movies.append(
            Movie(
                title=_text_field(item, "original_title") or _text_field(item, "title"),
                poster_path=_text_field(item, "poster_path"),
                overview=_text_field(item, "overview"),
            )
        )
    return movies


def _text_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"catalog field {key!r} is not a string")
    return value
