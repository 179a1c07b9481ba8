from __future__ import annotations

import logging
import random

from app.application.exceptions import UnrecognizedGenreError
from app.application.ports.movie_catalog import MovieCatalogPort
from app.domain.entities.movie import Genre, Movie


MOCK_MOVIES = {
    Genre.ROMANCE: [
        Movie(title="Before Sunrise", poster_path="", overview="Two strangers spend one night talking in Vienna."),
    ],
    Genre.COMEDY: [
        Movie(title="The Grand Budapest Hotel", poster_path="", overview="A concierge and his lobby boy chase a stolen painting."),
    ],
    Genre.HORROR: [
        Movie(title="Shutter", poster_path="", overview="A photographer finds strange shadows in his pictures."),
    ],
}


class MockMovieCatalog(MovieCatalogPort):
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._logger = logging.getLogger(__name__)

    def fetch_random_movie(self, genre: Genre | str) -> Movie:
        try:
            genre = Genre(genre)
        except ValueError:
            raise UnrecognizedGenreError(f"genre not recognized: {genre!r}") from None

        if genre == Genre.ALL:
            pool = [movie for movies in MOCK_MOVIES.values() for movie in movies]
        else:
            pool = MOCK_MOVIES[genre]
        movie = self._rng.choice(pool)
        self._logger.info("Mock movie picked", extra={"genre": genre.value})
        return movie
