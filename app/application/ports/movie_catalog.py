from abc import ABC, abstractmethod

from app.domain.entities.movie import Genre, Movie


class MovieCatalogPort(ABC):
    @abstractmethod
    def fetch_random_movie(self, genre: Genre | str) -> Movie:
        """
        Pick one movie of the given genre.

        Raises:
            UnrecognizedGenreError: genre has no catalog query (no network call made)
            NetworkError: transport failure or error status from the catalog
            ParseError: body is not the expected JSON shape
            EmptyResultError: the catalog returned no movies
        """
        raise NotImplementedError
