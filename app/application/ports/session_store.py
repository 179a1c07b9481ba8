from abc import ABC, abstractmethod

from app.domain.entities.movie import Movie


class SessionStorePort(ABC):
    @abstractmethod
    def set_last_movie(self, session_key: str, movie: Movie) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_last_movie(self, session_key: str) -> Movie | None:
        raise NotImplementedError
