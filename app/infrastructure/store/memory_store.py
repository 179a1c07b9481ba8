from __future__ import annotations

import threading
from collections import OrderedDict

from app.application.ports.session_store import SessionStorePort
from app.domain.entities.movie import Movie


class MemorySessionStore(SessionStorePort):
    """Last movie shown per conversation, least recently used entries evicted first."""

    def __init__(self, max_entries: int = 1000) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._last_movies: OrderedDict[str, Movie] = OrderedDict()
        self._max_entries = max_entries
        self._lock = threading.Lock()

    def set_last_movie(self, session_key: str, movie: Movie) -> None:
        with self._lock:
            self._last_movies[session_key] = movie
            self._last_movies.move_to_end(session_key)
            while len(self._last_movies) > self._max_entries:
                self._last_movies.popitem(last=False)

    def get_last_movie(self, session_key: str) -> Movie | None:
        with self._lock:
            movie = self._last_movies.get(session_key)
            if movie is not None:
                self._last_movies.move_to_end(session_key)
            return movie

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_movies)
