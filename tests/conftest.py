from __future__ import annotations

from typing import Sequence

import httpx
import pytest

from app.application.exceptions import EmptyResultError, UnrecognizedGenreError
from app.application.ports.message_platform import MessagePlatformPort
from app.application.ports.movie_catalog import MovieCatalogPort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_event import HandleEventUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.movie import Genre, Movie
from app.infrastructure.store.memory_store import MemorySessionStore


IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"


class RecordingPlatform(MessagePlatformPort):
    def __init__(self, fail_times: int = 0) -> None:
        self.replies: list[tuple[str, list]] = []
        self.attempts = 0
        self._fail_times = fail_times

    def reply(self, reply_token: str, messages: Sequence) -> None:
        self.attempts += 1
        if self.attempts <= self._fail_times:
            request = httpx.Request("POST", "https://api.line.me/v2/bot/message/reply")
            raise httpx.HTTPStatusError(
                "400 Bad Request",
                request=request,
                response=httpx.Response(400, request=request),
            )
        self.replies.append((reply_token, list(messages)))


class StubCatalog(MovieCatalogPort):
    def __init__(self, movies: list[Movie] | None = None, error: Exception | None = None) -> None:
        self.movies = movies or []
        self.error = error
        self.calls: list[Genre] = []

    def fetch_random_movie(self, genre: Genre | str) -> Movie:
        try:
            genre = Genre(genre)
        except ValueError:
            raise UnrecognizedGenreError(str(genre)) from None
        self.calls.append(genre)
        if self.error is not None:
            raise self.error
        if not self.movies:
            raise EmptyResultError("no movies found")
        return self.movies[0]


@pytest.fixture
def movie() -> Movie:
    return Movie(title="X", poster_path="/x.jpg", overview="A story about X.")


@pytest.fixture
def composer() -> ReplyComposer:
    return ReplyComposer(image_base_url=IMAGE_BASE_URL)


@pytest.fixture
def platform() -> RecordingPlatform:
    return RecordingPlatform()


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore(max_entries=10)


@pytest.fixture
def catalog(movie: Movie) -> StubCatalog:
    return StubCatalog(movies=[movie])


def build_use_case(catalog: MovieCatalogPort, store: MemorySessionStore, platform: MessagePlatformPort) -> HandleEventUseCase:
    return HandleEventUseCase(
        catalog=catalog,
        store=store,
        classify_intent=ClassifyIntentUseCase(),
        composer=ReplyComposer(image_base_url=IMAGE_BASE_URL),
        send_reply=SendReplyUseCase(platform=platform),
    )


@pytest.fixture
def use_case(catalog: StubCatalog, store: MemorySessionStore, platform: RecordingPlatform) -> HandleEventUseCase:
    return build_use_case(catalog, store, platform)
