from functools import lru_cache
import logging

from app.application.exceptions import ConfigurationError
from app.application.ports.message_platform import MessagePlatformPort
from app.application.ports.movie_catalog import MovieCatalogPort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.handle_event import HandleEventUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.send_reply import SendReplyUseCase
from app.core.config import settings
from app.infrastructure.line.line_client import LineMessagingClient
from app.infrastructure.line.line_platform import LinePlatform
from app.infrastructure.line.mock_platform import MockLinePlatform
from app.infrastructure.store.memory_store import MemorySessionStore
from app.infrastructure.tmdb.mock_catalog import MockMovieCatalog
from app.infrastructure.tmdb.tmdb_catalog import TmdbMovieCatalog


logger = logging.getLogger(__name__)


def get_channel_secret() -> str:
    if not settings.LINE_CHANNEL_SECRET:
        raise ConfigurationError("LINE_CHANNEL_SECRET is required to verify webhook signatures.")
    return settings.LINE_CHANNEL_SECRET


@lru_cache
def get_session_store() -> MemorySessionStore:
    return MemorySessionStore(max_entries=settings.SESSION_MAX_ENTRIES)


@lru_cache
def get_movie_catalog() -> MovieCatalogPort:
    if not settings.TMDB_API_KEY:
        if settings.is_local():
            logger.info("Using MockMovieCatalog (TMDB_API_KEY missing, ENV=dev/local)")
            return MockMovieCatalog()
        raise ConfigurationError("TMDB_API_KEY is required to fetch movies.")

    return TmdbMovieCatalog(
        api_key=settings.TMDB_API_KEY,
        base_url=settings.TMDB_BASE_URL,
        language=settings.TMDB_LANGUAGE,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


@lru_cache
def get_line_platform() -> MessagePlatformPort:
    logger.info(
        "LINE_CHANNEL_TOKEN present=%s len=%s",
        bool(settings.LINE_CHANNEL_TOKEN),
        len(settings.LINE_CHANNEL_TOKEN or ""),
    )
    logger.info("ENV=%s", settings.ENV)

    if not settings.LINE_CHANNEL_TOKEN:
        if settings.is_local():
            logger.info("Using MockLinePlatform (token missing, ENV=dev/local)")
            return MockLinePlatform()
        raise ConfigurationError("LINE_CHANNEL_TOKEN is required to send LINE replies.")

    logger.info("Using real LinePlatform")
    client = LineMessagingClient(
        channel_token=settings.LINE_CHANNEL_TOKEN,
        base_url=settings.LINE_API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )
    return LinePlatform(client=client)


@lru_cache
def get_handle_event_use_case() -> HandleEventUseCase:
    return HandleEventUseCase(
        catalog=get_movie_catalog(),
        store=get_session_store(),
        classify_intent=ClassifyIntentUseCase(),
        composer=ReplyComposer(image_base_url=settings.TMDB_IMAGE_BASE_URL),
        send_reply=SendReplyUseCase(platform=get_line_platform()),
    )


def validate_startup() -> None:
    """Build every collaborator once so missing credentials stop the process before serving."""
    get_channel_secret()
    get_handle_event_use_case()


def close_clients() -> None:
    """Close the cached HTTP clients and drop every cached collaborator."""
    for factory in (get_line_platform, get_movie_catalog):
        if factory.cache_info().currsize:
            close = getattr(factory(), "close", None)
            if close is not None:
                close()
        factory.cache_clear()
    get_handle_event_use_case.cache_clear()
