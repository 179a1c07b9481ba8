from __future__ import annotations

import logging

from app.application.exceptions import DeliveryError, MovieFetchError
from app.application.ports.movie_catalog import MovieCatalogPort
from app.application.ports.session_store import SessionStorePort
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.reply_composer import ReplyComposer
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.intent import Intent, IntentKind
from app.domain.entities.message import InboundEvent, OutboundMessage


class HandleEventUseCase:
    def __init__(
        self,
        catalog: MovieCatalogPort,
        store: SessionStorePort,
        classify_intent: ClassifyIntentUseCase,
        composer: ReplyComposer,
        send_reply: SendReplyUseCase,
    ) -> None:
        self._catalog = catalog
        self._store = store
        self._classify_intent = classify_intent
        self._composer = composer
        self._send_reply = send_reply
        self._logger = logging.getLogger(__name__)

    def handle(self, event: InboundEvent) -> None:
        """Process one event. Never raises: failures are logged so the rest of the batch proceeds."""
        try:
            self._handle(event)
        except Exception as e:
            self._logger.exception(
                "Error handling event",
                extra={"event_type": event.event_type, "session_key": event.session_key, "error": str(e)},
            )

    def _handle(self, event: InboundEvent) -> None:
        if event.kind not in {"follow", "text"}:
            self._logger.info(
                "Unhandled event ignored",
                extra={"event_type": event.event_type, "message_type": event.message_type},
            )
            return

        if not event.reply_token:
            self._logger.warning("Event without reply token skipped", extra={"event_type": event.event_type})
            return

        if event.kind == "follow":
            intent = Intent(kind=IntentKind.GREET)
        else:
            intent = self._classify_intent.execute(event.text)
        self._logger.info(
            "Intent classified",
            extra={"intent": intent.kind.value, "session_key": event.session_key},
        )

        if intent.kind == IntentKind.GREET:
            self._deliver(event.reply_token, self._composer.greeting(), event)
            return

        if intent.genre is not None:
            self._reply_with_movie(event.reply_token, event, intent)
            return

        if intent.kind == IntentKind.SYNOPSIS:
            movie = self._store.get_last_movie(event.session_key)
            self._deliver(event.reply_token, self._composer.synopsis(movie), event)
            return

        self._deliver(event.reply_token, self._composer.echo(intent.text), event)

    def _reply_with_movie(self, reply_token: str, event: InboundEvent, intent: Intent) -> None:
        try:
            movie = self._catalog.fetch_random_movie(intent.genre)
        except MovieFetchError as e:
            self._logger.error(
                "Error fetching random movie",
                extra={"genre": intent.genre.value, "error": str(e)},
            )
            self._deliver(reply_token, self._composer.fetch_error(), event)
            return

        self._store.set_last_movie(event.session_key, movie)

        try:
            self._send_reply.execute(reply_token, self._composer.movie_carousel(movie))
        except DeliveryError as e:
            self._logger.error(
                "Error sending movie template",
                extra={"genre": intent.genre.value, "status": e.status, "error": str(e)},
            )
            self._deliver(reply_token, self._composer.delivery_error(), event)

    def _deliver(self, reply_token: str, messages: list[OutboundMessage], event: InboundEvent) -> None:
        try:
            self._send_reply.execute(reply_token, messages)
        except DeliveryError as e:
            self._logger.error(
                "Error sending reply",
                extra={"event_type": event.event_type, "status": e.status, "error": str(e)},
            )
