from __future__ import annotations

from app.application.use_cases.classify_intent import GENRE_TRIGGERS, SYNOPSIS_TRIGGER
from app.domain.entities.message import (
    CarouselColumn,
    CarouselMessage,
    MessageAction,
    OutboundMessage,
    QuickReply,
    TextMessage,
)
from app.domain.entities.movie import Movie


GREETING_TEXT = "สวัสดีครับ! หากคุณนึกไม่ออกว่าจะดูอะไร เราจะช่วยคุณเอง!"
CAROUSEL_ALT_TEXT = "ส่งหนังให้คุณ"
CAROUSEL_COLUMN_TEXT = "  "
SYNOPSIS_LABEL = "เรื่องย่อ"
ENCOURAGEMENT_TEXT = "หวังว่าคุณจะชอบนะ"
SYNOPSIS_PREFIX = "เรื่องย่อ: "
NO_MOVIE_YET_TEXT = "ยังไม่มีหนังที่สุ่มมา"
FETCH_ERROR_TEXT = "เกิดข้อผิดพลาดไม่สามารถดึงข้อมูลหนังได้ ลองใหม่อีกครั้ง"
DELIVERY_ERROR_TEXT = "เกิดข้อผิดพลาดในการส่งข้อความ"

# LINE rejects carousel titles longer than this.
MAX_COLUMN_TITLE_LENGTH = 40
CAROUSEL_COLUMN_COUNT = 2


def build_quick_reply() -> QuickReply:
    return QuickReply(items=tuple(MessageAction(label=trigger, text=trigger) for trigger in GENRE_TRIGGERS))


class ReplyComposer:
    """Builds outbound messages; every text reply carries the genre menu."""

    def __init__(self, image_base_url: str) -> None:
        self._image_base_url = image_base_url.rstrip("/")
        self._quick_reply = build_quick_reply()

    def greeting(self) -> list[OutboundMessage]:
        return [self._text(GREETING_TEXT)]

    def movie_carousel(self, movie: Movie) -> list[OutboundMessage]:
        column = CarouselColumn(
            thumbnail_image_url=self.poster_url(movie),
            title=_truncate(movie.title or CAROUSEL_ALT_TEXT, MAX_COLUMN_TITLE_LENGTH),
            text=CAROUSEL_COLUMN_TEXT,
            actions=(MessageAction(label=SYNOPSIS_LABEL, text=SYNOPSIS_TRIGGER),),
        )
        carousel = CarouselMessage(alt_text=CAROUSEL_ALT_TEXT, columns=(column,) * CAROUSEL_COLUMN_COUNT)
        return [carousel, self._text(ENCOURAGEMENT_TEXT)]

    def synopsis(self, movie: Movie | None) -> list[OutboundMessage]:
        if movie is None:
            return [self._text(NO_MOVIE_YET_TEXT)]
        return [self._text(SYNOPSIS_PREFIX + movie.overview)]

    def fetch_error(self) -> list[OutboundMessage]:
        return [self._text(FETCH_ERROR_TEXT)]

    def delivery_error(self) -> list[OutboundMessage]:
        return [self._text(DELIVERY_ERROR_TEXT)]

    def echo(self, text: str) -> list[OutboundMessage]:
        return [self._text(text)]

    def poster_url(self, movie: Movie) -> str | None:
        if not movie.poster_path:
            return None
        return f"{self._image_base_url}/{movie.poster_path.lstrip('/')}"

    def _text(self, text: str) -> TextMessage:
        return TextMessage(text=text, quick_reply=self._quick_reply)


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"
