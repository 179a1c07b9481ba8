from dataclasses import dataclass, field


@dataclass(frozen=True)
class InboundEvent:
    """One platform event reduced to the fields the bot acts on."""

    kind: str  # "follow" | "text" | "other"
    event_type: str
    reply_token: str | None
    session_key: str
    text: str = ""
    message_type: str | None = None


@dataclass(frozen=True)
class MessageAction:
    label: str
    text: str


@dataclass(frozen=True)
class QuickReply:
    items: tuple[MessageAction, ...]


@dataclass(frozen=True)
class TextMessage:
    text: str
    quick_reply: QuickReply | None = None


@dataclass(frozen=True)
class CarouselColumn:
    title: str
    text: str
    actions: tuple[MessageAction, ...]
    thumbnail_image_url: str | None = None


@dataclass(frozen=True)
class CarouselMessage:
    alt_text: str
    columns: tuple[CarouselColumn, ...] = field(default_factory=tuple)


OutboundMessage = TextMessage | CarouselMessage
