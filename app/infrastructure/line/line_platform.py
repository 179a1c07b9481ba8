from __future__ import annotations

from typing import Any, Sequence

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import (
    CarouselColumn,
    CarouselMessage,
    MessageAction,
    OutboundMessage,
    QuickReply,
    TextMessage,
)
from app.infrastructure.line.line_client import LineMessagingClient


class LinePlatform(MessagePlatformPort):
    def __init__(self, client: LineMessagingClient) -> None:
        self._client = client

    def reply(self, reply_token: str, messages: Sequence[OutboundMessage]) -> None:
        self._client.reply(reply_token=reply_token, messages=[to_line_message(m) for m in messages])

    def close(self) -> None:
        self._client.close()


def to_line_message(message: OutboundMessage) -> dict[str, Any]:
    """Serialize a domain message into LINE Messaging API JSON."""
    if isinstance(message, TextMessage):
        data: dict[str, Any] = {"type": "text", "text": message.text}
        if message.quick_reply is not None:
            data["quickReply"] = _quick_reply(message.quick_reply)
        return data
    if isinstance(message, CarouselMessage):
        return {
            "type": "template",
            "altText": message.alt_text,
            "template": {
                "type": "carousel",
                "columns": [_column(column) for column in message.columns],
            },
        }
    raise TypeError(f"Unsupported outbound message: {type(message).__name__}")


def _action(action: MessageAction) -> dict[str, Any]:
    return {"type": "message", "label": action.label, "text": action.text}


def _quick_reply(quick_reply: QuickReply) -> dict[str, Any]:
    return {"items": [{"type": "action", "action": _action(item)} for item in quick_reply.items]}


def _column(column: CarouselColumn) -> dict[str, Any]:
    data: dict[str, Any] = {
        "title": column.title,
        "text": column.text,
        "actions": [_action(action) for action in column.actions],
    }
    if column.thumbnail_image_url:
        data["thumbnailImageUrl"] = column.thumbnail_image_url
    return data
