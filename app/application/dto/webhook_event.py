from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app.application.exceptions import WebhookValidationError
from app.domain.entities.message import InboundEvent


GLOBAL_SESSION_KEY = "global"


class WebhookEventDTO(BaseModel):
    destination: str | None = None
    events: list[dict[str, Any]] = Field(...)

    def extract_events(self) -> list[InboundEvent]:
        """Reduce raw events; raises WebhookValidationError on a wrongly shaped event."""
        extracted: list[InboundEvent] = []
        for raw in self.events:
            event_type = str(raw.get("type") or "")
            reply_token = raw.get("replyToken")
            session_key = _session_key(_object_field(raw, "source"))

            kind = "other"
            text = ""
            message_type = None
            if event_type == "follow":
                kind = "follow"
            elif event_type == "message":
                message = _object_field(raw, "message")
                message_type = message.get("type")
                if message_type == "text" and isinstance(message.get("text"), str):
                    kind = "text"
                    text = message["text"]

            extracted.append(
                InboundEvent(
                    kind=kind,
                    event_type=event_type,
                    reply_token=str(reply_token) if reply_token else None,
                    session_key=session_key,
                    text=text,
                    message_type=message_type,
                )
            )
        return extracted


def _object_field(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise WebhookValidationError(f"event field {key!r} must be an object")
    return value


def _session_key(source: dict[str, Any]) -> str:
    # Group and room chats share one slot per chat, not per speaker.
    for key in ("groupId", "roomId", "userId"):
        value = source.get(key)
        if value:
            return f"{key}:{value}"
    return GLOBAL_SESSION_KEY
