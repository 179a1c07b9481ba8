from __future__ import annotations

import logging
from typing import Any

import httpx


REPLY_PATH = "/v2/bot/message/reply"


class LineMessagingClient:
    def __init__(self, channel_token: str, base_url: str, timeout: float = 10.0, transport: httpx.BaseTransport | None = None) -> None:
        self._channel_token = channel_token
        self._reply_endpoint = base_url.rstrip("/") + REPLY_PATH
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def reply(self, reply_token: str, messages: list[dict[str, Any]]) -> None:
        payload = {"replyToken": reply_token, "messages": messages}
        headers = {"Authorization": f"Bearer {self._channel_token}"}
        resp = self._client.post(self._reply_endpoint, headers=headers, json=payload)
        if resp.status_code >= 400:
            try:
                error_json = resp.json()
                error_message = error_json.get("message")
                error_details = error_json.get("details")
            except (ValueError, AttributeError):
                error_message = resp.text
                error_details = None

            self._logger.error(
                "LINE reply failed",
                extra={
                    "status": resp.status_code,
                    "error": error_message,
                    "details": error_details,
                    "reply_token": reply_token,
                    "message_count": len(messages),
                },
            )
            resp.raise_for_status()

    def close(self) -> None:
        self._client.close()
