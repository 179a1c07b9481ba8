"""
Tests for LINE wire serialization and reply delivery.
"""

from __future__ import annotations

import json

import httpx
import pytest

from app.application.exceptions import DeliveryError
from app.application.use_cases.send_reply import SendReplyUseCase
from app.infrastructure.line.line_client import LineMessagingClient
from app.infrastructure.line.line_platform import LinePlatform, to_line_message


def test_text_message_with_quick_reply(composer):
    [message] = composer.greeting()
    data = to_line_message(message)

    assert data["type"] == "text"
    assert data["text"] == message.text
    items = data["quickReply"]["items"]
    assert len(items) == 4
    assert items[0] == {"type": "action", "action": {"type": "message", "label": "สุ่มหนัง", "text": "สุ่มหนัง"}}


def test_carousel_message(composer, movie):
    carousel, _ = composer.movie_carousel(movie)
    data = to_line_message(carousel)

    assert data["type"] == "template"
    assert data["altText"] == "ส่งหนังให้คุณ"
    assert data["template"]["type"] == "carousel"
    columns = data["template"]["columns"]
    assert len(columns) == 2
    assert columns[0] == {
        "thumbnailImageUrl": "https://image.tmdb.org/t/p/w500/x.jpg",
        "title": "X",
        "text": "  ",
        "actions": [{"type": "message", "label": "เรื่องย่อ", "text": "ขอเรื่องย่อหน่อย"}],
    }


def test_unsupported_message_type():
    with pytest.raises(TypeError):
        to_line_message("plain string")


def test_client_posts_reply_with_bearer_token(composer):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={})

    client = LineMessagingClient(
        channel_token="tok",
        base_url="https://api.line.me/",
        transport=httpx.MockTransport(handler),
    )
    LinePlatform(client=client).reply("rt-1", composer.greeting())

    [request] = requests
    assert request.method == "POST"
    assert str(request.url) == "https://api.line.me/v2/bot/message/reply"
    assert request.headers["Authorization"] == "Bearer tok"
    body = json.loads(request.content)
    assert body["replyToken"] == "rt-1"
    assert body["messages"][0]["type"] == "text"


def test_rejected_reply_becomes_delivery_error(composer):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "Invalid reply token"})

    client = LineMessagingClient(
        channel_token="tok",
        base_url="https://api.line.me",
        transport=httpx.MockTransport(handler),
    )
    send_reply = SendReplyUseCase(platform=LinePlatform(client=client))

    with pytest.raises(DeliveryError) as exc_info:
        send_reply.execute("rt-1", composer.greeting())
    assert exc_info.value.status == 400


def test_unreachable_platform_becomes_delivery_error(composer):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = LineMessagingClient(
        channel_token="tok",
        base_url="https://api.line.me",
        transport=httpx.MockTransport(handler),
    )
    send_reply = SendReplyUseCase(platform=LinePlatform(client=client))

    with pytest.raises(DeliveryError) as exc_info:
        send_reply.execute("rt-1", composer.greeting())
    assert exc_info.value.status is None
