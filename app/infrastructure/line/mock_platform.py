from __future__ import annotations

import logging
from typing import Sequence

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import OutboundMessage
from app.infrastructure.line.line_platform import to_line_message


class MockLinePlatform(MessagePlatformPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def reply(self, reply_token: str, messages: Sequence[OutboundMessage]) -> None:
        self._logger.info(
            "Mock reply to LINE",
            extra={"reply_token": reply_token, "messages": [to_line_message(m) for m in messages]},
        )
