from __future__ import annotations

import logging
from typing import Sequence

import httpx

from app.application.exceptions import DeliveryError
from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import OutboundMessage


class SendReplyUseCase:
    def __init__(self, platform: MessagePlatformPort) -> None:
        self._platform = platform
        self._logger = logging.getLogger(__name__)

    def execute(self, reply_token: str, messages: Sequence[OutboundMessage]) -> None:
        """Send a reply. Raises DeliveryError if the platform refuses or is unreachable."""
        try:
            self._platform.reply(reply_token=reply_token, messages=messages)
        except DeliveryError:
            raise
        except httpx.HTTPStatusError as e:
            raise DeliveryError(str(e), status=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise DeliveryError(str(e)) from e
        self._logger.info("Reply sent", extra={"reply_token": reply_token, "message_count": len(messages)})
