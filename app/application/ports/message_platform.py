from abc import ABC, abstractmethod
from typing import Sequence

from app.domain.entities.message import OutboundMessage


class MessagePlatformPort(ABC):
    @abstractmethod
    def reply(self, reply_token: str, messages: Sequence[OutboundMessage]) -> None:
        """
        Deliver messages as the reply to the event that issued `reply_token`.

        Raises on any transport or platform failure; the token is single use.
        """
        raise NotImplementedError
