"""
Message Repository Port - Interface for message persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_core.domain.entities.text_message import TextMessage
from chat_core.domain.value_objects import MessageId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[TextMessage]: ...

    @abstractmethod
    async def get_many(
        self, message_ids: list[MessageId], limit: int = 50
    ) -> list[TextMessage]:
        """
        The latest `limit` live messages among `message_ids`, oldest first.

        `message_ids` is in chat order (oldest first). Soft-deleted messages
        are skipped before the limit is applied, so older live messages fill
        the page.
        """
        ...

    @abstractmethod
    async def save(self, message: TextMessage) -> None: ...
