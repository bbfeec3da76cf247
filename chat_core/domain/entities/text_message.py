"""
TextMessage Entity - A plain text message written by a chat room member.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from chat_core.domain.entities.entity import utc_now
from chat_core.domain.entities.message import Message
from chat_core.domain.exceptions import MessageCreationError
from chat_core.domain.value_objects import MessageContent, MessageId, MessageTypeEnum


class TextMessage(Message):
    TYPE = MessageTypeEnum.TEXT

    def __init__(self):
        super().__init__()
        self._content: Optional[MessageContent] = None

    def set_content(self, content: str) -> TextMessage:
        self._content = MessageContent(self._trim(content))
        return self

    @property
    def content(self) -> str:
        return self._require("content").value

    def update_content(self, content: str) -> None:
        self.set_content(content)
        self._perform_update()

    @classmethod
    def create(cls, user_id: str, text: str) -> TextMessage:
        """Factory method to create an unsent TextMessage with no viewers."""
        message_id = cls._generate_id(MessageId, MessageCreationError)
        now = utc_now()
        return (
            cls.build()
            .set_id(message_id.value)
            .set_user_id(user_id)
            .set_content(text)
            .set_is_sent(False)
            .set_viewers([])
            .set_created_at(now)
            .set_updated_at(now)
            .set_deleted_at(None)
        )

    @classmethod
    def restore(
        cls,
        *,
        id: str,
        user_id: str,
        content: str,
        is_sent: bool,
        viewers: list[tuple[str, datetime]],
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ) -> TextMessage:
        """Rebuild a stored text message from primitives, validating every field."""
        return (
            cls.build()
            .set_id(id)
            .set_user_id(user_id)
            .set_content(content)
            .set_is_sent(is_sent)
            .set_viewers(viewers)
            .set_created_at(created_at)
            .set_updated_at(updated_at)
            .set_deleted_at(deleted_at)
        )
