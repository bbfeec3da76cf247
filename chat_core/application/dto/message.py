"""Message DTOs for API responses."""

from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel

from chat_core.domain.entities import TextMessage


class MessageViewerDTO(BaseModel):
    user_id: str
    at: datetime


class TextMessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    user_id: str
    type: str
    content: str
    is_sent: bool
    viewers: list[MessageViewerDTO]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, message: TextMessage) -> TextMessageDTO:
        return cls(
            id=message.id,
            user_id=message.user_id,
            type=message.type.value,
            content=message.content,
            is_sent=message.is_sent,
            viewers=[MessageViewerDTO(**viewer) for viewer in message.viewers],
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
