"""Chat room DTOs for API responses."""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chat_core.domain.entities import ChatRoom


class ChatRoomDTO(BaseModel):
    id: str
    name: str
    description: str
    creator_id: str
    members: list[str]
    messages_count: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, chat_room: ChatRoom) -> ChatRoomDTO:
        return cls(
            id=chat_room.id,
            name=chat_room.name,
            description=chat_room.description,
            creator_id=chat_room.creator_id,
            members=chat_room.members,
            messages_count=chat_room.messages_count,
            created_at=chat_room.created_at,
            updated_at=chat_room.updated_at,
            deleted_at=chat_room.deleted_at,
        )
