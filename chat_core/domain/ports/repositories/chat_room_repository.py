"""
ChatRoom Repository Port - Interface for chat room persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_core.domain.entities.chat_room import ChatRoom
from chat_core.domain.value_objects import ChatRoomId


class ChatRoomRepository(ABC):
    @abstractmethod
    async def get_by_id(self, chat_room_id: ChatRoomId) -> Optional[ChatRoom]: ...

    @abstractmethod
    async def save(self, chat_room: ChatRoom) -> None: ...
