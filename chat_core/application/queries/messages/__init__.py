"""Message queries."""

from .list_chat_room_messages import (
    ListChatRoomMessagesQuery,
    ListChatRoomMessagesHandler,
)

__all__ = ["ListChatRoomMessagesQuery", "ListChatRoomMessagesHandler"]
