"""Chat room queries."""

from .get_chat_room import GetChatRoomQuery, GetChatRoomHandler

__all__ = ["GetChatRoomQuery", "GetChatRoomHandler"]
