"""Chat room commands."""

from .create_chat_room import CreateChatRoomCommand, CreateChatRoomHandler
from .add_member import AddChatRoomMemberCommand, AddChatRoomMemberHandler
from .remove_member import RemoveChatRoomMemberCommand, RemoveChatRoomMemberHandler
from .mark_chat_room_as_viewed import (
    MarkChatRoomAsViewedCommand,
    MarkChatRoomAsViewedHandler,
)

__all__ = [
    "CreateChatRoomCommand",
    "CreateChatRoomHandler",
    "AddChatRoomMemberCommand",
    "AddChatRoomMemberHandler",
    "RemoveChatRoomMemberCommand",
    "RemoveChatRoomMemberHandler",
    "MarkChatRoomAsViewedCommand",
    "MarkChatRoomAsViewedHandler",
]
