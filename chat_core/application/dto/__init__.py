"""DTOs handed to the presentation layer."""

from .user import UserDTO
from .chat_room import ChatRoomDTO
from .message import MessageViewerDTO, TextMessageDTO

__all__ = ["UserDTO", "ChatRoomDTO", "MessageViewerDTO", "TextMessageDTO"]
