"""
REPOSITORY PORTS - One async ABC per aggregate

Implementations rebuild entities with restore(...) or build() + set_*()
and must return None for unknown ids rather than raising.
"""

from chat_core.domain.ports.repositories.user_repository import UserRepository
from chat_core.domain.ports.repositories.chat_room_repository import ChatRoomRepository
from chat_core.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "UserRepository",
    "ChatRoomRepository",
    "MessageRepository",
]
