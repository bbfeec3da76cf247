"""Shared checks for command and query handlers."""

from typing import Optional, TypeVar

from chat_core.domain.entities import ChatRoom
from chat_core.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chat_core.domain.value_objects import UuidValueObject

E = TypeVar("E")


def require_found(entity: Optional[E], label: str, entity_id: UuidValueObject) -> E:
    if entity is None:
        raise EntityNotFoundError(f"{label} {entity_id.value} not found")
    return entity


def require_live_chat_room(
    chat_room: Optional[ChatRoom], chat_room_id: UuidValueObject
) -> ChatRoom:
    """Deleted chat rooms are reported as missing."""
    chat_room = require_found(chat_room, "Chat room", chat_room_id)
    if chat_room.is_deleted:
        raise EntityNotFoundError(f"Chat room {chat_room_id.value} not found")
    return chat_room


def require_member(chat_room: ChatRoom, user_id: UuidValueObject) -> None:
    if not chat_room.has_member(user_id.value):
        raise AccessDeniedError(
            f"User {user_id.value} has no access to chat room {chat_room.id}"
        )
