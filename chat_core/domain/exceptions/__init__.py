"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by the presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from chat_core.domain.exceptions.invalid_argument import InvalidArgumentError
from chat_core.domain.exceptions.logic_error import DomainLogicError
from chat_core.domain.exceptions.chat_room import (
    DomainConflictError,
    ChatRoomCannotBeEmptyError,
    MessageAlreadyInChatRoomError,
    UserAlreadyInChatRoomError,
    UserDoesNotPertainToChatRoomError,
)
from chat_core.domain.exceptions.creation import (
    EntityCreationError,
    ChatRoomCreationError,
    MessageCreationError,
    UserCreationError,
)
from chat_core.domain.exceptions.entity_not_found import EntityNotFoundError
from chat_core.domain.exceptions.access_denied import AccessDeniedError

__all__ = [
    "InvalidArgumentError",
    "DomainLogicError",
    "DomainConflictError",
    "ChatRoomCannotBeEmptyError",
    "MessageAlreadyInChatRoomError",
    "UserAlreadyInChatRoomError",
    "UserDoesNotPertainToChatRoomError",
    "EntityCreationError",
    "ChatRoomCreationError",
    "MessageCreationError",
    "UserCreationError",
    "EntityNotFoundError",
    "AccessDeniedError",
]
