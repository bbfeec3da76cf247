"""
Creation errors - Raised when an entity id cannot be generated.
Maps to: HTTP 503 Service Unavailable
"""


class EntityCreationError(Exception):
    """Raised when id generation keeps failing during entity creation."""

    default_message = "Entity could not be created"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UserCreationError(EntityCreationError):
    default_message = "User could not be created"


class ChatRoomCreationError(EntityCreationError):
    default_message = "Chat room could not be created"


class MessageCreationError(EntityCreationError):
    default_message = "Message could not be created"
