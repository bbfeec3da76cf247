"""
Chat room conflicts - Raised when a chat room business rule is violated.
Maps to: HTTP 409 Conflict
"""


class DomainConflictError(Exception):
    """Base class for expected business-rule conflicts."""

    default_message = "Domain conflict"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class UserAlreadyInChatRoomError(DomainConflictError):
    default_message = "User is already a member of the chat room"


class UserDoesNotPertainToChatRoomError(DomainConflictError):
    default_message = "User is not a member of the chat room"


class MessageAlreadyInChatRoomError(DomainConflictError):
    default_message = "Message is already present in the chat room"


class ChatRoomCannotBeEmptyError(DomainConflictError):
    default_message = "Chat room cannot be empty"
