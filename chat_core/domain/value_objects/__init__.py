"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation, raising InvalidArgumentError
- Pure Python (no framework dependencies)
"""

from chat_core.domain.value_objects.string_value_object import StringValueObject
from chat_core.domain.value_objects.uuid_value_object import UuidValueObject
from chat_core.domain.value_objects.bool_value_object import BoolValueObject
from chat_core.domain.value_objects.enum_value_object import EnumValueObject
from chat_core.domain.value_objects.date_time import (
    DateTimeValueObject,
    OptionalDateTimeValueObject,
)
from chat_core.domain.value_objects.user_id import UserId
from chat_core.domain.value_objects.message_id import MessageId
from chat_core.domain.value_objects.chat_room_id import ChatRoomId
from chat_core.domain.value_objects.user_name import UserName, UserFirstLastName
from chat_core.domain.value_objects.user_second_last_name import UserSecondLastName
from chat_core.domain.value_objects.user_email import UserEmail
from chat_core.domain.value_objects.user_can_exec_commands import UserCanExecCommands
from chat_core.domain.value_objects.chat_room_name import (
    ChatRoomName,
    ChatRoomDescription,
)
from chat_core.domain.value_objects.message_content import MessageContent
from chat_core.domain.value_objects.message_is_sent import MessageIsSent
from chat_core.domain.value_objects.message_type import MessageType, MessageTypeEnum
from chat_core.domain.value_objects.message_viewer import MessageViewer

__all__ = [
    "StringValueObject",
    "UuidValueObject",
    "BoolValueObject",
    "EnumValueObject",
    "DateTimeValueObject",
    "OptionalDateTimeValueObject",
    "UserId",
    "MessageId",
    "ChatRoomId",
    "UserName",
    "UserFirstLastName",
    "UserSecondLastName",
    "UserEmail",
    "UserCanExecCommands",
    "ChatRoomName",
    "ChatRoomDescription",
    "MessageContent",
    "MessageIsSent",
    "MessageType",
    "MessageTypeEnum",
    "MessageViewer",
]
