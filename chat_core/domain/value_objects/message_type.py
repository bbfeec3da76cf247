"""
MessageType Value Object - Kind of message stored in a chat room.
"""

from dataclasses import dataclass
from enum import Enum

from chat_core.domain.value_objects.enum_value_object import EnumValueObject


class MessageTypeEnum(str, Enum):
    TEXT = "text"


@dataclass(frozen=True)
class MessageType(EnumValueObject):
    ENUM = MessageTypeEnum

    @property
    def is_text(self) -> bool:
        return self.value is MessageTypeEnum.TEXT
