"""
Chat room text Value Objects - Name and description.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.string_value_object import StringValueObject


@dataclass(frozen=True)
class ChatRoomName(StringValueObject):
    MIN_LENGTH = 1
    MAX_LENGTH = 100


@dataclass(frozen=True)
class ChatRoomDescription(StringValueObject):
    # empty descriptions are allowed
    MIN_LENGTH = 0
    MAX_LENGTH = 500
