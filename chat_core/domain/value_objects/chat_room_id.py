"""
ChatRoomId Value Object - UUID wrapper for chat room identity.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.uuid_value_object import UuidValueObject


@dataclass(frozen=True)
class ChatRoomId(UuidValueObject):
    pass
