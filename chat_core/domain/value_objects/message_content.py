"""
MessageContent Value Object - Body of a text message.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.string_value_object import StringValueObject


@dataclass(frozen=True)
class MessageContent(StringValueObject):
    MIN_LENGTH = 1
    MAX_LENGTH = 1500
