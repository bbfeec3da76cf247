"""
MessageIsSent Value Object
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.bool_value_object import BoolValueObject


@dataclass(frozen=True)
class MessageIsSent(BoolValueObject):
    pass
