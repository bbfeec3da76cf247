"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.uuid_value_object import UuidValueObject


@dataclass(frozen=True)
class MessageId(UuidValueObject):
    pass
