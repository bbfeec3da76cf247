"""
UserId Value Object - UUID wrapper for user identity.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.uuid_value_object import UuidValueObject


@dataclass(frozen=True)
class UserId(UuidValueObject):
    pass
