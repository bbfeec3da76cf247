"""
User name Value Objects - Given name and first last name.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.string_value_object import StringValueObject


@dataclass(frozen=True)
class UserName(StringValueObject):
    MIN_LENGTH = 1
    MAX_LENGTH = 255


@dataclass(frozen=True)
class UserFirstLastName(StringValueObject):
    MIN_LENGTH = 1
    MAX_LENGTH = 255
