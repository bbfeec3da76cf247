"""
UserEmail Value Object - Wraps user email with validation.
"""

from dataclasses import dataclass
import re

from chat_core.domain.exceptions import InvalidArgumentError
from chat_core.domain.value_objects.string_value_object import StringValueObject


@dataclass(frozen=True)
class UserEmail(StringValueObject):
    MIN_LENGTH = 3
    MAX_LENGTH = 255

    _EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __post_init__(self):
        super().__post_init__()
        if not self._EMAIL_PATTERN.match(self.value):
            raise InvalidArgumentError(f"Invalid user email: {self.value}")
