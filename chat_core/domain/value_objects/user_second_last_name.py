"""
UserSecondLastName Value Object - Optional second last name.

None means the user has no second last name. An empty string is rejected,
callers must pass None instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class UserSecondLastName:
    value: Optional[str] = None

    MIN_LENGTH = 1
    MAX_LENGTH = 255

    def __post_init__(self):
        if self.value is None:
            return
        if not isinstance(self.value, str):
            raise InvalidArgumentError("UserSecondLastName must be a string or None")
        if not self.value:
            raise InvalidArgumentError("Value cannot be empty.")
        if len(self.value) > self.MAX_LENGTH:
            raise InvalidArgumentError(
                f"UserSecondLastName cannot exceed {self.MAX_LENGTH} characters"
            )

    @classmethod
    def create(cls, value: Optional[str]) -> UserSecondLastName:
        return cls(value)

    @property
    def is_null(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return self.value or ""
