"""
BoolValueObject - Base for boolean flags.
"""

from __future__ import annotations
from dataclasses import dataclass

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class BoolValueObject:
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise InvalidArgumentError(
                f"{type(self).__name__} must be a boolean, got {self.value!r}"
            )

    @classmethod
    def create(cls, value: bool) -> BoolValueObject:
        return cls(value)

    def __bool__(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return str(self.value).lower()
