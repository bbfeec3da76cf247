"""
EnumValueObject - Base for wrappers around a closed set of values.

Subclasses point ENUM at an Enum class. Either a member or its raw value is
accepted; the stored value is always the member.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class EnumValueObject:
    value: Enum

    ENUM: ClassVar[type[Enum]]

    def __post_init__(self):
        if isinstance(self.value, self.ENUM):
            return
        try:
            member = self.ENUM(self.value)
        except ValueError:
            allowed = ", ".join(str(m.value) for m in self.ENUM)
            raise InvalidArgumentError(
                f"Invalid {type(self).__name__}: {self.value!r}. Must be one of {allowed}."
            ) from None
        object.__setattr__(self, "value", member)

    @classmethod
    def create(cls, value: Any) -> EnumValueObject:
        return cls(value)

    @classmethod
    def values(cls) -> list[Any]:
        return [member.value for member in cls.ENUM]

    def __str__(self) -> str:
        return str(self.value.value)
