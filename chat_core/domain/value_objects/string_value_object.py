"""
StringValueObject - Base for length-bounded string wrappers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class StringValueObject:
    value: str

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[Optional[int]] = None

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"{type(self).__name__} must be a string, got {type(self.value).__name__}"
            )
        self._ensure_length(self.value)

    def _ensure_length(self, value: str) -> None:
        length = len(value)
        if length < self.MIN_LENGTH:
            raise InvalidArgumentError(
                f"{type(self).__name__} must have at least {self.MIN_LENGTH} characters"
            )
        if self.MAX_LENGTH is not None and length > self.MAX_LENGTH:
            raise InvalidArgumentError(
                f"{type(self).__name__} cannot exceed {self.MAX_LENGTH} characters"
            )

    @classmethod
    def create(cls, value: str) -> StringValueObject:
        return cls(value)

    def __str__(self) -> str:
        return self.value
