"""
UuidValueObject - Base for UUID-shaped identifiers.

Identifiers are stored as canonical lowercase strings so equality is plain
string equality. generate() draws a random (v4) UUID; it can raise OSError
when the OS entropy source is unavailable.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID, uuid4

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class UuidValueObject:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidArgumentError(f"{type(self).__name__} cannot be empty")
        if not self._is_valid_uuid(self.value):
            raise InvalidArgumentError(
                f"Invalid {type(self).__name__} (UUID): {self.value}"
            )
        # Frozen dataclass: normalize in place so "ABC..." and "abc..." are one id
        object.__setattr__(self, "value", self.value.lower())

    @staticmethod
    def _is_valid_uuid(value: str) -> bool:
        """Check if string is a canonical UUID."""
        try:
            return str(UUID(value)) == value.lower()
        except ValueError:
            return False

    @classmethod
    def create(cls, value: str) -> UuidValueObject:
        return cls(value)

    @classmethod
    def generate(cls) -> UuidValueObject:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
