"""
DateTime value objects - Timestamps carried by entities.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chat_core.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class DateTimeValueObject:
    value: datetime

    def __post_init__(self):
        if not isinstance(self.value, datetime):
            raise InvalidArgumentError(
                f"{type(self).__name__} must be a datetime, got {type(self.value).__name__}"
            )

    @classmethod
    def create(cls, value: datetime) -> DateTimeValueObject:
        return cls(value)

    def format(self, fmt: str) -> str:
        return self.value.strftime(fmt)

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class OptionalDateTimeValueObject:
    """A timestamp that may be absent, e.g. deleted_at of a live entity."""

    value: Optional[datetime] = None

    def __post_init__(self):
        if self.value is not None and not isinstance(self.value, datetime):
            raise InvalidArgumentError(
                f"{type(self).__name__} must be a datetime or None, got {type(self.value).__name__}"
            )

    @classmethod
    def create(cls, value: Optional[datetime]) -> OptionalDateTimeValueObject:
        return cls(value)

    @property
    def is_null(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return "" if self.value is None else self.value.isoformat()
