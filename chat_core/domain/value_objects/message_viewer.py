"""
MessageViewer Value Object - A user who saw a message, and when.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from chat_core.domain.exceptions import InvalidArgumentError
from chat_core.domain.value_objects.date_time import DateTimeValueObject
from chat_core.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class MessageViewer:
    user_id: UserId
    at: DateTimeValueObject

    def __post_init__(self):
        if not isinstance(self.user_id, UserId):
            raise InvalidArgumentError("MessageViewer.user_id must be a UserId")
        if not isinstance(self.at, DateTimeValueObject):
            raise InvalidArgumentError("MessageViewer.at must be a DateTimeValueObject")

    @classmethod
    def create(cls, user_id: str, at: datetime) -> MessageViewer:
        return cls(UserId(user_id), DateTimeValueObject(at))

    def to_primitives(self) -> dict:
        return {"user_id": self.user_id.value, "at": self.at.value}
