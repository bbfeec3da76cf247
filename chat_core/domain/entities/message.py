"""
Message Entity - Fields shared by every kind of chat message.

Subclasses fix the message type and add their own body (see TextMessage).
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, ClassVar, Optional

from chat_core.domain.collections import TypedCollection
from chat_core.domain.exceptions import DomainLogicError
from chat_core.domain.entities.entity import Entity, utc_now
from chat_core.domain.value_objects import (
    DateTimeValueObject,
    MessageId,
    MessageIsSent,
    MessageType,
    MessageTypeEnum,
    MessageViewer,
    OptionalDateTimeValueObject,
    UserId,
)


def _viewer_collection() -> TypedCollection[MessageViewer]:
    return TypedCollection(MessageViewer, key=lambda viewer: viewer.user_id.value)


class Message(Entity):
    LABEL = "Message"
    # Concrete subclasses fix this; the base class cannot be instantiated
    TYPE: ClassVar[Optional[MessageTypeEnum]] = None

    def __init__(self):
        super().__init__()
        self._id: Optional[MessageId] = None
        self._user_id: Optional[UserId] = None
        if self.TYPE is None:
            raise DomainLogicError(f"{self.LABEL}'s type is not set")
        self._type = MessageType(self.TYPE)
        self._is_sent: Optional[MessageIsSent] = None
        self._viewers: Optional[TypedCollection[MessageViewer]] = None
        self._created_at: Optional[DateTimeValueObject] = None
        self._deleted_at: Optional[OptionalDateTimeValueObject] = None

    # ==================== SETTERS ====================

    def set_id(self, id: str) -> Message:
        self._id = MessageId(id)
        return self

    def set_user_id(self, user_id: str) -> Message:
        self._user_id = UserId(user_id)
        return self

    def set_is_sent(self, is_sent: bool) -> Message:
        self._is_sent = MessageIsSent(is_sent)
        return self

    def set_viewers(self, viewers: list[tuple[str, datetime]]) -> Message:
        """Viewers as (user id, seen at) pairs, oldest first."""
        collection = _viewer_collection()
        for user_id, at in viewers:
            collection.append(MessageViewer.create(user_id, at))
        self._viewers = collection
        return self

    def set_created_at(self, created_at: datetime) -> Message:
        self._created_at = DateTimeValueObject(created_at)
        return self

    def set_updated_at(self, updated_at: datetime) -> Message:
        self._updated_at = DateTimeValueObject(updated_at)
        return self

    def set_deleted_at(self, deleted_at: Optional[datetime]) -> Message:
        self._deleted_at = OptionalDateTimeValueObject(deleted_at)
        return self

    # ==================== GETTERS ====================

    @property
    def id(self) -> str:
        return self._require("id").value

    @property
    def user_id(self) -> str:
        return self._require("user_id").value

    @property
    def type(self) -> MessageTypeEnum:
        return self._type.value

    @property
    def is_sent(self) -> bool:
        return self._require("is_sent").value

    @property
    def viewers(self) -> list[dict[str, Any]]:
        return self._require("viewers").map(MessageViewer.to_primitives)

    @property
    def created_at(self) -> datetime:
        return self._require("created_at").value

    @property
    def updated_at(self) -> datetime:
        return self._require("updated_at").value

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._require("deleted_at").value

    @property
    def is_deleted(self) -> bool:
        return not self._require("deleted_at").is_null

    # ==================== BEHAVIOR ====================

    def has_been_viewed_by(self, user_id: str) -> bool:
        return self._require("viewers").contains(UserId(user_id).value)

    def mark_as_viewed(self, user_id: str, at: Optional[datetime] = None) -> None:
        # Repeated views by the same user are all kept, oldest first
        self._require("viewers").append(MessageViewer.create(user_id, at or utc_now()))

    def mark_as_sent(self) -> None:
        self._is_sent = MessageIsSent(True)
        self._perform_update()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, user_id={self._user_id})"
