"""
ChatRoom Entity - A group conversation between users.

The creator is a member of the room but is kept apart from the explicit
member collection: members lists the creator first, members_count counts
only the explicit members.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

from chat_core.domain.collections import TypedCollection
from chat_core.domain.entities.entity import Entity, utc_now
from chat_core.domain.events import UserSawChatRoomEvent
from chat_core.domain.exceptions import (
    ChatRoomCannotBeEmptyError,
    ChatRoomCreationError,
    InvalidArgumentError,
    MessageAlreadyInChatRoomError,
    UserAlreadyInChatRoomError,
    UserDoesNotPertainToChatRoomError,
)
from chat_core.domain.value_objects import (
    ChatRoomDescription,
    ChatRoomId,
    ChatRoomName,
    DateTimeValueObject,
    MessageId,
    OptionalDateTimeValueObject,
    UserId,
)


def _member_collection() -> TypedCollection[UserId]:
    return TypedCollection(UserId, key=lambda member: member.value)


def _message_collection() -> TypedCollection[MessageId]:
    return TypedCollection(MessageId, key=lambda message: message.value)


class ChatRoom(Entity):
    LABEL = "ChatRoom"

    def __init__(self):
        super().__init__()
        self._id: Optional[ChatRoomId] = None
        self._name: Optional[ChatRoomName] = None
        self._description: Optional[ChatRoomDescription] = None
        self._creator_id: Optional[UserId] = None
        self._members: Optional[TypedCollection[UserId]] = None
        self._messages: Optional[TypedCollection[MessageId]] = None
        self._created_at: Optional[DateTimeValueObject] = None
        self._deleted_at: Optional[OptionalDateTimeValueObject] = None

    # ==================== SETTERS ====================

    def set_id(self, id: str) -> ChatRoom:
        self._id = ChatRoomId(id)
        return self

    def set_name(self, name: str) -> ChatRoom:
        self._name = ChatRoomName(self._trim(name))
        return self

    def set_description(self, description: str) -> ChatRoom:
        self._description = ChatRoomDescription(self._trim(description))
        return self

    def set_creator_id(self, creator_id: str) -> ChatRoom:
        creator = UserId(creator_id)
        if self._members is not None and self._members.contains(creator):
            raise UserAlreadyInChatRoomError(
                f"Creator {creator} cannot also be listed as a member"
            )
        self._creator_id = creator
        return self

    def set_members(self, members: list[str]) -> ChatRoom:
        """Explicit members; the creator is implicit and must not be listed."""
        if len(members) == 0:
            raise ChatRoomCannotBeEmptyError()

        collection = _member_collection()
        for member in map(UserId, members):
            if collection.contains(member):
                raise UserAlreadyInChatRoomError(f"User {member} is listed twice")
            if member == self._creator_id:
                raise UserAlreadyInChatRoomError(
                    f"Creator {member} cannot also be listed as a member"
                )
            collection.append(member)

        self._members = collection
        return self

    def set_messages(self, messages: list[str]) -> ChatRoom:
        collection = _message_collection()
        for message in map(MessageId, messages):
            if collection.contains(message):
                raise MessageAlreadyInChatRoomError(
                    f"Message {message} is listed twice"
                )
            collection.append(message)

        self._messages = collection
        return self

    def set_created_at(self, created_at: datetime) -> ChatRoom:
        self._created_at = DateTimeValueObject(created_at)
        return self

    def set_updated_at(self, updated_at: datetime) -> ChatRoom:
        self._updated_at = DateTimeValueObject(updated_at)
        return self

    def set_deleted_at(self, deleted_at: Optional[datetime]) -> ChatRoom:
        self._deleted_at = OptionalDateTimeValueObject(deleted_at)
        return self

    # ==================== GETTERS ====================

    @property
    def id(self) -> str:
        return self._require("id").value

    @property
    def name(self) -> str:
        return self._require("name").value

    @property
    def description(self) -> str:
        return self._require("description").value

    @property
    def creator_id(self) -> str:
        return self._require("creator_id").value

    @property
    def members(self) -> list[str]:
        """All member ids, creator first."""
        return [self.creator_id] + self._require("members").keys()

    @property
    def members_count(self) -> int:
        return self._require("members").count()

    @property
    def messages(self) -> list[str]:
        return self._require("messages").keys()

    @property
    def messages_count(self) -> int:
        return self._require("messages").count()

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

    # ==================== MEMBERSHIP ====================

    def has_member(self, user_id: str) -> bool:
        member = UserId(user_id)
        return (
            self._require("members").contains(member)
            or self._require("creator_id") == member
        )

    def has_message(self, message_id: str) -> bool:
        return self._require("messages").contains(MessageId(message_id))

    def add_member(self, user_id: str) -> None:
        members = self._require("members")
        if self.has_member(user_id):
            raise UserAlreadyInChatRoomError(
                f"User {user_id} is already a member of chat room {self._id}"
            )
        members.append(UserId(user_id))

    def remove_member(self, user_id: str) -> None:
        """Remove an explicit member. The creator cannot be removed this way."""
        if not self._require("members").delete(UserId(user_id)):
            raise UserDoesNotPertainToChatRoomError(
                f"User {user_id} is not a member of chat room {self._id}"
            )

    def add_message(self, message_id: str) -> None:
        messages = self._require("messages")
        if self.has_message(message_id):
            raise MessageAlreadyInChatRoomError(
                f"Message {message_id} is already in chat room {self._id}"
            )
        messages.append(MessageId(message_id))

    def mark_messages_as_viewed(
        self, user_id: str, at: Optional[datetime] = None
    ) -> None:
        if not self.has_member(user_id):
            raise UserDoesNotPertainToChatRoomError(
                f"User {user_id} is not a member of chat room {self._id}"
            )
        self._record(
            UserSawChatRoomEvent(user=UserId(user_id).value, at=at or utc_now())
        )

    # ==================== UPDATE ====================

    def update_name(self, name: str, is_bulk_update: bool = False) -> ChatRoom:
        self.set_name(name)
        if not is_bulk_update:
            self._perform_update()
        return self

    def update_description(
        self, description: str, is_bulk_update: bool = False
    ) -> ChatRoom:
        self.set_description(description)
        if not is_bulk_update:
            self._perform_update()
        return self

    def bulk_update(
        self, name: Optional[str] = None, description: Optional[str] = None
    ) -> ChatRoom:
        if self._all_parameters_are_none(name, description):
            raise InvalidArgumentError("All parameters cannot be null.")

        if name is not None:
            self.update_name(name, is_bulk_update=True)
        if description is not None:
            self.update_description(description, is_bulk_update=True)

        self._perform_update()
        return self

    # ==================== FACTORIES ====================

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        creator_id: str,
        members: list[str],
    ) -> ChatRoom:
        """Factory method to create a new ChatRoom with a generated ID and no messages."""
        chat_room_id = cls._generate_id(ChatRoomId, ChatRoomCreationError)
        now = utc_now()
        return (
            cls.build()
            .set_id(chat_room_id.value)
            .set_name(name)
            .set_description(description)
            .set_creator_id(creator_id)
            .set_members(members)
            .set_messages([])
            .set_created_at(now)
            .set_updated_at(now)
            .set_deleted_at(None)
        )

    @classmethod
    def restore(
        cls,
        *,
        id: str,
        name: str,
        description: str,
        creator_id: str,
        members: list[str],
        messages: list[str],
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ) -> ChatRoom:
        """Rebuild a stored chat room from primitives, validating every field."""
        return (
            cls.build()
            .set_id(id)
            .set_name(name)
            .set_description(description)
            .set_creator_id(creator_id)
            .set_members(members)
            .set_messages(messages)
            .set_created_at(created_at)
            .set_updated_at(updated_at)
            .set_deleted_at(deleted_at)
        )

    def __repr__(self) -> str:
        return f"ChatRoom(id={self._id}, name={self._name})"
