"""
Shared fixtures: entity factories and in-memory port fakes.

Factories take keyword overrides and fill every other field with valid
random data, so a test only spells out what it checks.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import pytest

from chat_core.domain.entities import ChatRoom, TextMessage, User
from chat_core.domain.events import Event
from chat_core.domain.ports import EventPublisherPort
from chat_core.domain.ports.repositories import (
    ChatRoomRepository,
    MessageRepository,
    UserRepository,
)
from chat_core.domain.value_objects import ChatRoomId, MessageId, UserId

_UNSET = object()


def new_id() -> str:
    return str(uuid4())


def _suffix() -> str:
    return uuid4().hex[:8]


# ==================== ENTITY FACTORIES ====================


@pytest.fixture()
def make_user():
    def _make_user(
        id: Optional[str] = None,
        name: Optional[str] = None,
        first_last_name: Optional[str] = None,
        second_last_name=_UNSET,
        email: Optional[str] = None,
        can_exec_commands: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> User:
        now = datetime.now(timezone.utc)
        if second_last_name is _UNSET:
            second_last_name = f"Manu {_suffix()}"
        return (
            User.build()
            .set_id(id or new_id())
            .set_name(name or f"Jose {_suffix()}")
            .set_first_last_name(first_last_name or f"Revuelta {_suffix()}")
            .set_second_last_name(second_last_name)
            .set_email(email or f"{_suffix()}@test.com")
            .set_can_exec_commands(can_exec_commands)
            .set_created_at(created_at or now)
            .set_updated_at(updated_at or now)
        )

    return _make_user


@pytest.fixture()
def make_text_message():
    def _make_text_message(
        id: Optional[str] = None,
        user_id: Optional[str] = None,
        viewers: Optional[list] = None,
        is_sent: bool = True,
        content: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
    ) -> TextMessage:
        now = datetime.now(timezone.utc)
        if viewers is None:
            viewers = [(new_id(), now) for _ in range(10)]
        return (
            TextMessage.build()
            .set_id(id or new_id())
            .set_user_id(user_id or new_id())
            .set_viewers(viewers)
            .set_is_sent(is_sent)
            .set_content(content or f"Message content {_suffix()}")
            .set_created_at(created_at or now)
            .set_updated_at(updated_at or now)
            .set_deleted_at(deleted_at)
        )

    return _make_text_message


@pytest.fixture()
def make_chat_room():
    def _make_chat_room(
        id: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
        members: Optional[list[str]] = None,
        messages: Optional[list[str]] = None,
        creator_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        deleted_at: Optional[datetime] = None,
    ) -> ChatRoom:
        now = datetime.now(timezone.utc)
        if members is None:
            members = [new_id() for _ in range(10)]
        if messages is None:
            messages = [new_id() for _ in range(10)]
        return (
            ChatRoom.build()
            .set_id(id or new_id())
            .set_name(name or "Chat de prueba")
            .set_description(description if description is not None else "Descripcion de prueba")
            .set_members(members)
            .set_messages(messages)
            .set_creator_id(creator_id or new_id())
            .set_created_at(created_at or now)
            .set_updated_at(updated_at or now)
            .set_deleted_at(deleted_at)
        )

    return _make_chat_room


# ==================== PORT FAKES ====================


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[str, User] = {}
        self.saved: list[str] = []

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self.users.get(user_id.value)

    async def save(self, user: User) -> None:
        self.users[user.id] = user
        self.saved.append(user.id)


class InMemoryChatRoomRepository(ChatRoomRepository):
    def __init__(self):
        self.chat_rooms: dict[str, ChatRoom] = {}
        self.saved: list[str] = []

    async def get_by_id(self, chat_room_id: ChatRoomId) -> Optional[ChatRoom]:
        return self.chat_rooms.get(chat_room_id.value)

    async def save(self, chat_room: ChatRoom) -> None:
        self.chat_rooms[chat_room.id] = chat_room
        self.saved.append(chat_room.id)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self.messages: dict[str, TextMessage] = {}
        self.saved: list[str] = []

    async def get_by_id(self, message_id: MessageId) -> Optional[TextMessage]:
        return self.messages.get(message_id.value)

    async def get_many(
        self, message_ids: list[MessageId], limit: int = 50
    ) -> list[TextMessage]:
        live = [
            self.messages[message_id.value]
            for message_id in message_ids
            if message_id.value in self.messages
            and not self.messages[message_id.value].is_deleted
        ]
        return live[-limit:] if limit > 0 else []

    async def save(self, message: TextMessage) -> None:
        self.messages[message.id] = message
        self.saved.append(message.id)


class RecordingEventPublisher(EventPublisherPort):
    def __init__(self):
        self.published: list[Event] = []

    async def publish(self, events: list[Event]) -> None:
        self.published.extend(events)


@pytest.fixture()
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture()
def chat_room_repository():
    return InMemoryChatRoomRepository()


@pytest.fixture()
def message_repository():
    return InMemoryMessageRepository()


@pytest.fixture()
def event_publisher():
    return RecordingEventPublisher()
