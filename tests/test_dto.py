"""Tests for the pydantic DTOs."""

from datetime import datetime, timezone
from uuid import uuid4

from chat_core.application.dto import ChatRoomDTO, TextMessageDTO, UserDTO


class TestUserDTO:
    def test_from_entity(self, make_user):
        user = make_user(name="Juan", first_last_name="Forner", second_last_name=None)

        dto = UserDTO.from_entity(user)

        assert dto.id == user.id
        assert dto.full_name == "Juan Forner"
        assert dto.second_last_name is None
        assert dto.model_dump()["email"] == user.email


class TestChatRoomDTO:
    def test_from_entity(self, make_chat_room):
        creator = str(uuid4())
        chat_room = make_chat_room(creator_id=creator, members=[str(uuid4())], messages=[])

        dto = ChatRoomDTO.from_entity(chat_room)

        assert dto.members[0] == creator
        assert len(dto.members) == 2
        assert dto.messages_count == 0
        assert dto.deleted_at is None


class TestTextMessageDTO:
    def test_from_entity(self, make_text_message):
        viewer = str(uuid4())
        at = datetime(2024, 5, 5, tzinfo=timezone.utc)
        message = make_text_message(content="hello", viewers=[(viewer, at)])

        dto = TextMessageDTO.from_entity(message)

        assert dto.type == "text"
        assert dto.content == "hello"
        assert dto.viewers[0].user_id == viewer
        assert dto.viewers[0].at == at
        assert dto.model_dump(mode="json")["viewers"][0]["user_id"] == viewer
