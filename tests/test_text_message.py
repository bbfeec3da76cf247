"""Unit tests for the TextMessage entity."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from chat_core.domain.entities import Message, TextMessage
from chat_core.domain.exceptions import DomainLogicError, InvalidArgumentError
from chat_core.domain.value_objects import MessageTypeEnum


def new_id() -> str:
    return str(uuid4())


class TestGetters:
    def test_get_id_and_author(self, make_text_message):
        message_id, user_id = new_id(), new_id()
        message = make_text_message(id=message_id, user_id=user_id)
        assert message.id == message_id
        assert message.user_id == user_id

    def test_type_is_text_without_setting_it(self):
        assert TextMessage.build().type is MessageTypeEnum.TEXT

    def test_base_message_cannot_be_built(self):
        with pytest.raises(DomainLogicError, match="Message's type is not set"):
            Message.build()

    def test_get_content(self, make_text_message):
        assert make_text_message(content="hola").content == "hola"

    def test_get_viewers(self, make_text_message):
        at = datetime(2024, 2, 2, tzinfo=timezone.utc)
        viewers = [(new_id(), at), (new_id(), at)]

        message = make_text_message(viewers=viewers)

        assert message.viewers == [{"user_id": u, "at": a} for u, a in viewers]

    def test_default_factory_has_ten_viewers(self, make_text_message):
        assert len(make_text_message().viewers) == 10

    @pytest.mark.parametrize(
        "field",
        ["id", "user_id", "content", "is_sent", "viewers", "created_at", "updated_at", "deleted_at"],
    )
    def test_unset_field_fails(self, field):
        with pytest.raises(DomainLogicError, match=f"Message's {field} is not set"):
            getattr(TextMessage.build(), field)

    def test_is_deleted(self, make_text_message):
        assert make_text_message().is_deleted is False
        assert make_text_message(deleted_at=datetime.now(timezone.utc)).is_deleted is True

    def test_content_too_long(self):
        with pytest.raises(InvalidArgumentError):
            TextMessage.build().set_content("x" * 1501)


class TestViewers:
    def test_mark_as_viewed_appends_viewer(self, make_text_message):
        message = make_text_message(viewers=[])
        user_id = new_id()
        at = datetime(2024, 4, 4, 10, 0, tzinfo=timezone.utc)

        message.mark_as_viewed(user_id, at)

        assert message.has_been_viewed_by(user_id)
        assert message.viewers == [{"user_id": user_id, "at": at}]

    def test_repeated_views_are_kept(self, make_text_message):
        message = make_text_message(viewers=[])
        user_id = new_id()

        message.mark_as_viewed(user_id)
        message.mark_as_viewed(user_id)

        assert [viewer["user_id"] for viewer in message.viewers] == [user_id, user_id]

    def test_viewer_lookup_ignores_case(self, make_text_message):
        user_id = new_id()
        message = make_text_message(viewers=[(user_id.upper(), datetime.now(timezone.utc))])
        assert message.has_been_viewed_by(user_id)
        assert message.has_been_viewed_by(user_id.upper())
        assert message.viewers[0]["user_id"] == user_id

    def test_not_viewed_by_stranger(self, make_text_message):
        assert not make_text_message().has_been_viewed_by(new_id())

    def test_mark_as_viewed_rejects_invalid_user(self, make_text_message):
        message = make_text_message(viewers=[])
        with pytest.raises(InvalidArgumentError):
            message.mark_as_viewed("someone")
        assert message.viewers == []


class TestUpdates:
    def test_update_content(self, make_text_message):
        old = datetime(2020, 1, 1, tzinfo=timezone.utc)
        message = make_text_message(updated_at=old)

        message.update_content("  edited  ")

        assert message.content == "edited"
        assert message.updated_at > old

    def test_update_content_rejects_blank(self, make_text_message):
        message = make_text_message(content="original")
        with pytest.raises(InvalidArgumentError):
            message.update_content("   ")
        assert message.content == "original"

    def test_mark_as_sent(self, make_text_message):
        old = datetime(2020, 1, 1, tzinfo=timezone.utc)
        message = make_text_message(is_sent=False, updated_at=old)

        message.mark_as_sent()

        assert message.is_sent is True
        assert message.updated_at > old


class TestCreate:
    def test_create(self):
        user_id = new_id()

        message = TextMessage.create(user_id, "  hello  ")

        assert message.content == "hello"
        assert message.user_id == user_id
        assert message.type is MessageTypeEnum.TEXT
        assert message.is_sent is False
        assert message.viewers == []
        assert message.is_deleted is False
        assert message.created_at == message.updated_at

    def test_create_generates_distinct_ids(self):
        user_id = new_id()
        assert TextMessage.create(user_id, "a").id != TextMessage.create(user_id, "b").id

    def test_create_rejects_empty_text(self):
        with pytest.raises(InvalidArgumentError):
            TextMessage.create(new_id(), "")

    def test_restore(self):
        message_id, user_id, viewer = new_id(), new_id(), new_id()
        at = datetime(2023, 6, 1, tzinfo=timezone.utc)

        message = TextMessage.restore(
            id=message_id,
            user_id=user_id,
            content="stored",
            is_sent=True,
            viewers=[(viewer, at)],
            created_at=at,
            updated_at=at,
        )

        assert message.id == message_id
        assert message.has_been_viewed_by(viewer)
        assert message.deleted_at is None
