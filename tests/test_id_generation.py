"""Tests for id generation retries in the entity factories."""

import logging
from uuid import UUID, uuid4

import pytest

from chat_core.domain.entities import ChatRoom, TextMessage, User
from chat_core.domain.exceptions import (
    ChatRoomCreationError,
    MessageCreationError,
    UserCreationError,
)
from chat_core.domain.value_objects import uuid_value_object


@pytest.fixture()
def flaky_uuid(monkeypatch):
    """Make uuid4 fail a configurable number of times before succeeding."""
    state = {"failures": 0, "calls": 0}

    def fake_uuid4() -> UUID:
        state["calls"] += 1
        if state["calls"] <= state["failures"]:
            raise OSError("entropy source unavailable")
        return uuid4()

    monkeypatch.setattr(uuid_value_object, "uuid4", fake_uuid4)
    return state


FACTORIES = [
    (
        lambda: User.create("Juan", "Forner", None, "juan@test.com"),
        UserCreationError,
    ),
    (
        lambda: ChatRoom.create("General", "", str(uuid4()), [str(uuid4())]),
        ChatRoomCreationError,
    ),
    (
        lambda: TextMessage.create(str(uuid4()), "hello"),
        MessageCreationError,
    ),
]


class TestIdGeneration:
    @pytest.mark.parametrize("factory, error", FACTORIES)
    def test_fails_after_three_attempts(self, flaky_uuid, factory, error):
        flaky_uuid["failures"] = 3

        with pytest.raises(error, match="after 3 attempts") as exc_info:
            factory()

        assert flaky_uuid["calls"] == 3
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.parametrize("factory, error", FACTORIES)
    def test_recovers_on_third_attempt(self, flaky_uuid, factory, error):
        flaky_uuid["failures"] = 2

        entity = factory()

        assert flaky_uuid["calls"] == 3
        assert UUID(entity.id)

    def test_each_failure_is_logged(self, flaky_uuid, caplog):
        flaky_uuid["failures"] = 2

        with caplog.at_level(logging.WARNING, logger="chat_core"):
            TextMessage.create(str(uuid4()), "hello")

        warnings = [r for r in caplog.records if "Failed to generate MessageId" in r.getMessage()]
        assert len(warnings) == 2
