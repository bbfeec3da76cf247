"""Tests for domain events."""

from datetime import datetime

import pytest

from chat_core.domain.events import Event, UserSawChatRoomEvent


class TestUserSawChatRoomEvent:
    def test_payload_formats_date_to_minutes(self):
        event = UserSawChatRoomEvent(user="u-1", at=datetime(2024, 12, 31, 23, 59, 58))
        assert event.get_payload() == {"user": "u-1", "at": "2024-12-31 23:59"}

    def test_accessors(self):
        at = datetime(2024, 1, 1, 8, 0)
        event = UserSawChatRoomEvent(user="u-1", at=at)
        assert event.user == "u-1"
        assert event.at is at
        assert event.name == "UserSawChatRoomEvent"

    def test_event_is_abstract(self):
        with pytest.raises(TypeError):
            Event()
