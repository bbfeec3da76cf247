"""
DOMAIN EVENTS - Facts recorded by entities for the event-publishing layer
"""

from chat_core.domain.events.event import Event
from chat_core.domain.events.user_saw_chat_room import UserSawChatRoomEvent

__all__ = ["Event", "UserSawChatRoomEvent"]
