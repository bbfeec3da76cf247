"""
UserSawChatRoomEvent - Recorded when a member opens a chat room.
"""

from datetime import datetime

from chat_core.domain.events.event import Event


class UserSawChatRoomEvent(Event):
    def __init__(self, user: str, at: datetime):
        self._user = user
        self._at = at

    @property
    def user(self) -> str:
        return self._user

    @property
    def at(self) -> datetime:
        return self._at

    def payload(self) -> dict[str, str]:
        return {
            "user": self._user,
            "at": self._at.strftime(self.DATE_FORMAT),
        }

    def __repr__(self) -> str:
        return f"UserSawChatRoomEvent(user={self._user!r}, at={self._at.isoformat()})"
