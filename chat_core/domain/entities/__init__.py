"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Is assembled with build() + set_*(), restore(...) or create(...)
- Pure Python classes (no ORM, no Pydantic)
"""

from chat_core.domain.entities.entity import Entity
from chat_core.domain.entities.user import User
from chat_core.domain.entities.chat_room import ChatRoom
from chat_core.domain.entities.message import Message
from chat_core.domain.entities.text_message import TextMessage

__all__ = [
    "Entity",
    "User",
    "ChatRoom",
    "Message",
    "TextMessage",
]
