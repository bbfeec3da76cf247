"""
Mark Chat Room As Viewed Command.

Records that a member opened the chat room and publishes the resulting
UserSawChatRoomEvent. The chat room itself is not persisted, the event is the
only output.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chat_core.application.common.guards import require_live_chat_room
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import ChatRoom
from chat_core.domain.ports import EventPublisherPort
from chat_core.domain.ports.repositories import ChatRoomRepository
from chat_core.domain.value_objects import ChatRoomId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkChatRoomAsViewedCommand(Command[ChatRoom]):
    chat_room_id: ChatRoomId
    user_id: UserId
    at: Optional[datetime] = None


class MarkChatRoomAsViewedHandler(CommandHandler[ChatRoom]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        event_publisher: EventPublisherPort,
    ):
        self._chat_room_repository = chat_room_repository
        self._event_publisher = event_publisher

    async def execute(self, command: MarkChatRoomAsViewedCommand) -> ChatRoom:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(command.chat_room_id),
            command.chat_room_id,
        )

        chat_room.mark_messages_as_viewed(command.user_id.value, command.at)
        events = chat_room.pull_events()
        await self._event_publisher.publish(events)
        logger.debug(
            "Published %d event(s) for chat room %s", len(events), chat_room.id
        )
        return chat_room
