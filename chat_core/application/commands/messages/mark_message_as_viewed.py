"""Mark Message As Viewed Command - a member saw one message of a chat room."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chat_core.application.common.guards import (
    require_found,
    require_live_chat_room,
    require_member,
)
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import TextMessage
from chat_core.domain.exceptions import EntityNotFoundError
from chat_core.domain.ports.repositories import ChatRoomRepository, MessageRepository
from chat_core.domain.value_objects import ChatRoomId, MessageId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkMessageAsViewedCommand(Command[TextMessage]):
    chat_room_id: ChatRoomId
    message_id: MessageId
    user_id: UserId
    at: Optional[datetime] = None


class MarkMessageAsViewedHandler(CommandHandler[TextMessage]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._chat_room_repository = chat_room_repository
        self._message_repository = message_repository

    async def execute(self, command: MarkMessageAsViewedCommand) -> TextMessage:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(command.chat_room_id),
            command.chat_room_id,
        )
        require_member(chat_room, command.user_id)
        if not chat_room.has_message(command.message_id.value):
            raise EntityNotFoundError(
                f"Message {command.message_id.value} not found in chat room {chat_room.id}"
            )
        message = require_found(
            await self._message_repository.get_by_id(command.message_id),
            "Message",
            command.message_id,
        )

        message.mark_as_viewed(command.user_id.value, command.at)
        await self._message_repository.save(message)
        logger.debug("Message %s viewed by %s", message.id, command.user_id.value)
        return message
