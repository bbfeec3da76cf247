"""
Send Text Message Command.

Handler:
1. Load the chat room (deleted rooms count as missing)
2. Verify the author is a member
3. Create the message and record its id on the chat room
4. Mark it sent and save both aggregates
"""

import logging
from dataclasses import dataclass

from chat_core.application.common.guards import require_live_chat_room
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import TextMessage
from chat_core.domain.exceptions import UserDoesNotPertainToChatRoomError
from chat_core.domain.ports.repositories import ChatRoomRepository, MessageRepository
from chat_core.domain.value_objects import ChatRoomId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendTextMessageCommand(Command[TextMessage]):
    chat_room_id: ChatRoomId
    user_id: UserId
    text: str


class SendTextMessageHandler(CommandHandler[TextMessage]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._chat_room_repository = chat_room_repository
        self._message_repository = message_repository

    async def execute(self, command: SendTextMessageCommand) -> TextMessage:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(command.chat_room_id),
            command.chat_room_id,
        )
        if not chat_room.has_member(command.user_id.value):
            raise UserDoesNotPertainToChatRoomError(
                f"User {command.user_id.value} is not a member of chat room {chat_room.id}"
            )

        message = TextMessage.create(command.user_id.value, command.text)
        chat_room.add_message(message.id)
        message.mark_as_sent()

        await self._message_repository.save(message)
        await self._chat_room_repository.save(chat_room)
        logger.info(
            "Message %s sent to chat room %s by %s",
            message.id,
            chat_room.id,
            message.user_id,
        )
        return message
