"""Edit Text Message Command - only the author may change the content."""

import logging
from dataclasses import dataclass

from chat_core.application.common.guards import require_found
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import TextMessage
from chat_core.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chat_core.domain.ports.repositories import MessageRepository
from chat_core.domain.value_objects import MessageId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditTextMessageCommand(Command[TextMessage]):
    message_id: MessageId
    user_id: UserId
    text: str


class EditTextMessageHandler(CommandHandler[TextMessage]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: EditTextMessageCommand) -> TextMessage:
        message = require_found(
            await self._message_repository.get_by_id(command.message_id),
            "Message",
            command.message_id,
        )
        if message.is_deleted:
            raise EntityNotFoundError(f"Message {command.message_id.value} not found")
        if message.user_id != command.user_id.value:
            raise AccessDeniedError(
                f"User {command.user_id.value} cannot edit message {message.id}"
            )

        message.update_content(command.text)
        await self._message_repository.save(message)
        logger.info("Message %s edited", message.id)
        return message
