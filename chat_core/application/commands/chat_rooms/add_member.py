"""Add Chat Room Member Command - only the creator may invite users."""

import logging
from dataclasses import dataclass

from chat_core.application.common.guards import require_found, require_live_chat_room
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import ChatRoom
from chat_core.domain.exceptions import AccessDeniedError
from chat_core.domain.ports.repositories import ChatRoomRepository, UserRepository
from chat_core.domain.value_objects import ChatRoomId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddChatRoomMemberCommand(Command[ChatRoom]):
    chat_room_id: ChatRoomId
    requester_id: UserId
    user_id: UserId


class AddChatRoomMemberHandler(CommandHandler[ChatRoom]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        user_repository: UserRepository,
    ):
        self._chat_room_repository = chat_room_repository
        self._user_repository = user_repository

    async def execute(self, command: AddChatRoomMemberCommand) -> ChatRoom:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(command.chat_room_id),
            command.chat_room_id,
        )
        if chat_room.creator_id != command.requester_id.value:
            raise AccessDeniedError(
                f"User {command.requester_id.value} cannot add members to chat room {chat_room.id}"
            )
        require_found(
            await self._user_repository.get_by_id(command.user_id),
            "User",
            command.user_id,
        )

        chat_room.add_member(command.user_id.value)
        await self._chat_room_repository.save(chat_room)
        logger.info("User %s joined chat room %s", command.user_id.value, chat_room.id)
        return chat_room
