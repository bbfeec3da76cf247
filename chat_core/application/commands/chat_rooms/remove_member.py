"""
Remove Chat Room Member Command.

The creator may remove anyone; any other member may only remove themselves.
"""

import logging
from dataclasses import dataclass

from chat_core.application.common.guards import require_live_chat_room
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import ChatRoom
from chat_core.domain.exceptions import AccessDeniedError
from chat_core.domain.ports.repositories import ChatRoomRepository
from chat_core.domain.value_objects import ChatRoomId, UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoveChatRoomMemberCommand(Command[ChatRoom]):
    chat_room_id: ChatRoomId
    requester_id: UserId
    user_id: UserId


class RemoveChatRoomMemberHandler(CommandHandler[ChatRoom]):
    def __init__(self, chat_room_repository: ChatRoomRepository):
        self._chat_room_repository = chat_room_repository

    async def execute(self, command: RemoveChatRoomMemberCommand) -> ChatRoom:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(command.chat_room_id),
            command.chat_room_id,
        )
        requester = command.requester_id.value
        if requester != chat_room.creator_id and requester != command.user_id.value:
            raise AccessDeniedError(
                f"User {requester} cannot remove members from chat room {chat_room.id}"
            )

        chat_room.remove_member(command.user_id.value)
        await self._chat_room_repository.save(chat_room)
        logger.info("User %s left chat room %s", command.user_id.value, chat_room.id)
        return chat_room
