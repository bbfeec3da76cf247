"""
Create Chat Room Command.

The creator and every initial member must be existing users. The creator is
a member implicitly; repeating it in `members` raises UserAlreadyInChatRoomError.
"""

import logging
from dataclasses import dataclass

from chat_core.application.common.guards import require_found
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import ChatRoom
from chat_core.domain.ports.repositories import ChatRoomRepository, UserRepository
from chat_core.domain.value_objects import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateChatRoomCommand(Command[ChatRoom]):
    creator_id: UserId
    name: str
    description: str
    members: tuple[UserId, ...]


class CreateChatRoomHandler(CommandHandler[ChatRoom]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        user_repository: UserRepository,
    ):
        self._chat_room_repository = chat_room_repository
        self._user_repository = user_repository

    async def execute(self, command: CreateChatRoomCommand) -> ChatRoom:
        for user_id in (command.creator_id, *command.members):
            require_found(
                await self._user_repository.get_by_id(user_id), "User", user_id
            )

        chat_room = ChatRoom.create(
            name=command.name,
            description=command.description,
            creator_id=command.creator_id.value,
            members=[member.value for member in command.members],
        )
        await self._chat_room_repository.save(chat_room)
        logger.info(
            "Chat room %s created by %s with %d members",
            chat_room.id,
            chat_room.creator_id,
            chat_room.members_count,
        )
        return chat_room
