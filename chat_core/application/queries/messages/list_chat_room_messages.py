"""
ListChatRoomMessages Query - Latest messages of a chat room.

Used by the chat window to load history when a member opens a room.
Messages come back oldest first.
"""

from dataclasses import dataclass

from chat_core.application.common.guards import require_live_chat_room, require_member
from chat_core.application.common.interfaces import Query, QueryHandler
from chat_core.config.settings import Config
from chat_core.domain.entities import TextMessage
from chat_core.domain.ports.repositories import ChatRoomRepository, MessageRepository
from chat_core.domain.value_objects import ChatRoomId, MessageId, UserId


@dataclass(frozen=True)
class ListChatRoomMessagesQuery(Query[list[TextMessage]]):
    chat_room_id: ChatRoomId
    requester_id: UserId
    limit: int = Config.CHAT_ROOM_MESSAGE_LIMIT


class ListChatRoomMessagesHandler(QueryHandler[list[TextMessage]]):
    def __init__(
        self,
        chat_room_repository: ChatRoomRepository,
        message_repository: MessageRepository,
    ):
        self._chat_room_repository = chat_room_repository
        self._message_repository = message_repository

    async def execute(self, query: ListChatRoomMessagesQuery) -> list[TextMessage]:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(query.chat_room_id),
            query.chat_room_id,
        )
        require_member(chat_room, query.requester_id)

        if query.limit <= 0:
            return []
        return await self._message_repository.get_many(
            [MessageId(message_id) for message_id in chat_room.messages],
            limit=query.limit,
        )
