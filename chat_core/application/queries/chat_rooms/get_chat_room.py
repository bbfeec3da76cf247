"""Get Chat Room Query - only members can see a chat room."""

from dataclasses import dataclass

from chat_core.application.common.guards import require_live_chat_room, require_member
from chat_core.application.common.interfaces import Query, QueryHandler
from chat_core.domain.entities import ChatRoom
from chat_core.domain.ports.repositories import ChatRoomRepository
from chat_core.domain.value_objects import ChatRoomId, UserId


@dataclass(frozen=True)
class GetChatRoomQuery(Query[ChatRoom]):
    chat_room_id: ChatRoomId
    requester_id: UserId


class GetChatRoomHandler(QueryHandler[ChatRoom]):
    def __init__(self, chat_room_repository: ChatRoomRepository):
        self._chat_room_repository = chat_room_repository

    async def execute(self, query: GetChatRoomQuery) -> ChatRoom:
        chat_room = require_live_chat_room(
            await self._chat_room_repository.get_by_id(query.chat_room_id),
            query.chat_room_id,
        )
        require_member(chat_room, query.requester_id)
        return chat_room
