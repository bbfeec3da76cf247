"""
Base interfaces for CQRS pattern.

Commands change one aggregate and return it; queries only read. Both are
frozen dataclasses holding value objects, and their handlers receive the
ports they need through __init__.

Usage:
    @dataclass(frozen=True)
    class AddChatRoomMemberCommand(Command[ChatRoom]):
        chat_room_id: ChatRoomId
        requester_id: UserId
        user_id: UserId

    class AddChatRoomMemberHandler(CommandHandler[ChatRoom]):
        def __init__(self, chat_room_repository: ChatRoomRepository):
            self._chat_room_repository = chat_room_repository

        async def execute(self, command: AddChatRoomMemberCommand) -> ChatRoom:
            chat_room = require_found(
                await self._chat_room_repository.get_by_id(command.chat_room_id),
                "Chat room",
                command.chat_room_id,
            )
            chat_room.add_member(command.user_id.value)
            await self._chat_room_repository.save(chat_room)
            return chat_room
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Apply the command and return the changed aggregate"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Run the query and return a result of type T"""
        ...
