"""Get User Query."""

from dataclasses import dataclass

from chat_core.application.common.guards import require_found
from chat_core.application.common.interfaces import Query, QueryHandler
from chat_core.domain.entities import User
from chat_core.domain.ports.repositories import UserRepository
from chat_core.domain.value_objects import UserId


@dataclass(frozen=True)
class GetUserQuery(Query[User]):
    user_id: UserId


class GetUserHandler(QueryHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> User:
        return require_found(
            await self._user_repository.get_by_id(query.user_id), "User", query.user_id
        )
