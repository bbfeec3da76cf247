"""Update User Command - partial update of a user's profile."""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_core.application.common.guards import require_found
from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import User
from chat_core.domain.ports.repositories import UserRepository
from chat_core.domain.value_objects import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateUserCommand(Command[User]):
    """Fields left as None are not changed."""

    user_id: UserId
    name: Optional[str] = None
    first_last_name: Optional[str] = None
    second_last_name: Optional[str] = None
    email: Optional[str] = None
    can_exec_commands: Optional[bool] = None


class UpdateUserHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateUserCommand) -> User:
        user = require_found(
            await self._user_repository.get_by_id(command.user_id),
            "User",
            command.user_id,
        )

        user.bulk_update(
            name=command.name,
            first_last_name=command.first_last_name,
            second_last_name=command.second_last_name,
            email=command.email,
            can_exec_commands=command.can_exec_commands,
        )
        await self._user_repository.save(user)
        logger.info("Updated user %s", user.id)
        return user
