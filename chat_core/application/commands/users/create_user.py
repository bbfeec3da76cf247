"""Create User Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from chat_core.application.common.interfaces import Command, CommandHandler
from chat_core.domain.entities import User
from chat_core.domain.ports.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateUserCommand(Command[User]):
    name: str
    first_last_name: str
    email: str
    second_last_name: Optional[str] = None


class CreateUserHandler(CommandHandler[User]):
    _user_repository: UserRepository

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: CreateUserCommand) -> User:
        user = User.create(
            name=command.name,
            first_last_name=command.first_last_name,
            second_last_name=command.second_last_name,
            email=command.email,
        )
        await self._user_repository.save(user)
        logger.info("Created user %s", user.id)
        return user
