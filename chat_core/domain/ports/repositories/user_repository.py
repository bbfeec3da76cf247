"""
User Repository Port - Interface for user persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional

from chat_core.domain.entities.user import User
from chat_core.domain.value_objects import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def save(self, user: User) -> None: ...
